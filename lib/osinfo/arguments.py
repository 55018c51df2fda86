"""The osinfo argument parser. The base parser holds the global options;
each command adds its own sub-command parser when activated."""

# pylint: disable=W0603

import argparse

from . import config

_OSINFO_PARSER = None
_OSINFO_SUB_PARSER = None


def get_parser() -> argparse.ArgumentParser:
    """Return the base osinfo parser, creating it on first use."""

    global _OSINFO_PARSER
    global _OSINFO_SUB_PARSER

    if _OSINFO_PARSER is None:
        parser = argparse.ArgumentParser(
            prog='osinfo',
            description="Report on the host's Linux distribution and kernel "
                        "release.")
        parser.add_argument('--quiet', action='store_true', default=False,
                            help="Only log errors.")
        parser.add_argument('--verbose', '-v', action='store_true', default=False,
                            help="Log debugging information to stderr.")
        parser.add_argument('--version', action='version',
                            version='osinfo ' + config.get_version())

        _OSINFO_SUB_PARSER = parser.add_subparsers(dest='command_name')
        _OSINFO_PARSER = parser

    return _OSINFO_PARSER


def get_subparser():
    """The sub-command parser group commands add themselves to.

    :rtype: argparse._SubParsersAction
    """

    if _OSINFO_SUB_PARSER is None:
        raise RuntimeError("get_parser() must be called before get_subparser().")

    return _OSINFO_SUB_PARSER


def reset_parser():
    """Start over with a fresh base parser that has no sub-commands. For
    unittests only."""

    global _OSINFO_PARSER
    global _OSINFO_SUB_PARSER

    _OSINFO_PARSER = None
    _OSINFO_SUB_PARSER = None
    get_parser()
