from setuptools import setup

config = {
    'description': 'osinfo - Linux distribution and kernel release introspection',
    'long_description': 'Identify the host Linux distribution from os-release, '
                        'and compare kernel releases against the running kernel.',
    'version': '1.0.0',
    'packages': ['osinfo', 'osinfo.commands', 'osinfo.sys_vars'],
    'package_dir': {'': 'lib'},
    'python_requires': '>=3.6',
    'install_requires': ['Yapsy>=1.12'],
    'extras_require': {'test': ['pytest']},
    'entry_points': {'console_scripts': ['osinfo = osinfo.main:main']},
    'name': 'osinfo'
}

setup(**config)
