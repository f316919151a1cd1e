# SPDX-License-Identifier: AGPL-3.0-or-later
import os
from setuptools import setup, find_packages
import subprocess


install_requires = [
    'ujson>=1.35'
]

extras_require = {
    'color': ['colorlog'],
    'tests': ['pytest'],
}


version = '0.0.0+unreleased'
here = os.path.abspath(os.path.dirname(__file__))
if os.path.exists(os.path.join(here, '.version')):
    with open(os.path.join(here, '.version'), 'r') as version_file:
        version = version_file.read().strip()
elif os.path.exists(os.path.join(here, '.git')):
    cmd = 'git describe --tags --always --dirty --match=v*'
    v = subprocess.check_output(cmd.split(' '), cwd=here).decode('utf-8').replace('-', '+', 1)
    if v.startswith('v'):
        v = v[1:]
    version = v.strip()

setup(
    name='preferheader',
    version=version,

    description='Parser and serializer for the HTTP Prefer header (RFC 7240)',
    long_description='',

    license='AGPL',

    install_requires=install_requires,
    extras_require=extras_require,

    packages=find_packages(include=['preferheader', 'preferheader.*']),
    zip_safe=False,

    entry_points={
        'console_scripts': [
            'prefer-header = preferheader.cli.__main__:main'
        ]
    }
)
