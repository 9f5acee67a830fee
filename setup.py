#!/usr/bin/env python3

import os
import sys

from setuptools import setup, find_packages

# ignore system-installed unpath if it exists
sys.path.insert(0, os.path.abspath('src'))
from unpath import __version__


setup(
    name='unpath',
    version=__version__,
    description='run a command with a PATH that does not contain a given command',
    license='BSD',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'unpath = unpath.scripts:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
    ],
)
