#!/usr/bin/env python3
import sys

from setuptools import setup

from ppsspp_runner import __version__ as VERSION

if sys.version_info < (3, 7):
    sys.exit('Python 3.7 is required to run PPSSPP Runner')

setup(
    name='ppsspp-runner',
    version=VERSION,
    license='GPL-3',
    packages=[
        'ppsspp_runner',
        'ppsspp_runner.gui',
        'ppsspp_runner.util',
    ],
    scripts=['bin/ppsspp-runner'],
    zip_safe=False,
    install_requires=[
        'PyYAML',
        'PyGObject',
    ],
    extras_require={
        'test': ['pytest'],
    },
    description='Launch PPSSPP on the game of the current workspace',
    long_description="""PPSSPP Runner finds the PPSSPP emulator and the EBOOT.PBP
    of the project you are working on, launches the emulator on it and shows
    a status icon you can click to stop it.""",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python',
        'Operating System :: POSIX :: Linux',
        'Topic :: Games/Entertainment',
        'Topic :: Software Development',
    ],
)
