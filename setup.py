#!/usr/bin/env python
import sys
import os
import re

if len(sys.argv) == 1:
    sys.argv.append('install')

# Use our own pytest-based test harness
if sys.argv[1] == 'test':
    from subprocess import call
    sys.exit(call([sys.executable, 'test.py'] + sys.argv[2:]))

from setuptools import setup, find_packages

# Read the version without importing qmetric
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "qmetric", "__init__.py")) as fid:
    version = re.search(r"^__version__ = \"([^\"]*)\"", fid.read(), re.M).group(1)

packages = find_packages(include=['qmetric', 'qmetric.*'])

dist = setup(
    name='qmetric',
    version=version,
    description='Mahalanobis and Lp distance metrics for generic numeric algorithms',
    long_description=open('README.rst').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: Public Domain',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    packages=packages,
    entry_points={
        'console_scripts': ['qmetric = qmetric.cli:main'],
    },
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
    },
)

# End of file
