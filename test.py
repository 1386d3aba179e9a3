#!/usr/bin/env python

"""
Run tests for qmetric.

Usage:

./test.py
    - run all tests

./test.py --cov=qmetric
    - run all tests with coverage report (requires pytest-cov)
"""

import os
import sys

import pytest


def addpath(path):
    """
    Add a directory to the python path environment, and to the PYTHONPATH
    environment variable for subprocesses.
    """
    path = os.path.abspath(path)
    if 'PYTHONPATH' in os.environ:
        PYTHONPATH = path + os.pathsep + os.environ['PYTHONPATH']
    else:
        PYTHONPATH = path
    os.environ['PYTHONPATH'] = PYTHONPATH
    sys.path.insert(0, path)

sys.dont_write_bytecode = True

# Check that we are running from the root.
root = os.path.abspath(os.getcwd())
assert os.path.exists(
    os.path.join(root, 'qmetric', 'cli.py')), "Not in qmetric root"
addpath(root)

# Test functions live beside the code; doctests come from the docstrings.
# Collection settings are in pytest.ini.
pytest_args = ['-v']
pytest_args += sys.argv[1:]  # allow coverage arguments
pytest_args += [os.path.join(root, 'qmetric')]

print("pytest " + " ".join(pytest_args))
sys.exit(pytest.main(pytest_args))
