#!/usr/bin/env python
"""
Run qmetric in place without installing it.

Usage:

./run.py [qmetric cli args]
"""

import os
import sys


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


def prepare():
    #import numpy as np; np.seterr(all='raise')
    root = os.path.abspath(os.path.dirname(__file__))

    # Add the root to the system path
    addpath(root)

if __name__ == "__main__":
    prepare()
    import qmetric.cli
    qmetric.cli.main()
