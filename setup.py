#!/usr/bin/env python

"""
    cssmatrix
    =========

    cssmatrix composes and decomposes 2D affine transformation matrices.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError('cssmatrix does not support Python 2.x.')

setup()
