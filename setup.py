#  ___________________________________________________________________________
#
#  pysets: Python finite-set utilities
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

"""
Script to generate the installer for pysets.
"""

import os
from setuptools import setup, find_packages


def import_pysets_module(*path):
    _module_globals = dict(globals())
    _module_globals['__name__'] = None
    _source = os.path.join(os.path.dirname(__file__), *path)
    with open(_source) as _FILE:
        exec(_FILE.read(), _module_globals)
    return _module_globals


def get_version():
    # Source pysets/version/info.py to get the version number
    return import_pysets_module('pysets', 'version', 'info.py')['__version__']


setup(
    name='pysets',
    description='Hash-backed finite set container with explicit set algebra',
    license='BSD',
    python_requires='>=3.9',
    version=get_version(),
    install_requires=[],
    extras_require={
        'tests': ['coverage', 'parameterized', 'pytest'],
    },
    packages=find_packages(exclude=("scripts", "examples", "examples.*")),
)
