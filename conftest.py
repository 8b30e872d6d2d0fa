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

import pytest

_implicit_markers = {'default'}


def pytest_collection_modifyitems(items):
    """
    This method will mark any unmarked tests with the implicit marker ('default')

    """
    for item in items:
        try:
            next(item.iter_markers())
        except StopIteration:
            for marker in _implicit_markers:
                item.add_marker(getattr(pytest.mark, marker))


def pytest_runtest_setup(item):
    """
    This method overrides pytest's default behavior for marked tests.

    If the user asked for a specific marker using the '-m' flag, we
    return to pytest's default behavior.  Otherwise, unmarked tests and
    tests carrying the implicit markers run, and tests marked with any
    other category (e.g., "expensive") are skipped.
    """
    markeroption = item.config.getoption("-m")
    item_markers = set(mark.name for mark in item.iter_markers())
    if markeroption:
        return
    elif item_markers:
        if not _implicit_markers.issubset(item_markers):
            pytest.skip('SKIPPED: Only running default and unmarked tests.')


def pytest_configure(config):
    """
    Register the markers used by the pysets test suite.
    This stops pytest from printing a warning about unregistered markers.
    """
    config.addinivalue_line("markers", "default: mark test to run by default")
    config.addinivalue_line(
        "markers", "expensive: mark test as too slow for the default suite"
    )
