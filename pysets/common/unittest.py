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

import re
from collections import Counter

# Now, import the base unittest environment.  We will override things
# specifically later
from unittest import *
import unittest as _unittest


class _AssertRaisesContext_NormalizeWhitespace(_unittest.case._AssertRaisesContext):
    def __exit__(self, exc_type, exc_value, tb):
        try:
            _save_re = self.expected_regex
            self.expected_regex = None
            if not super().__exit__(exc_type, exc_value, tb):
                return False
        finally:
            self.expected_regex = _save_re

        exc_value = re.sub(r'(?s)\s+', ' ', str(exc_value))
        if not _save_re.search(exc_value):
            self._raiseFailure(
                '"{}" does not match "{}"'.format(_save_re.pattern, exc_value)
            )
        return True


class TestCase(_unittest.TestCase):
    """A pysets-specific class whose instances are single test cases.

    This class derives from unittest.TestCase and provides the following
    additional functionality:

    * additional assertions:
       - :py:meth:`~TestCase.assertSetMembers`

    * updated assertions:
       - :py:meth:`assertRaisesRegex`

    """

    # By default, we always want to spend the time to create the full
    # diff of the test result and the baseline
    maxDiff = None

    def assertSetMembers(self, container, expected, msg=None):
        """Assert that a container holds exactly the expected members.

        Membership is compared without regard to order.  The container's
        ``values()`` must report every member exactly once.

        Parameters
        ----------
        container : HashSet
            The container under test.

        expected : Iterable
            The expected members (duplicates are ignored).

        msg : str
            Optional message used in case of failure.
        """
        values = container.values()
        dups = sorted(
            (repr(k) for k, n in Counter(values).items() if n > 1),
        )
        if dups:
            self.fail(
                self._formatMessage(
                    msg, "values() reported duplicate members: %s" % ', '.join(dups)
                )
            )
        self.assertCountEqual(values, set(expected), msg)
        self.assertEqual(container.size(), len(set(expected)), msg)

    def assertRaisesRegex(self, expected_exception, expected_regex, *args, **kwargs):
        """Asserts that the message in a raised exception matches a regex.

        This is a light weight wrapper around
        :py:meth:`unittest.TestCase.assertRaisesRegex` that adds
        handling of a `normalize_whitespace` keyword argument that
        normalizes all consecutive whitespace in the exception message
        to a single space before checking the regular expression.

        """
        normalize_whitespace = kwargs.pop('normalize_whitespace', False)
        if normalize_whitespace:
            contextClass = _AssertRaisesContext_NormalizeWhitespace
        else:
            contextClass = _unittest.case._AssertRaisesContext
        context = contextClass(expected_exception, self, expected_regex)
        return context.handle('assertRaisesRegex', args, kwargs)
