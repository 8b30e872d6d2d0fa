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


class PysetsException(Exception):
    """
    Base class for pysets exceptions, allowing them to be caught in a
    general way by applications that use pysets.
    Subclasses can define a class-level `default_message` attribute.
    """

    def __init__(self, *args):
        if not args and getattr(self, 'default_message', None):
            args = (self.default_message,)
        return super().__init__(*args)


class InvalidArgumentError(PysetsException, ValueError):
    """Raised when a set operation is given a missing (None) operand.

    Union, intersection, and difference never treat ``None`` as an
    empty set: the caller must pass a set.
    """

    default_message = "The second operand of a set operation must be a set, not None"
