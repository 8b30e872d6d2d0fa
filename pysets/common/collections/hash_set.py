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

import logging
from collections.abc import MutableSet, Set

from pysets.common.config import sets_config
from pysets.common.errors import InvalidArgumentError
from pysets.common.log import is_debug_set

logger = logging.getLogger('pysets.collections')


def _check_operand(operation, other):
    if other is None:
        raise InvalidArgumentError(
            "HashSet.%s() requires a set as its operand, but received None"
            % (operation,)
        )
    if not isinstance(other, Set):
        raise TypeError(
            "HashSet.%s() expected a Set, but received '%s'"
            % (operation, type(other).__name__)
        )


class HashSet(MutableSet):
    """An unordered collection of unique, hashable members.

    The members are stored as the keys of a dict that maps each member
    to a membership marker (None), so membership tests, insertion and
    removal are expected O(1).  Iteration order is unspecified and may
    change between calls.

    The set-algebra methods (:py:meth:`union`, :py:meth:`intersect`,
    :py:meth:`difference`) and :py:meth:`clone` always return a new
    HashSet that shares no storage with either operand.  They accept
    any :py:class:`collections.abc.Set` as the second operand and raise
    :py:class:`~pysets.common.errors.InvalidArgumentError` when it is
    None: a missing operand is never treated as an empty set.

    Unlike :py:meth:`set.remove`, :py:meth:`remove` accepts any number
    of values and silently ignores those that are not members.

    HashSet does no internal locking.  Instances shared between threads
    must be guarded by the caller.
    """

    __slots__ = ('_data',)

    def __init__(self, iterable=None):
        # maps member -> None
        self._data = {}
        if iterable is not None:
            if isinstance(iterable, str) and sets_config.warn_on_str_init:
                logger.warning(
                    "Creating a HashSet from the string %r: each character "
                    "becomes a separate member.  Use new_set(%r) to store "
                    "the string itself." % (iterable, iterable)
                )
            self.update(iterable)

    def __str__(self):
        """String representation of the set (for debugging only)."""
        members = list(self._data)
        if sets_config.sorted_repr:
            try:
                members = sorted(members)
            except TypeError:
                # members are not mutually orderable
                pass
        limit = sets_config.repr_limit
        if limit and len(members) > limit:
            body = ', '.join(repr(x) for x in members[:limit]) + ', ...'
        else:
            body = ', '.join(repr(x) for x in members)
        return "%s([%s])" % (self.__class__.__name__, body)

    __repr__ = __str__

    def update(self, *iterables):
        """Add every member of each of the iterables."""
        for iterable in iterables:
            if isinstance(iterable, HashSet):
                self._data.update(iterable._data)
            else:
                self._data.update((val, None) for val in iterable)

    #
    # Implement MutableSet abstract methods
    #

    def __contains__(self, val):
        return val in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def add(self, *values):
        """Add one or more members.  Existing members are left alone."""
        for val in values:
            self._data[val] = None

    def discard(self, val):
        """Remove a member.  Do not raise an exception if absent."""
        self._data.pop(val, None)

    #
    # Overload MutableSet default implementations
    #

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) == len(other) and all(val in self._data for val in other)

    def __ne__(self, other):
        return not (self == other)

    def __or__(self, other):
        if isinstance(other, Set):
            return self.union(other)
        return super().__or__(other)

    def __and__(self, other):
        if isinstance(other, Set):
            return self.intersect(other)
        return super().__and__(other)

    def __sub__(self, other):
        if isinstance(other, Set):
            return self.difference(other)
        return super().__sub__(other)

    def clear(self):
        """Remove all members from this set."""
        self._data.clear()

    def remove(self, *values):
        """Remove each of the values that is a member; ignore the rest."""
        for val in values:
            self._data.pop(val, None)

    #
    # Membership and size queries
    #

    def size(self):
        """Return the number of members."""
        return len(self._data)

    def is_empty(self):
        return not self._data

    def has(self, val):
        """Return True if `val` is a member."""
        return val in self._data

    def contains(self, *values):
        """Return True if every one of the values is a member.

        This is vacuously True when called without arguments.
        """
        _data = self._data
        return all(val in _data for val in values)

    def add_if_not_exist(self, val):
        """Add `val` if it is not already a member.

        Returns True if `val` was added, False if it was already present.
        """
        if val in self._data:
            return False
        self._data[val] = None
        return True

    def values(self):
        """Return a new list holding each member once, in no particular order."""
        return list(self._data)

    #
    # Derived sets
    #

    def clone(self):
        """Return a new HashSet with the same members and its own storage."""
        ans = self.__class__()
        ans._data = self._data.copy()
        return ans

    __copy__ = clone

    def union(self, other):
        """Return a new set with the members of this set and `other`.

        A union is the set of all elements that appear in either set
        (A ∪ B).  It is commutative: ``a.union(b) == b.union(a)``.
        """
        _check_operand('union', other)
        ans = self.clone()
        ans.update(other)
        return ans

    def intersect(self, other):
        """Return a new set with the members common to this set and `other`.

        An intersection is the set of all elements that appear in both
        sets (A ∩ B).  It is commutative.  The smaller of the two
        operands is scanned and each of its members is looked up in the
        larger one, so the work is bounded by min(len(self), len(other))
        membership tests.
        """
        _check_operand('intersect', other)
        if len(self) > len(other):
            small, large = other, self
        else:
            small, large = self, other
        if is_debug_set(logger):
            logger.debug(
                "HashSet.intersect: scanning %s members of the %s operand "
                "against %s members",
                len(small),
                'left' if small is self else 'right',
                len(large),
            )
        ans = self.__class__()
        _ans = ans._data
        for val in small:
            if val in large:
                _ans[val] = None
        return ans

    def difference(self, other):
        """Return a new set with the members of this set not in `other`.

        The set difference (A - B) is noncommutative: ``a.difference(b)``
        and ``b.difference(a)`` generally differ, and
        ``a.difference(a)`` is always empty.
        """
        _check_operand('difference', other)
        ans = self.__class__()
        ans._data = {val: None for val in self._data if val not in other}
        return ans


def new_set(*values):
    """Return a new HashSet holding the given values (duplicates collapsed).

    Example::

        >>> new_set(1, 2, 3, 3).size()
        3
    """
    return HashSet(values)


def new_empty_set():
    """Return a new HashSet with no members."""
    return HashSet()
