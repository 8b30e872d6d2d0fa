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

"""The pysets configuration system.

This module provides a reduced version of the hierarchical
configuration objects used throughout pysets: :class:`ConfigValue`
holds a single validated value and :class:`ConfigDict` holds a
collection of declared values.  Values are validated by "domain"
callables (such as :func:`Bool` or :func:`NonNegativeInt`) that either
return the converted value or raise :py:class:`ValueError`.

The package-wide options live in :data:`sets_config`.
"""

import copy
import textwrap

from collections.abc import Mapping


def Bool(val):
    """Domain validator for bool-like objects.

    This is a more strict domain than ``bool``, as it will error on
    values that do not "look" like a Boolean value (i.e., it accepts
    ``True``, ``False``, 0, 1, and the case insensitive strings
    ``'true'``, ``'false'``, ``'yes'``, ``'no'``, ``'t'``, ``'f'``,
    ``'y'``, and ``'n'``)

    """
    if type(val) is bool:
        return val
    if isinstance(val, str):
        v = val.upper()
        if v in {'TRUE', 'YES', 'T', 'Y', '1'}:
            return True
        if v in {'FALSE', 'NO', 'F', 'N', '0'}:
            return False
    else:
        try:
            if int(val) == float(val) and int(val) in {0, 1}:
                return bool(int(val))
        except (TypeError, ValueError):
            pass
    raise ValueError("Expected Boolean, but received %s" % (val,))


def NonNegativeInt(val):
    """Domain validation function admitting integers >= 0

    This domain will admit non-negative integers (n >= 0), as well as
    any types that are convertible to non-negative integers.

    """
    ans = int(val)
    if ans != float(val) or ans < 0:
        raise ValueError("Expected non-negative int, but received %s" % (val,))
    return ans


def _strip_indentation(doc):
    if not doc:
        return doc
    lines = doc.splitlines()
    if len(lines) == 1:
        return doc.strip()
    return (lines[0].strip() + '\n' + textwrap.dedent('\n'.join(lines[1:]))).strip()


class ConfigBase(object):
    __slots__ = ('_name', '_domain', '_data', '_default', '_description', '_doc')

    def __init__(self, default=None, domain=None, description=None, doc=None):
        self._name = None
        self._domain = domain
        self._default = default
        self._description = _strip_indentation(description)
        self._doc = _strip_indentation(doc)
        self._data = None

    def name(self):
        return self._name

    def domain_name(self):
        _domain = self._domain
        if _domain is None:
            return ''
        return getattr(_domain, '__name__', type(_domain).__name__)

    def _cast(self, value):
        if self._domain is None:
            return value
        try:
            return self._domain(value)
        except Exception as e:
            err = "invalid value for configuration '%s':\n\tFailed casting %s\n\tto %s" % (
                self._name,
                value,
                self.domain_name(),
            )
            err += "\n\tError: %s" % (e,)
            raise ValueError(err) from None

    def reset(self):
        self.set_value(self._default)


class ConfigValue(ConfigBase):
    """Store and manipulate a single configuration value.

    Parameters
    ----------
    default: optional
        The default value that this ConfigValue will take if no value is
        provided.

    domain: Callable, optional
        Any callable that accepts a candidate value and returns the
        value converted to the desired type, optionally performing
        data validation.  Examples include type constructors like
        `int` and the :py:func:`NonNegativeInt` validator.

    description: str, optional
        The short description of this value

    doc: str, optional
        The long documentation string for this value

    """

    __slots__ = ()

    def __init__(self, default=None, domain=None, description=None, doc=None):
        super().__init__(default, domain, description, doc)
        self._data = self._cast(default)

    def value(self):
        return self._data

    def set_value(self, value):
        self._data = self._cast(value)

    def __call__(self, value=NotImplemented):
        ans = copy.copy(self)
        if value is not NotImplemented:
            ans.set_value(value)
        return ans


class ConfigDict(ConfigBase, Mapping):
    """Store and manipulate a dictionary of configuration values.

    Entries must be declared (with :py:meth:`declare`) before they can
    be set.  Declared entries are available both as items
    (``cfg['name']``) and as attributes (``cfg.name``); assignment
    validates the new value through the entry's domain.

    """

    __slots__ = ()
    _reserved_words = {'_name', '_domain', '_data', '_default', '_description', '_doc'}

    def __init__(self, description=None, doc=None):
        super().__init__(None, dict, description, doc)
        self._data = {}

    def __getitem__(self, key):
        _key = str(key).replace(' ', '_')
        return self._data[_key].value()

    def __setitem__(self, key, val):
        _key = str(key).replace(' ', '_')
        if _key not in self._data:
            raise ValueError(
                "key '%s' not defined for ConfigDict '%s' and implicit "
                "(undefined) keys are not allowed" % (key, self._name)
            )
        self._data[_key].set_value(val)

    def __contains__(self, key):
        return str(key).replace(' ', '_') in self._data

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getattr__(self, attr):
        # Only reached after normal attribute lookup fails
        _attr = attr.replace(' ', '_')
        if _attr == '_data' or _attr not in self._data:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{attr}'"
            )
        return ConfigDict.__getitem__(self, _attr)

    def __setattr__(self, name, value):
        if name in ConfigDict._reserved_words:
            super().__setattr__(name, value)
        else:
            ConfigDict.__setitem__(self, name, value)

    def declare(self, name, config):
        _name = str(name).replace(' ', '_')
        if _name in self._data:
            raise ValueError(
                "duplicate config '%s' defined for ConfigDict '%s'" % (name, self._name)
            )
        config._name = name
        self._data[_name] = config
        return config

    def value(self):
        return {k: v.value() for k, v in self._data.items()}

    def set_value(self, value):
        if value is None:
            return
        if not isinstance(value, Mapping):
            raise ValueError(
                "Expected dict value for %s.set_value, found %s"
                % (self._name, type(value).__name__)
            )
        for key, val in value.items():
            self[key] = val

    def reset(self):
        for cfg in self._data.values():
            cfg.reset()

    def __call__(self, value=NotImplemented):
        ans = ConfigDict(self._description, self._doc)
        ans._name = self._name
        for key, cfg in self._data.items():
            ans._data[key] = cfg()
        if value is not NotImplemented:
            ans.set_value(value)
        return ans


sets_config = ConfigDict(description="Options controlling pysets containers")
sets_config.declare(
    'repr_limit',
    ConfigValue(
        default=0,
        domain=NonNegativeInt,
        description="Maximum number of members rendered by str()/repr()",
        doc="""Containers with more members than this are rendered with a
        trailing '...'.  0 renders every member.""",
    ),
)
sets_config.declare(
    'sorted_repr',
    ConfigValue(
        default=True,
        domain=Bool,
        description="Sort members in str()/repr() when they are orderable",
        doc="""Only the debug rendering is affected; values() and
        iteration order remain unspecified.""",
    ),
)
sets_config.declare(
    'warn_on_str_init',
    ConfigValue(
        default=True,
        domain=Bool,
        description="Warn when a container is built from a single str",
    ),
)
