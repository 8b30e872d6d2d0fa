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

from parameterized import parameterized

import pysets.common.unittest as unittest

from pysets.common.config import (
    Bool,
    ConfigDict,
    ConfigValue,
    NonNegativeInt,
    sets_config,
)


class TestDomains(unittest.TestCase):
    @parameterized.expand(
        [
            (True, True),
            (False, False),
            (0, False),
            (1, True),
            ('yes', True),
            ('N', False),
            ('true', True),
            ('F', False),
            (1.0, True),
        ]
    )
    def test_Bool(self, val, expected):
        self.assertIs(Bool(val), expected)

    @parameterized.expand([(2,), ('maybe',), (0.5,), (None,)])
    def test_Bool_invalid(self, val):
        with self.assertRaisesRegex(ValueError, 'Expected Boolean'):
            Bool(val)

    def test_NonNegativeInt(self):
        self.assertEqual(NonNegativeInt(0), 0)
        self.assertEqual(NonNegativeInt(5), 5)
        self.assertEqual(NonNegativeInt(3.0), 3)
        self.assertEqual(NonNegativeInt('7'), 7)
        with self.assertRaisesRegex(ValueError, 'Expected non-negative int'):
            NonNegativeInt(-1)
        with self.assertRaisesRegex(ValueError, 'Expected non-negative int'):
            NonNegativeInt(1.5)


class TestConfigValue(unittest.TestCase):
    def test_default(self):
        c = ConfigValue(5, NonNegativeInt, description="A count")
        self.assertEqual(c.value(), 5)
        c.set_value('6')
        self.assertEqual(c.value(), 6)
        c.reset()
        self.assertEqual(c.value(), 5)

    def test_no_domain(self):
        c = ConfigValue()
        self.assertIsNone(c.value())
        c.set_value([1])
        self.assertEqual(c.value(), [1])

    def test_invalid_value(self):
        cfg = ConfigDict()
        c = cfg.declare('count', ConfigValue(0, NonNegativeInt))
        with self.assertRaisesRegex(
            ValueError,
            "invalid value for configuration 'count': "
            "Failed casting -2 to NonNegativeInt",
            normalize_whitespace=True,
        ):
            c.set_value(-2)
        self.assertEqual(c.value(), 0)

    def test_call_copies(self):
        c = ConfigValue(1, NonNegativeInt)
        d = c(4)
        self.assertEqual(c.value(), 1)
        self.assertEqual(d.value(), 4)


class TestConfigDict(unittest.TestCase):
    def setUp(self):
        self.config = ConfigDict(description="Test options")
        self.config.declare('limit', ConfigValue(3, NonNegativeInt))
        self.config.declare('flag', ConfigValue(False, Bool))

    def test_access(self):
        cfg = self.config
        self.assertEqual(cfg.limit, 3)
        self.assertEqual(cfg['limit'], 3)
        self.assertIs(cfg.flag, False)
        self.assertEqual(len(cfg), 2)
        self.assertEqual(list(cfg), ['limit', 'flag'])
        self.assertIn('flag', cfg)
        self.assertNotIn('other', cfg)

    def test_set(self):
        cfg = self.config
        cfg.limit = 10
        cfg['flag'] = 'yes'
        self.assertEqual(cfg.value(), {'limit': 10, 'flag': True})
        with self.assertRaisesRegex(ValueError, 'Expected non-negative int'):
            cfg.limit = -1
        self.assertEqual(cfg.limit, 10)

    def test_undeclared(self):
        cfg = self.config
        with self.assertRaisesRegex(ValueError, "key 'other' not defined"):
            cfg.other = 5
        with self.assertRaisesRegex(AttributeError, "has no attribute 'other'"):
            cfg.other

    def test_duplicate_declaration(self):
        with self.assertRaisesRegex(ValueError, "duplicate config 'limit'"):
            self.config.declare('limit', ConfigValue(1))

    def test_set_value_and_reset(self):
        cfg = self.config
        cfg.set_value({'limit': 0, 'flag': 1})
        self.assertEqual(cfg.value(), {'limit': 0, 'flag': True})
        with self.assertRaisesRegex(ValueError, 'Expected dict value'):
            cfg.set_value([1])
        cfg.reset()
        self.assertEqual(cfg.value(), {'limit': 3, 'flag': False})

    def test_call_copies(self):
        cfg = self.config
        local = cfg({'limit': 7})
        self.assertEqual(local.limit, 7)
        self.assertEqual(cfg.limit, 3)
        local.flag = True
        self.assertIs(cfg.flag, False)


class TestSetsConfig(unittest.TestCase):
    def tearDown(self):
        sets_config.reset()

    def test_defaults(self):
        self.assertEqual(
            sets_config.value(),
            {'repr_limit': 0, 'sorted_repr': True, 'warn_on_str_init': True},
        )

    def test_validation(self):
        sets_config.repr_limit = '4'
        self.assertEqual(sets_config.repr_limit, 4)
        with self.assertRaises(ValueError):
            sets_config.repr_limit = -4
        with self.assertRaises(ValueError):
            sets_config.sorted_repr = 'sometimes'


if __name__ == "__main__":
    unittest.main()
