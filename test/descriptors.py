"""
Descriptors module behavioral tests (Option construction and sanitization).

Scope
- Validate name/short/descr/array sanitization at declaration time.
- Validate immutability and introspection (read-only properties, repr).
- Validate the option() shorthand.

Conventions
- Test method names follow CamelCase per project convention.
- Never pass explicit None for any parameter; omit instead.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optspec import Option, option, Uint
from optspec.faults import InvalidNameError, ConfigurationError
from optspec.utils import Unset


class TestOption(TestCase):
    """Behavioral tests for the Option descriptor."""

    def testFieldsExposed(self):
        o = Option("threads", "t", type=Uint(bits=8), default=4, descr="worker threads")
        self.assertEqual(o.name, "threads")
        self.assertEqual(o.short, "t")
        self.assertEqual(o.type, Uint(bits=8))
        self.assertEqual(o.default, 4)
        self.assertFalse(o.array)
        self.assertEqual(o.descr, "worker threads")

    def testOmittedFields(self):
        o = Option("threads", type=int)
        self.assertIsNone(o.short)
        self.assertIsNone(o.descr)
        self.assertIs(o.default, Unset)
        self.assertEqual(o.declared, (int, Unset))

    def testDescrTrimmed(self):
        self.assertEqual(Option("x", type=int, descr="  text  ").descr, "text")

    def testDescrEmptyRejected(self):
        with self.assertRaises(ValueError):
            Option("x", type=int, descr="   ")

    def testDescrExplicitNoneRejected(self):
        with self.assertRaises(TypeError):
            Option("x", type=int, descr=None)

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Option(1)

    def testMalformedNamesRejected(self):
        for name in ("", "--verbose", "-v", "two words", "key=value", "tab\tbed"):
            with self.subTest(name=name), self.assertRaises(InvalidNameError):
                Option(name, type=int)

    def testMalformedShortsRejected(self):
        for short in ("", "ab", "-", "=", " "):
            with self.subTest(short=short), self.assertRaises(InvalidNameError):
                Option("x", short, type=int)

    def testNameErrorsAreConfigurationErrors(self):
        with self.assertRaises(ConfigurationError):
            Option("--x", type=int)
        with self.assertRaises(ValueError):
            Option("--x", type=int)

    def testArrayMustBeBool(self):
        with self.assertRaises(TypeError):
            Option("x", type=int, array="yes")

    def testImmutable(self):
        o = Option("x", type=int)
        with self.assertRaises(AttributeError):
            o.name = "y"
        with self.assertRaises(AttributeError):
            o._name = "y"

    def testRepr(self):
        o = Option("x", "x", type=int)
        self.assertTrue(repr(o).startswith("option(name='x', short='x', type=<class 'int'>"))


class TestOptionFactory(TestCase):
    """Behavioral tests for the option() shorthand."""

    def testDefaultCarriedAndTypeLeftForInference(self):
        o = option(8080, "port", "p", descr="listen port")
        self.assertEqual(o.default, 8080)
        self.assertIs(o.type, Unset)
        self.assertEqual(o.short, "p")
        self.assertFalse(o.array)

    def testShortOptional(self):
        self.assertIsNone(option(False, "dry_run").short)


if __name__ == "__main__":
    unittest.main()
