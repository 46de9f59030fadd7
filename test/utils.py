"""
Tests for the internal helpers.

This module verifies:
- The Unset sentinel (singleton identity, falsy, copy/pickle safe, final).
- coalesce() only replacing Unset.
- mirror() exposing frozen, read-only views.
- ordinal() labels used in fault messages.
"""
import copy
import pickle
import unittest
from unittest import TestCase

from optspec.utils import *


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickle(self):
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("x", str | Unset)


class TestHelpers(TestCase):
    """Behavioral tests for coalesce(), mirror() and ordinal()."""

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, 3), 3)
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce(0, 3), 0)
        self.assertIsNone(coalesce(None, 3))

    def testMirrorFreezesContainers(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = [1, 2]

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testOrdinal(self):
        self.assertEqual([ordinal(n) for n in (1, 2, 10)], ["first", "second", "tenth"])
        self.assertEqual([ordinal(n) for n in (11, 12, 13, 21, 22, 23, 101, 111)],
                         ["11th", "12th", "13th", "21st", "22nd", "23rd", "101st", "111th"])


if __name__ == "__main__":
    unittest.main()
