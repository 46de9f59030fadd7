"""
Result module behavioral tests (OptionsResult ownership and access).

Scope
- Validate mapping and attribute access to parsed values.
- Validate store() semantics for scalars and arrays.
- Validate release(): idempotent, clears arrays, closes the result.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optspec import Option, option, build
from optspec.result import OptionsResult


class TestOptionsResult(TestCase):
    """Behavioral tests for OptionsResult."""

    def setUp(self):
        self.table = build((
            option(False, "verbose", "v"),
            option(1, "jobs", "j"),
            Option("path", "p", type=str, array=True),
        ))
        self.result = OptionsResult(self.table)

    def testStartsWithDefaults(self):
        self.assertEqual(self.result, {"verbose": False, "jobs": 1, "path": []})
        self.assertEqual(list(self.result), ["verbose", "jobs", "path"])
        self.assertEqual(len(self.result), 3)

    def testAttributeAccess(self):
        self.assertEqual(self.result.jobs, 1)
        self.assertEqual(self.result["jobs"], 1)
        with self.assertRaises(AttributeError):
            self.result.missing
        with self.assertRaises(KeyError):
            self.result["missing"]

    def testAttributesAreReadOnly(self):
        with self.assertRaises(AttributeError):
            self.result.jobs = 2

    def testStoreOverwritesScalars(self):
        self.result.store(self.table["jobs"], 4)
        self.result.store(self.table["jobs"], 8)
        self.assertEqual(self.result.jobs, 8)

    def testStoreAppendsArrays(self):
        self.result.store(self.table["path"], "a")
        self.result.store(self.table["path"], "b")
        self.assertEqual(self.result.path, ["a", "b"])

    def testArraysNotShared(self):
        other = OptionsResult(self.table)
        self.result.store(self.table["path"], "a")
        self.assertEqual(other.path, [])

    def testReleaseClosesResult(self):
        paths = self.result.path
        self.result.store(self.table["path"], "a")
        self.result.release()
        self.assertTrue(self.result.released)
        self.assertEqual(paths, [])
        with self.assertRaises(ValueError):
            self.result["jobs"]
        with self.assertRaises(ValueError):
            len(self.result)
        with self.assertRaises(ValueError):
            self.result.store(self.table["jobs"], 2)

    def testReleaseIsIdempotent(self):
        self.result.release()
        self.result.release()
        self.assertEqual(repr(self.result), "options(released)")

    def testContextManagerReleases(self):
        with self.result as options:
            self.assertIs(options, self.result)
            self.assertFalse(options.released)
        self.assertTrue(self.result.released)

    def testRepr(self):
        self.assertEqual(repr(self.result), "options(verbose=False, jobs=1, path=[])")

    def testTableExposed(self):
        self.assertIs(self.result.table, self.table)


if __name__ == "__main__":
    unittest.main()
