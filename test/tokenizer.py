"""
Tokenizer module behavioral tests (lookahead, prefix eating, refills).

Scope
- Validate current()/eat()/next()/eof over raw argument sequences.
- Validate that emptied lookaheads refill from the next raw argument, which is
  what makes split and combined option forms equivalent.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optspec.tokenizer import Tokenizer


class TestTokenizer(TestCase):
    """Behavioral tests for Tokenizer."""

    def testProgramPathSkipped(self):
        tokens = Tokenizer(["/usr/bin/tool", "--a=1"])
        self.assertEqual(tokens.current(), "--a=1")
        self.assertEqual(tokens.index, 1)

    def testNoSkip(self):
        self.assertEqual(Tokenizer(["--a=1"], skip=False).current(), "--a=1")

    def testEatStripsPrefix(self):
        tokens = Tokenizer(["prog", "--name=value"])
        self.assertEqual(tokens.eat("--"), "--")
        self.assertEqual(tokens.current(), "name=value")
        self.assertEqual(tokens.eat("name"), "name")
        self.assertEqual(tokens.eat("="), "=")
        self.assertEqual(tokens.current(), "value")

    def testEatMismatchLeavesState(self):
        tokens = Tokenizer(["prog", "-v"])
        self.assertIsNone(tokens.eat("--"))
        self.assertIsNone(tokens.eat(""))
        self.assertEqual(tokens.current(), "-v")

    def testEatRefillsFromNextArgument(self):
        tokens = Tokenizer(["prog", "-i", "5"])
        tokens.eat("-")
        tokens.eat("i")
        self.assertEqual(tokens.current(), "5")
        self.assertEqual(tokens.index, 2)

    def testSplitSeparatorForms(self):
        for arguments in (
                ["prog", "--n=5"],
                ["prog", "--n=", "5"],
                ["prog", "--n", "=5"],
                ["prog", "--n", "=", "5"],
        ):
            with self.subTest(arguments=arguments):
                tokens = Tokenizer(arguments)
                self.assertEqual(tokens.eat("--"), "--")
                self.assertEqual(tokens.eat("n"), "n")
                self.assertEqual(tokens.eat("="), "=")
                self.assertEqual(tokens.next(), "5")
                self.assertTrue(tokens.eof)

    def testNextAdvances(self):
        tokens = Tokenizer(["prog", "a", "b"])
        self.assertEqual(tokens.next(), "a")
        self.assertEqual(tokens.current(), "b")
        self.assertEqual(tokens.next(), "b")
        self.assertTrue(tokens.eof)

    def testEndOfInput(self):
        tokens = Tokenizer(["prog"])
        self.assertTrue(tokens.eof)
        self.assertEqual(tokens.current(), "")
        self.assertEqual(tokens.next(), "")
        self.assertIsNone(tokens.eat("-"))

    def testEmptyInput(self):
        self.assertTrue(Tokenizer([]).eof)

    def testEmptyArgumentsSkipped(self):
        tokens = Tokenizer(["prog", "", "x"])
        self.assertEqual(tokens.current(), "x")
        self.assertEqual(tokens.index, 2)

    def testIteration(self):
        self.assertEqual(list(Tokenizer(["prog", "a", "-b", "c"])), ["a", "-b", "c"])

    def testAcceptsIterators(self):
        self.assertEqual(list(Tokenizer(iter(("prog", "x")))), ["x"])

    def testNonStringArgumentRejected(self):
        tokens = Tokenizer(["prog", b"--raw"])
        with self.assertRaises(TypeError):
            tokens.current()


if __name__ == "__main__":
    unittest.main()
