"""
Utilities behavioral tests (sentinel and edit distance).

Scope
- Validate the Unset sentinel semantics and coalesce().
- Validate the Damerau–Levenshtein distance used for command suggestions.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from subcmd.utils import Unset, UnsetType, coalesce, rename, distance


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(Unset, UnsetType())

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testCoalesceKeepsFalsyValues(self):
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))

    def testRenameCurried(self):
        @rename("pretty")
        def ugly():
            pass

        self.assertEqual(ugly.__name__, "pretty")
        self.assertEqual(ugly.__qualname__, "pretty")


class TestDistance(TestCase):
    """Behavioral tests for distance()."""

    def testIdentical(self):
        self.assertEqual(distance("cmd-a", "cmd-a"), 0)

    def testEmpty(self):
        self.assertEqual(distance("", ""), 0)
        self.assertEqual(distance("", "abc"), 3)
        self.assertEqual(distance("abc", ""), 3)

    def testSubstitution(self):
        self.assertEqual(distance("cmd-a", "cmd-b"), 1)

    def testInsertionAndDeletion(self):
        self.assertEqual(distance("build", "buil"), 1)
        self.assertEqual(distance("build", "builds"), 1)

    def testAdjacentTransposition(self):
        self.assertEqual(distance("ab", "ba"), 1)
        self.assertEqual(distance("clean", "claen"), 1)

    def testUnrestrictedTransposition(self):
        # the restricted (optimal string alignment) variant yields 3 here
        self.assertEqual(distance("ca", "abc"), 2)

    def testSymmetric(self):
        self.assertEqual(distance("kitten", "sitting"), 3)
        self.assertEqual(distance("sitting", "kitten"), 3)

    def testFarApart(self):
        self.assertGreaterEqual(distance("cmd-a", "bbbbbbbbbbb"), 3)

    def testRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            distance("a", 1)


if __name__ == "__main__":
    unittest.main()
