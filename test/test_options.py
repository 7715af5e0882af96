"""
Option map behavioral tests (lookup, presence, typed accessors).

Scope
- Validate that lookup() distinguishes unknown keys (Unset) from parsed falsy values.
- Validate the presence rules used for command matching.
- Validate text()/number() conversions and read-only behavior.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

import docroute
from docroute import OptionMap, Unset


class TestOptionMap(TestCase):
    """Behavioral tests for OptionMap."""

    def setUp(self):
        self.options = OptionMap({
            "eags": True,
            "sql": False,
            "<spec-file.ts>": "./test.ts",
            "--path": None,
            "-v": 0,
            "--count": 2,
            "<files>": [],
            "--name": "",
            "--zero": "0",
        })

    def testLookupUnknownKeyIsUnset(self):
        self.assertIs(self.options.lookup("missing"), Unset)

    def testUnsetHasNoOperators(self):
        with self.assertRaises(TypeError):
            Unset | "fallback"  # type: ignore[operator]
        with self.assertRaises(TypeError):
            "fallback" | Unset  # type: ignore[operator]
        self.assertNotIn("coalesce", docroute.__all__)
        self.assertFalse(hasattr(docroute, "coalesce"))

    def testLookupPreservesFalsyValues(self):
        self.assertIs(self.options.lookup("sql"), False)
        self.assertIsNone(self.options.lookup("--path"))
        self.assertEqual(self.options.lookup("--name"), "")

    def testGetItemUnknownKeyIsNone(self):
        self.assertIsNone(self.options["missing"])
        self.assertEqual(self.options["<spec-file.ts>"], "./test.ts")

    def testGetHonoursDefault(self):
        self.assertEqual(self.options.get("missing", "fallback"), "fallback")

    def testPresenceRules(self):
        self.assertTrue(self.options.present("eags"))
        self.assertTrue(self.options.present("<spec-file.ts>"))
        self.assertTrue(self.options.present("--count"))
        self.assertTrue(self.options.present("--name"))
        self.assertTrue(self.options.present("--zero"))
        self.assertFalse(self.options.present("sql"))
        self.assertFalse(self.options.present("--path"))
        self.assertFalse(self.options.present("-v"))
        self.assertFalse(self.options.present("<files>"))
        self.assertFalse(self.options.present("missing"))

    def testZeroIsPresentForPositionals(self):
        options = OptionMap({"<n>": 0, "FILE": 0, "-V": 0, "--verbose": 0, "go": 0, "<k>": None})
        self.assertTrue(options.present("<n>"))
        self.assertTrue(options.present("FILE"))
        self.assertFalse(options.present("-V"))
        self.assertFalse(options.present("--verbose"))
        self.assertFalse(options.present("go"))
        self.assertFalse(options.present("<k>"))

    def testText(self):
        self.assertEqual(self.options.text("<spec-file.ts>"), "./test.ts")
        self.assertEqual(self.options.text("--count"), "2")
        self.assertIsNone(self.options.text("--path"))
        self.assertIsNone(self.options.text("eags"))

    def testNumber(self):
        options = OptionMap({"<width>": "640", "--scale": "1.5", "--count": 3, "<name>": "abc"})
        self.assertEqual(options.number("<width>"), 640)
        self.assertIsInstance(options.number("<width>"), int)
        self.assertEqual(options.number("--scale"), 1.5)
        self.assertEqual(options.number("--count"), 3)
        self.assertIsNone(options.number("missing"))
        with self.assertRaises(ValueError):
            options.number("<name>")

    def testReadOnly(self):
        with self.assertRaises(TypeError):
            self.options["eags"] = False  # type: ignore[index]
        with self.assertRaises(AttributeError):
            self.options.extra = 1  # type: ignore[attr-defined]

    def testSnapshotIsDetachedFromSource(self):
        source = {"eags": True}
        options = OptionMap(source)
        source["eags"] = False
        self.assertTrue(options.present("eags"))

    def testMappingProtocol(self):
        self.assertEqual(len(self.options), 9)
        self.assertIn("eags", self.options)
        self.assertNotIn("missing", self.options)
        self.assertEqual(OptionMap({"a": 1}), {"a": 1})


if __name__ == "__main__":
    unittest.main()
