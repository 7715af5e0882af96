"""
Required-argument supplier behavioral tests.

Scope
- Validate missing and invalid values raise typed faults instead of exiting.
- Validate transform results and custom diagnostics.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from docroute import (
    FaultCode,
    InvalidArgumentError,
    OptionMap,
    RequiredArgumentError,
    Supplier,
    required,
)


class TestRequired(TestCase):
    """Behavioral tests for required()."""

    def testReturnsSupplier(self):
        self.assertIsInstance(required("<spec-file.ts>"), Supplier)

    def testReturnsRawValue(self):
        supplier = required("<spec-file.ts>")
        self.assertEqual(supplier(OptionMap({"<spec-file.ts>": "./a.ts"})), "./a.ts")

    def testMissingValueRaises(self):
        supplier = required("<spec-file.ts>", "spec file")
        with self.assertRaises(RequiredArgumentError) as context:
            supplier(OptionMap({"<spec-file.ts>": None}))
        self.assertEqual(context.exception.message, "spec file is required.")
        self.assertEqual(context.exception.code, FaultCode.REQUIRED_ARGUMENT)

    def testDefaultNameIsKey(self):
        with self.assertRaises(RequiredArgumentError) as context:
            required("--path")(OptionMap({}))
        self.assertEqual(context.exception.message, "--path is required.")

    def testPlainMappingIsAccepted(self):
        supplier = required("--path")
        self.assertEqual(supplier({"--path": "PATH"}, "ignored-prepend"), "PATH")
        with self.assertRaises(RequiredArgumentError):
            supplier({"--path": None})

    def testPlainMappingFollowsPresenceRules(self):
        supplier = required("--path")
        self.assertEqual(supplier({"--path": ""}), "")
        self.assertEqual(supplier(OptionMap({"--path": ""})), "")
        with self.assertRaises(RequiredArgumentError):
            supplier({})

    def testZeroPositionalIsGiven(self):
        supplier = required("<n>")
        self.assertEqual(supplier(OptionMap({"<n>": 0})), 0)
        self.assertEqual(supplier({"<n>": 0}), 0)

    def testZeroRepeatCountIsMissing(self):
        with self.assertRaises(RequiredArgumentError):
            required("-v")({"-v": 0})

    def testTransformResult(self):
        supplier = required("<count>", "count", transform=int)
        self.assertEqual(supplier(OptionMap({"<count>": "12"})), 12)

    def testFalsyTransformRaisesDefaultMessage(self):
        supplier = required("<spec-file.ts>", "spec file", transform=lambda value: value.endswith(".ts"))
        with self.assertRaises(InvalidArgumentError) as context:
            supplier(OptionMap({"<spec-file.ts>": "./a.json"}))
        self.assertEqual(context.exception.message, "spec file './a.json' is not valid.")
        self.assertEqual(context.exception.code, FaultCode.INVALID_ARGUMENT)

    def testFalsyTransformRaisesCustomMessage(self):
        def message(value, key, name):
            return f"{name} ({key}) must end with .ts, got {value}"

        supplier = required("<spec-file.ts>", "spec file", transform=lambda value: None, message=message)
        with self.assertRaises(InvalidArgumentError) as context:
            supplier(OptionMap({"<spec-file.ts>": "x"}))
        self.assertEqual(context.exception.message, "spec file (<spec-file.ts>) must end with .ts, got x")

    def testKeyMustBeString(self):
        with self.assertRaises(TypeError):
            required(1)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
