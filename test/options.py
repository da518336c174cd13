"""
Options module behavioral tests (kinds, cells, option specifications).

Scope
- Validate Kind.decode for every kind: accepted spellings, malformed text, 64-bit ranges.
- Validate Kind.check and Cell writes (a cell never holds a value of the wrong type).
- Validate Option construction: names rules, defaults, description normalization.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from golf import Kind, Cell, Option, Unset


class TestKind(TestCase):
    """Behavioral tests for value kinds."""

    def testKindDefaults(self):
        self.assertEqual(Kind.INTEGER.default, 0)
        self.assertEqual(Kind.UNSIGNED.default, 0)
        self.assertIs(Kind.BOOLEAN.default, False)
        self.assertEqual(Kind.STRING.default, "")

    def testIntegerDecodeSigns(self):
        self.assertEqual(Kind.INTEGER.decode("4"), 4)
        self.assertEqual(Kind.INTEGER.decode("-5"), -5)
        self.assertEqual(Kind.INTEGER.decode("+7"), 7)
        self.assertEqual(Kind.INTEGER.decode("007"), 7)

    def testIntegerDecodeRejectsMalformedText(self):
        for text in ("", "4x", "x4", " 4", "4 ", "1_000", "0x10", "4.0", "-", "+"):
            with self.subTest(text=text), self.assertRaises(ValueError) as context:
                Kind.INTEGER.decode(text)
            self.assertEqual(str(context.exception), "invalid integer value %r" % text)

    def testIntegerDecodeRange(self):
        self.assertEqual(Kind.INTEGER.decode("9223372036854775807"), 2 ** 63 - 1)
        self.assertEqual(Kind.INTEGER.decode("-9223372036854775808"), -2 ** 63)
        with self.assertRaises(ValueError) as context:
            Kind.INTEGER.decode("9223372036854775808")
        self.assertEqual(str(context.exception), "integer value '9223372036854775808' out of range")

    def testUnsignedDecode(self):
        self.assertEqual(Kind.UNSIGNED.decode("0"), 0)
        self.assertEqual(Kind.UNSIGNED.decode("+3"), 3)
        self.assertEqual(Kind.UNSIGNED.decode("18446744073709551615"), 2 ** 64 - 1)

    def testUnsignedDecodeRejectsNegatives(self):
        with self.assertRaises(ValueError) as context:
            Kind.UNSIGNED.decode("-1")
        self.assertEqual(str(context.exception), "unsigned integer value '-1' out of range")

    def testUnsignedDecodeRejectsMalformedText(self):
        with self.assertRaises(ValueError) as context:
            Kind.UNSIGNED.decode("one")
        self.assertEqual(str(context.exception), "invalid unsigned integer value 'one'")

    def testUnsignedDecodeRange(self):
        with self.assertRaises(ValueError):
            Kind.UNSIGNED.decode("18446744073709551616")

    def testStringDecodeIsVerbatim(self):
        self.assertEqual(Kind.STRING.decode(""), "")
        self.assertEqual(Kind.STRING.decode(" host1,host2 "), " host1,host2 ")

    def testBooleanDecodeRejected(self):
        with self.assertRaises(ValueError):
            Kind.BOOLEAN.decode("true")

    def testDecodeRequiresString(self):
        with self.assertRaises(TypeError):
            Kind.INTEGER.decode(4)

    def testCheckRejectsBoolForIntegers(self):
        with self.assertRaises(TypeError):
            Kind.INTEGER.check(True)
        with self.assertRaises(TypeError):
            Kind.UNSIGNED.check(False)

    def testCheckRejectsWrongTypes(self):
        with self.assertRaises(TypeError):
            Kind.BOOLEAN.check(1)
        with self.assertRaises(TypeError):
            Kind.STRING.check(b"bytes")
        with self.assertRaises(TypeError):
            Kind.INTEGER.check("4")

    def testCheckRange(self):
        with self.assertRaises(ValueError):
            Kind.UNSIGNED.check(-1)
        with self.assertRaises(ValueError):
            Kind.INTEGER.check(2 ** 63)


class TestCell(TestCase):
    """Behavioral tests for storage cells."""

    def testCellHoldsInitialValue(self):
        cell = Cell(Kind.INTEGER, 3)
        self.assertEqual(cell.value, 3)
        self.assertIs(cell.kind, Kind.INTEGER)

    def testCellWriteIsChecked(self):
        cell = Cell(Kind.INTEGER, 0)
        with self.assertRaises(TypeError):
            cell.value = "4"
        self.assertEqual(cell.value, 0)
        cell.value = 4
        self.assertEqual(cell.value, 4)

    def testCellRejectsInitialValueOfWrongType(self):
        with self.assertRaises(TypeError):
            Cell(Kind.BOOLEAN, "yes")

    def testCellRequiresKind(self):
        with self.assertRaises(TypeError):
            Cell("integer", 0)

    def testCellRepr(self):
        self.assertEqual(repr(Cell(Kind.STRING, "a")), "cell('a')")


class TestOption(TestCase):
    """Behavioral tests for option specifications."""

    def testOptionNames(self):
        o = Option("l", "limit", Kind.INTEGER, 0, "limit results")
        self.assertEqual(o.short, "l")
        self.assertEqual(o.long, "limit")
        self.assertEqual(o.names, ("-l", "--limit"))

    def testOptionShortOnlyAndLongOnly(self):
        self.assertEqual(Option("x", None).names, ("-x",))
        self.assertEqual(Option(None, "dry-run").names, ("--dry-run",))

    def testOptionRequiresAtLeastOneName(self):
        with self.assertRaises(TypeError):
            Option(None, None)

    def testOptionNamesMustBeStrings(self):
        with self.assertRaises(TypeError):
            Option(1, None)
        with self.assertRaises(TypeError):
            Option(None, b"limit")

    def testOptionShortNameRules(self):
        for short in ("", "ab", "-", "=", " "):
            with self.subTest(short=short), self.assertRaises(ValueError):
                Option(short, None)

    def testOptionLongNameRules(self):
        for long in ("", "-limit", "li=mit", "li mit"):
            with self.subTest(long=long), self.assertRaises(ValueError):
                Option(None, long)

    def testOptionDefaultKindIsString(self):
        o = Option("s", "servers")
        self.assertIs(o.kind, Kind.STRING)
        self.assertEqual(o.default, "")
        self.assertFalse(o.boolean)

    def testOptionDefaultFallsBackToKindZero(self):
        self.assertEqual(Option("l", None, Kind.INTEGER).default, 0)
        self.assertIs(Option("v", None, Kind.BOOLEAN).default, False)
        self.assertIs(Option("v", None, Kind.BOOLEAN, Unset).cell.value, False)

    def testOptionDefaultMustMatchKind(self):
        with self.assertRaises(TypeError):
            Option("l", "limit", Kind.INTEGER, "4")
        with self.assertRaises(ValueError):
            Option("u", "count", Kind.UNSIGNED, -1)

    def testOptionCellStartsAtDefault(self):
        o = Option("l", "limit", Kind.INTEGER, 10)
        self.assertEqual(o.cell.value, 10)

    def testOptionDescrNormalization(self):
        self.assertEqual(Option("l", None, Kind.INTEGER, 0, "  limit results ").descr, "limit results")
        self.assertIsNone(Option("l", None, Kind.INTEGER, 0, "").descr)
        self.assertIsNone(Option("l", None, Kind.INTEGER, 0).descr)

    def testOptionDescrMustBeString(self):
        with self.assertRaises(TypeError):
            Option("l", None, Kind.INTEGER, 0, 42)

    def testOptionKindMustBeKind(self):
        with self.assertRaises(TypeError):
            Option("l", None, "integer")

    def testOptionAttributesAreReadOnly(self):
        o = Option("v", "verbose", Kind.BOOLEAN)
        with self.assertRaises(AttributeError):
            o.short = "x"  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            o.cell = Cell(Kind.BOOLEAN, True)  # type: ignore[misc]

    def testOptionRepr(self):
        o = Option("v", "verbose", Kind.BOOLEAN, False, "print verbose info")
        self.assertTrue(repr(o).startswith("option(short='v', long='verbose'"))
        self.assertIn("cell=cell(False)", repr(o))


if __name__ == "__main__":
    unittest.main()
