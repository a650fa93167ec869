"""Unit tests for name-pattern special type inference."""

import re
import unittest
from unittest import mock

from fieldmeta.errors import PatternTableError
from fieldmeta.schema import special_type_inference
from fieldmeta.schema.field_types import BASE_TYPE_VALUES
from fieldmeta.schema.special_type_inference import check_pattern_table, infer_special_type


class InferSpecialTypeTests(unittest.TestCase):
    def test_id_name_wins_for_every_base_type(self) -> None:
        for name in ("id", "ID", "Id"):
            for base_type in BASE_TYPE_VALUES:
                self.assertEqual(infer_special_type(name, base_type), "id")

    def test_id_short_circuit_ignores_pattern_table(self) -> None:
        with mock.patch.object(special_type_inference, "_PATTERN_RULES", ()):
            self.assertEqual(infer_special_type("id", "IntegerField"), "id")
            self.assertIsNone(infer_special_type("status", "CharField"))

    def test_examples_from_common_column_names(self) -> None:
        self.assertEqual(infer_special_type("user_lat", "FloatField"), "latitude")
        self.assertEqual(infer_special_type("pickup_lng", "DecimalField"), "longitude")
        self.assertEqual(infer_special_type("status", "CharField"), "category")
        self.assertEqual(infer_special_type("payment_type", "IntegerField"), "category")
        self.assertEqual(infer_special_type("homepage_url", "TextField"), "url")
        self.assertEqual(infer_special_type("first_name", "CharField"), "name")
        self.assertEqual(infer_special_type("active", "BooleanField"), "category")
        self.assertEqual(infer_special_type("zipcode", "IntegerField"), "zip_code")

    def test_matching_uses_lower_cased_name(self) -> None:
        self.assertEqual(infer_special_type("City", "CharField"), "city")
        self.assertEqual(infer_special_type("countryCode", "CharField"), "country")
        self.assertEqual(infer_special_type("postalCode", "IntegerField"), "zip_code")

    def test_base_type_must_be_allowed_by_rule(self) -> None:
        self.assertIsNone(infer_special_type("user_lat", "CharField"))
        self.assertIsNone(infer_special_type("city", "IntegerField"))
        self.assertIsNone(infer_special_type("active", "CharField"))

    def test_patterns_match_whole_name_only(self) -> None:
        self.assertIsNone(infer_special_type("user_lat_x", "FloatField"))
        self.assertIsNone(infer_special_type("cityscape", "CharField"))
        self.assertIsNone(infer_special_type("state_of_mind", "CharField"))
        self.assertIsNone(infer_special_type("order_total", "DecimalField"))

    def test_earlier_rule_wins_when_two_rules_match(self) -> None:
        both_match = (
            (re.compile(r".*score"), None, "category"),
            (re.compile(r"credit_.*"), None, "number"),
        )
        with mock.patch.object(special_type_inference, "_PATTERN_RULES", both_match):
            self.assertEqual(infer_special_type("credit_score", "IntegerField"), "category")
        with mock.patch.object(special_type_inference, "_PATTERN_RULES", tuple(reversed(both_match))):
            self.assertEqual(infer_special_type("credit_score", "IntegerField"), "number")

    def test_rule_without_base_types_accepts_any_base_type(self) -> None:
        any_base = ((re.compile(r"payload"), None, "json"),)
        with mock.patch.object(special_type_inference, "_PATTERN_RULES", any_base):
            self.assertEqual(infer_special_type("payload", "DictionaryField"), "json")
            self.assertEqual(infer_special_type("payload", "TextField"), "json")

    def test_malformed_input_yields_no_inference(self) -> None:
        self.assertIsNone(infer_special_type(None, "CharField"))
        self.assertIsNone(infer_special_type(42, "IntegerField"))
        self.assertIsNone(infer_special_type("city", None))
        self.assertIsNone(infer_special_type("city", "VarcharField"))
        self.assertIsNone(infer_special_type("", "CharField"))


class PatternTableCheckTests(unittest.TestCase):
    def test_shipped_rules_pass(self) -> None:
        check_pattern_table()

    def test_rejects_unknown_special_type(self) -> None:
        with self.assertRaises(PatternTableError):
            check_pattern_table([(re.compile(r"x"), None, "not_a_type")])

    def test_rejects_unknown_base_type(self) -> None:
        with self.assertRaises(PatternTableError):
            check_pattern_table([(re.compile(r"x"), frozenset({"VarcharField"}), "category")])

    def test_rejects_uncompiled_pattern(self) -> None:
        with self.assertRaises(PatternTableError):
            check_pattern_table([("x", None, "category")])


if __name__ == "__main__":
    unittest.main()
