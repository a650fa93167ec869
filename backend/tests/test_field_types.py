"""Unit tests for the field type taxonomy."""

import unittest

from fieldmeta.schema.field_types import (
    BASE_TYPE_VALUES,
    SPECIAL_TYPE_VALID_BASE_TYPES,
    SPECIAL_TYPE_VALUES,
    USER_VISIBILITY_TYPE_SET,
    VISIBILITY_TYPE_VALUES,
    is_valid_special_type_for_base_type,
)


class FieldTypeTaxonomyTests(unittest.TestCase):
    def test_visibility_types_include_retired_but_user_set_does_not(self) -> None:
        self.assertEqual(
            VISIBILITY_TYPE_VALUES,
            ("normal", "details-only", "hidden", "sensitive", "retired"),
        )
        self.assertNotIn("retired", USER_VISIBILITY_TYPE_SET)
        self.assertIn("sensitive", USER_VISIBILITY_TYPE_SET)

    def test_unrestricted_special_types_accept_every_base_type(self) -> None:
        for special_type in SPECIAL_TYPE_VALUES:
            if special_type in SPECIAL_TYPE_VALID_BASE_TYPES:
                continue
            for base_type in BASE_TYPE_VALUES:
                self.assertTrue(is_valid_special_type_for_base_type(special_type, base_type))

    def test_timestamp_special_types_require_numeric_base_type(self) -> None:
        for special_type in ("timestamp_seconds", "timestamp_milliseconds"):
            self.assertTrue(is_valid_special_type_for_base_type(special_type, "IntegerField"))
            self.assertTrue(is_valid_special_type_for_base_type(special_type, "BigIntegerField"))
            self.assertTrue(is_valid_special_type_for_base_type(special_type, "DecimalField"))
            self.assertFalse(is_valid_special_type_for_base_type(special_type, "CharField"))
            self.assertFalse(is_valid_special_type_for_base_type(special_type, "DateTimeField"))

    def test_missing_special_type_is_always_valid(self) -> None:
        self.assertTrue(is_valid_special_type_for_base_type(None, "CharField"))


if __name__ == "__main__":
    unittest.main()
