import unittest

from greenlight.validator import Validator, permitted_value, unique


class TestValidator(unittest.TestCase):
    def test_new_validator_is_valid(self) -> None:
        v = Validator()
        self.assertTrue(v.valid())
        self.assertEqual(v.errors, {})

    def test_check_records_failed_rules_only(self) -> None:
        v = Validator()
        v.check(True, "title", "must be provided")
        v.check(False, "year", "must be provided")

        self.assertFalse(v.valid())
        self.assertEqual(v.errors, {"year": "must be provided"})

    def test_first_message_per_field_wins(self) -> None:
        v = Validator()
        v.add_error("year", "must be provided")
        v.add_error("year", "must be greater than 1888")

        self.assertEqual(v.errors["year"], "must be provided")

    def test_merge_keeps_existing_messages(self) -> None:
        v = Validator({"title": "must be provided"})
        other = Validator()
        other.add_error("title", "must not be more than 500 bytes long")
        other.add_error("genres", "must be provided")

        v.merge(other)

        self.assertEqual(
            v.errors,
            {"title": "must be provided", "genres": "must be provided"},
        )

    def test_unique(self) -> None:
        self.assertTrue(unique(["Drama", "Comedy"]))
        self.assertTrue(unique([]))
        self.assertTrue(unique(None))
        self.assertFalse(unique(["Drama", "Drama"]))
        # 대소문자가 다르면 다른 값
        self.assertTrue(unique(["drama", "Drama"]))

    def test_permitted_value(self) -> None:
        self.assertTrue(permitted_value("id", ["id", "-id"]))
        self.assertFalse(permitted_value("rating", ["id", "-id"]))


if __name__ == "__main__":
    unittest.main()
