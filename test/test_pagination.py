"""Tests for page/limit window computation and coercion."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ContentSearch.core.query import Window
from ContentSearch.sources.elasticsearch.pagination import coerce_pagination, compute_window


class TestComputeWindow(unittest.TestCase):
    def test_window_from_page_and_limit(self) -> None:
        self.assertEqual(compute_window(1, 1), Window(offset=0, size=1))
        self.assertEqual(compute_window(1, 10), Window(offset=0, size=10))
        self.assertEqual(compute_window(2, 10), Window(offset=10, size=10))
        self.assertEqual(compute_window(3, 10), Window(offset=20, size=10))
        self.assertEqual(compute_window(2, 5), Window(offset=5, size=5))

    def test_missing_side_yields_no_window(self) -> None:
        self.assertIsNone(compute_window(None, 1))
        self.assertIsNone(compute_window(1, None))
        self.assertIsNone(compute_window(None, None))

    def test_falsy_or_negative_values_yield_no_window(self) -> None:
        self.assertIsNone(compute_window(0, 10))
        self.assertIsNone(compute_window(1, 0))
        self.assertIsNone(compute_window(-1, 10))
        self.assertIsNone(compute_window("2", "5"))

    def test_window_serializes_to_from_and_size(self) -> None:
        self.assertEqual(compute_window(3, 10).to_dict(), {"from": 20, "size": 10})


class TestCoercePagination(unittest.TestCase):
    def test_untouched_when_nothing_requested(self) -> None:
        self.assertEqual(coerce_pagination(None, None), (None, None))

    def test_missing_limit_defaults_to_twenty(self) -> None:
        self.assertEqual(coerce_pagination(2, None), (2, 20))

    def test_missing_page_defaults_to_one(self) -> None:
        self.assertEqual(coerce_pagination(None, 19), (1, 19))

    def test_numeric_strings_are_parsed(self) -> None:
        self.assertEqual(coerce_pagination("3", " 15 "), (3, 15))

    def test_leading_integer_prefix_is_used(self) -> None:
        self.assertEqual(coerce_pagination("2.5", "10"), (2, 10))
        self.assertEqual(coerce_pagination("5abc", None), (5, 20))
        self.assertEqual(coerce_pagination(None, " 7 items"), (1, 7))

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        self.assertEqual(coerce_pagination("abc", "xyz"), (1, 20))
        self.assertEqual(coerce_pagination(-2, 0), (1, 20))


if __name__ == "__main__":
    unittest.main()
