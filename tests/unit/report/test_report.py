"""Tests for plain-text comparison reports."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazycmp.compare_model import ComparisonCache, DirectoryComparison, FileComparator, classify
from lazycmp.report import format_full_closure, format_partial_closure, format_report


def _comparison(**overrides) -> DirectoryComparison:
    fields = dict(
        left=Path("a"),
        right=Path("b"),
        left_list=(),
        right_list=(),
        common=(),
        left_only=(),
        right_only=(),
        common_dirs=(),
        common_files=(),
        common_funny=(),
        same_files=(),
        diff_files=(),
        funny_files=(),
    )
    fields.update(overrides)
    return DirectoryComparison(**fields)


class FormatReportTests(unittest.TestCase):
    def test_report_lists_every_non_empty_category_sorted(self) -> None:
        comparison = _comparison(
            left_only=("z", "y"),
            right_only=("x",),
            same_files=("same",),
            diff_files=("diff2", "diff1"),
            funny_files=("trouble",),
            common_dirs=("sub",),
            common_funny=("odd",),
        )

        self.assertEqual(
            format_report(comparison),
            "diff a b\n"
            "Only in a : ['y', 'z']\n"
            "Only in b : ['x']\n"
            "Identical files : ['same']\n"
            "Differing files : ['diff1', 'diff2']\n"
            "Trouble with common files : ['trouble']\n"
            "Common subdirectories : ['sub']\n"
            "Common funny cases : ['odd']\n",
        )

    def test_report_omits_empty_categories(self) -> None:
        self.assertEqual(format_report(_comparison()), "diff a b\n")

    def test_partial_closure_without_subdir_classifier_is_single_report(self) -> None:
        comparison = _comparison(common_dirs=("sub",))

        self.assertEqual(format_partial_closure(comparison), format_report(comparison))


class ClosureReportTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.left = root / "left"
        self.right = root / "right"
        for base in (self.left, self.right):
            (base / "one" / "deep").mkdir(parents=True)
            (base / "two").mkdir()
            (base / "one" / "deep" / "leaf.txt").write_text("leaf\n", encoding="utf-8")
        (self.left / "one" / "deep" / "left_only.txt").write_text("l\n", encoding="utf-8")
        (self.right / "two" / "right_only.txt").write_text("r\n", encoding="utf-8")
        self.comparator = FileComparator(cache=ComparisonCache())

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_partial_closure_stops_after_one_level(self) -> None:
        comparison = classify(self.left, self.right, comparator=self.comparator)

        text = format_partial_closure(comparison)

        self.assertIn(f"diff {self.left / 'one'} {self.right / 'one'}\n", text)
        self.assertIn(f"Only in {self.right / 'two'} : ['right_only.txt']\n", text)
        self.assertNotIn("left_only.txt", text)

    def test_full_closure_walks_all_common_subdirectories_in_order(self) -> None:
        comparison = classify(self.left, self.right, comparator=self.comparator)

        text = format_full_closure(comparison)
        headers = [line for line in text.splitlines() if line.startswith("diff ")]

        self.assertEqual(
            headers,
            [
                f"diff {self.left} {self.right}",
                f"diff {self.left / 'one'} {self.right / 'one'}",
                f"diff {self.left / 'one' / 'deep'} {self.right / 'one' / 'deep'}",
                f"diff {self.left / 'two'} {self.right / 'two'}",
            ],
        )
        self.assertIn(f"Only in {self.left / 'one' / 'deep'} : ['left_only.txt']\n", text)
        self.assertIn("Identical files : ['leaf.txt']\n", text)


if __name__ == "__main__":
    unittest.main()
