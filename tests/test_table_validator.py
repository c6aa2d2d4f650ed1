import unittest

from prize_selection.models.prize_models import PrizeSelectionRow
from prize_selection.table_validator import is_selection_table_valid, validate_selection_table


def make_table(rows):
    return [
        PrizeSelectionRow(prize_index=index, lower_bound=bound, category_name="Cat", prize_name=f"Prize {i}")
        for i, (index, bound) in enumerate(rows)
    ]


class TestValidateSelectionTable(unittest.TestCase):
    def test_well_formed_table(self):
        table = make_table([(1, 0.75), (2, 0.5), (3, 0.25), (4, 0.0)])
        result = validate_selection_table(table)

        self.assertTrue(result["valid"])
        self.assertEqual(result["errors"], [])
        self.assertEqual(result["summary"]["row_count"], 4)
        self.assertEqual(result["summary"]["uncovered_probability"], 0.0)

    def test_index_gap(self):
        table = make_table([(1, 0.75), (3, 0.5)])
        self.assertFalse(is_selection_table_valid(table))

    def test_index_not_starting_at_one(self):
        table = make_table([(0, 0.75), (1, 0.5)])
        self.assertFalse(is_selection_table_valid(table))

    def test_bound_of_one_rejected(self):
        table = make_table([(1, 1.0), (2, 0.5)])
        self.assertFalse(is_selection_table_valid(table))

    def test_negative_bound_rejected(self):
        table = make_table([(1, 0.5), (2, -0.1)])
        self.assertFalse(is_selection_table_valid(table))

    def test_bounds_must_strictly_decrease(self):
        table = make_table([(1, 0.5), (2, 0.5)])
        self.assertFalse(is_selection_table_valid(table))

        table = make_table([(1, 0.25), (2, 0.5)])
        self.assertFalse(is_selection_table_valid(table))

    def test_nan_bound_rejected(self):
        table = make_table([(1, 0.5), (2, float("nan")), (3, 0.0)])
        result = validate_selection_table(table)

        self.assertFalse(result["valid"])
        self.assertIn("$[1].lower_bound", {e["path"] for e in result["errors"]})
        # the row after a NaN is still compared against it
        self.assertIn("$[2].lower_bound", {e["path"] for e in result["errors"]})

    def test_infinite_bound_rejected(self):
        self.assertFalse(is_selection_table_valid(make_table([(1, 0.5), (2, float("-inf"))])))
        self.assertFalse(is_selection_table_valid(make_table([(1, float("inf")), (2, 0.0)])))

    def test_nan_final_bound_has_no_coverage(self):
        summary = validate_selection_table(make_table([(1, 0.5), (2, float("nan"))]))["summary"]
        self.assertIsNone(summary["covered_probability"])
        self.assertIsNone(summary["uncovered_probability"])

    def test_scan_collects_every_violation(self):
        table = make_table([(1, 0.5), (3, 0.6), (4, 0.1)])
        result = validate_selection_table(table)

        self.assertFalse(result["valid"])
        # index gap at row 2, bound rise at row 2, index 4 follows expected 3
        self.assertEqual(len(result["errors"]), 3)
        self.assertEqual({e["path"] for e in result["errors"]},
                         {"$[1].prize_index", "$[1].lower_bound", "$[2].prize_index"})

    def test_uncovered_probability_reported(self):
        table = make_table([(1, 0.8), (2, 0.6)])
        summary = validate_selection_table(table)["summary"]

        self.assertTrue(is_selection_table_valid(table))
        self.assertAlmostEqual(summary["covered_probability"], 0.4)
        self.assertAlmostEqual(summary["uncovered_probability"], 0.6)

    def test_empty_table_is_valid(self):
        self.assertTrue(is_selection_table_valid([]))


if __name__ == "__main__":
    unittest.main()
