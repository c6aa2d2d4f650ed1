import unittest

from pydantic import ValidationError

from prize_selection.models.prize_models import PrizeCategorySpec
from prize_selection.table_builder import (
    build_selection_table,
    create_category_spec,
    generate_prize_names,
)
from prize_selection.table_validator import is_selection_table_valid


class TestGeneratePrizeNames(unittest.TestCase):
    def test_names_are_one_based(self):
        self.assertEqual(
            generate_prize_names(3, "Rare"),
            ["Unnamed Rare - 1", "Unnamed Rare - 2", "Unnamed Rare - 3"],
        )

    def test_blank_category_falls_back(self):
        self.assertEqual(generate_prize_names(2, " "), ["Unnamed - 1", "Unnamed - 2"])


class TestCreateCategorySpec(unittest.TestCase):
    def test_with_count_generates_names(self):
        spec = create_category_spec("TestCat", 0.2, prize_count=5)
        self.assertEqual(spec.prize_count, 5)
        self.assertEqual(len(spec.prize_names), 5)
        self.assertEqual(spec.prize_names[0], "Unnamed TestCat - 1")

    def test_with_names_derives_count(self):
        spec = create_category_spec("TestCat", 0.2, prize_names=["Sword", "Spear", "Dagger"])
        self.assertEqual(spec.prize_count, 3)
        self.assertEqual(spec.prize_names, ["Sword", "Spear", "Dagger"])

    def test_blank_name_rejected(self):
        with self.assertRaises(ValueError):
            create_category_spec("   ", 0.2, prize_count=2)

    def test_empty_names_rejected(self):
        with self.assertRaises(ValueError):
            create_category_spec("TestCat", 0.2, prize_names=[])

    def test_neither_count_nor_names_rejected(self):
        with self.assertRaises(ValueError):
            create_category_spec("TestCat", 0.2)

    def test_non_positive_count_rejected(self):
        with self.assertRaises(ValueError):
            create_category_spec("TestCat", 0.2, prize_count=0)

    def test_count_disagreeing_with_names_rejected(self):
        with self.assertRaises(ValueError):
            create_category_spec("TestCat", 0.2, prize_count=4, prize_names=["a", "b"])


class TestPrizeCategorySpec(unittest.TestCase):
    def test_valid_spec(self):
        spec = PrizeCategorySpec(category_name="A", probability_share=0.5, prize_count=2, prize_names=["a", "b"])
        self.assertEqual(spec.prize_count, 2)

    def test_share_out_of_range(self):
        for share in (1.5, -0.1):
            with self.assertRaises(ValidationError):
                PrizeCategorySpec(category_name="A", probability_share=share, prize_count=1, prize_names=["a"])

    def test_non_positive_count(self):
        with self.assertRaises(ValidationError):
            PrizeCategorySpec(category_name="A", probability_share=0.5, prize_count=0, prize_names=[])

    def test_names_must_match_count(self):
        with self.assertRaises(ValidationError):
            PrizeCategorySpec(category_name="A", probability_share=0.5, prize_count=3, prize_names=["a"])

    def test_create_category_spec_share_out_of_range(self):
        with self.assertRaises(ValueError):
            create_category_spec("A", 1.5, prize_count=2)


class TestBuildSelectionTable(unittest.TestCase):
    def test_single_category_quarters(self):
        table = build_selection_table([create_category_spec("A", 1.0, prize_count=4)])

        self.assertEqual([row.prize_index for row in table], [1, 2, 3, 4])
        self.assertEqual([row.lower_bound for row in table], [0.75, 0.5, 0.25, 0.0])
        self.assertTrue(all(row.category_name == "A" for row in table))
        self.assertEqual(table[0].prize_name, "Unnamed A - 1")

    def test_indexes_continue_across_categories(self):
        table = build_selection_table([
            create_category_spec("A", 0.5, prize_names=["x", "y"]),
            create_category_spec("B", 0.5, prize_count=1),
        ])

        self.assertEqual([row.prize_index for row in table], [1, 2, 3])
        self.assertEqual([row.lower_bound for row in table], [0.75, 0.5, 0.0])
        self.assertEqual([row.category_name for row in table], ["A", "A", "B"])

    def test_row_count_matches_prize_counts(self):
        specs = [
            create_category_spec("A", 0.3, prize_count=3),
            create_category_spec("B", 0.3, prize_count=5),
            create_category_spec("C", 0.4, prize_count=2),
        ]
        table = build_selection_table(specs)
        self.assertEqual(len(table), 10)
        self.assertTrue(is_selection_table_valid(table))

    def test_category_covers_its_share_in_equal_steps(self):
        table = build_selection_table([
            create_category_spec("A", 0.2, prize_count=2),
            create_category_spec("B", 0.6, prize_count=3),
            create_category_spec("C", 0.2, prize_count=1),
        ])

        b_rows = [row for row in table if row.category_name == "B"]
        top = table[1].lower_bound
        self.assertAlmostEqual(top - b_rows[-1].lower_bound, 0.6)

        previous = top
        for row in b_rows:
            self.assertAlmostEqual(previous - row.lower_bound, 0.2)
            previous = row.lower_bound

    def test_final_bound_snapped_to_zero(self):
        table = build_selection_table([
            create_category_spec("5/6*", 14.0 / 14.04, prize_count=14),
            create_category_spec("OffBan 6*", 0.02 / 14.04, prize_names=["OffBan 6*"]),
            create_category_spec("OffBan 5*", 0.02 / 14.04, prize_names=["OffBan 5*"]),
        ])

        self.assertEqual(len(table), 16)
        self.assertEqual(table[-1].lower_bound, 0.0)
        self.assertTrue(is_selection_table_valid(table))

    def test_under_summed_table_keeps_remainder(self):
        table = build_selection_table([create_category_spec("5/6 *", 0.4, prize_count=2)])

        self.assertAlmostEqual(table[0].lower_bound, 0.8)
        self.assertAlmostEqual(table[-1].lower_bound, 0.6)
        self.assertTrue(is_selection_table_valid(table))

    def test_empty_specs_rejected(self):
        with self.assertRaises(ValueError):
            build_selection_table([])

    def test_share_out_of_range_rejected(self):
        spec = PrizeCategorySpec.model_construct(category_name="A", probability_share=1.5, prize_count=1, prize_names=["a"])
        with self.assertRaises(ValueError):
            build_selection_table([spec])

        spec = PrizeCategorySpec.model_construct(category_name="A", probability_share=-0.1, prize_count=1, prize_names=["a"])
        with self.assertRaises(ValueError):
            build_selection_table([spec])

    def test_non_positive_count_rejected(self):
        spec = PrizeCategorySpec.model_construct(category_name="A", probability_share=0.5, prize_count=0, prize_names=[])
        with self.assertRaises(ValueError):
            build_selection_table([spec])

    def test_names_disagreeing_with_count_rejected(self):
        spec = PrizeCategorySpec.model_construct(category_name="A", probability_share=0.5, prize_count=3, prize_names=["a"])
        with self.assertRaises(ValueError):
            build_selection_table([spec])


if __name__ == "__main__":
    unittest.main()
