"""
Tests for rich unit table rendering.
"""

import unittest

from rich.console import Console

from scale import Angle, Length, families
from scale.display import print_unit_tables, unit_table


class TestUnitTable(unittest.TestCase):
    """Test unit_table output."""

    def setUp(self):
        """Set up a recording console."""
        self.console = Console(record=True, width=120, color_system=None)

    def test_rows_and_columns(self):
        table = unit_table(Length)
        self.assertEqual(table.row_count, len(Length.UNIT))
        self.assertEqual(len(table.columns), 3)
        self.assertEqual(table.title, "Length units")

    def test_rendered_text(self):
        self.console.print(unit_table(Angle))
        text = self.console.export_text()
        self.assertIn("Angle units", text)
        self.assertIn("Factor (degree)", text)
        self.assertIn("radian", text)
        self.assertIn("57.2958", text)
        self.assertIn("180", text)

    def test_print_all_families(self):
        print_unit_tables(self.console)
        text = self.console.export_text()
        for family in families():
            self.assertIn(f"{family.__name__} units", text)


if __name__ == '__main__':
    unittest.main()
