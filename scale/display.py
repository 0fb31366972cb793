"""Rich tables of unit factors for inspection and debugging.

Example:
    >>> from scale.display import CONSOLE, print_unit_tables, unit_table
    >>> from scale.unit import Length
    >>> CONSOLE.print(unit_table(Length))
    >>> print_unit_tables()  # one table per registered family
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from scale.unit import Quantity, families

CONSOLE = Console()


def unit_table(quantity_type: type[Quantity]) -> Table:
    """Build a table listing every unit of a family with its factor.

    Args:
        quantity_type: Quantity class of the family, e.g. ``Length``.

    Returns:
        Table: One row per unit, in table order, canonical unit marked.
    """
    unit_type = quantity_type.UNIT
    base = unit_type.base()

    t = Table(title=f"{quantity_type.__name__} units")
    t.add_column("Unit", style="bold")
    t.add_column(f"Factor ({base.name})", justify="right")
    t.add_column("Canonical", justify="center")
    for unit in unit_type:
        t.add_row(unit.name, f"{unit.factor:g}", "*" if unit is base else "")
    return t


def print_unit_tables(console: Console | None = None) -> None:
    """Print the unit table of every registered family.

    Args:
        console: Console to print to. Defaults to the module CONSOLE.
    """
    console = console or CONSOLE
    for quantity_type in families():
        console.print(unit_table(quantity_type))
