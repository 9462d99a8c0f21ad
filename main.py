"""CLI entry point for the inventory aging simulation."""

from __future__ import annotations

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from aging_engine.engine import AgingEngine, UnmatchedItemError, simulate
from aging_engine.rules import RULE_TABLE
from config.settings import get_settings
from models.schemas import DaySnapshot, Item


console = Console()


SAMPLE_INVENTORY = [
    ("+5 Dexterity Vest", 10, 20),
    ("Aged Brie", 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    ("Sulfuras, Hand of Ragnaros", 0, 80),
    ("Sulfuras, Hand of Ragnaros", -1, 80),
    ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
    ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
    ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
    ("Conjured Mana Cake", 3, 6),
]


def build_items(entries: list[tuple[str, int, int]] | tuple[tuple[str, int, int], ...]) -> list[Item]:
    """Build fresh items from (name, sell_in, quality) tuples."""
    return [Item(name=name, sell_in=sell_in, quality=quality) for name, sell_in, quality in entries]


@click.group()
@click.version_option(version="1.0.0")
def cli() -> None:
    """Inventory aging simulator - age items one day at a time."""
    pass


@cli.command("simulate")
@click.option(
    "--days",
    type=click.IntRange(min=0),
    default=None,
    help="Number of days to simulate (default: SIMULATION_DAYS)",
)
@click.option(
    "--item",
    "items",
    type=(str, int, int),
    multiple=True,
    metavar="NAME SELL_IN QUALITY",
    help="Item to age; repeat for several. Defaults to the sample inventory.",
)
def simulate_command(days: int | None, items: tuple[tuple[str, int, int], ...]) -> None:
    """Age an inventory and print its state for every day."""
    settings = get_settings()
    days = settings.simulation_days if days is None else days
    inventory = build_items(items or SAMPLE_INVENTORY)
    engine = AgingEngine(rules=RULE_TABLE)

    console.print(Panel(f"Simulating {days} day(s) for {len(inventory)} item(s)", title="Simulation"))

    try:
        categories = [engine.match(item).category for item in inventory]
        snapshots = simulate(inventory, days, engine=engine)
    except UnmatchedItemError as e:
        console.print(f"[red]{e}[/red]")
        raise click.exceptions.Exit(1)

    for snapshot in snapshots:
        _print_day(snapshot, categories if settings.debug else None)


@cli.command()
def rules() -> None:
    """List aging rules in match order."""
    table = Table(show_header=True, header_style="bold cyan", title="Aging Rules")
    table.add_column("Order", justify="right")
    table.add_column("Category")
    table.add_column("Rule", style="dim")

    for position, rule in enumerate(RULE_TABLE, start=1):
        table.add_row(str(position), rule.category, type(rule).__name__)

    console.print(table)


def _print_day(snapshot: DaySnapshot, categories: list[str] | None = None) -> None:
    """Print one day's items in a formatted table."""
    table = Table(show_header=True, header_style="bold", title=f"Day {snapshot.day}")
    table.add_column("Name")
    table.add_column("sellIn", justify="right")
    table.add_column("Quality", justify="right")
    if categories is not None:
        table.add_column("Category", style="dim")

    for index, item in enumerate(snapshot.items):
        row = [item.name, str(item.sell_in), str(item.quality)]
        if categories is not None:
            row.append(categories[index])
        table.add_row(*row)

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
