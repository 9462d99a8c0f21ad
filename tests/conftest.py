"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "WARNING")

from models.schemas import Item  # noqa: E402


BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"
SULFURAS = "Sulfuras, Hand of Ragnaros"


def make_item(name: str = "foo", sell_in: int = 10, quality: int = 20) -> Item:
    """Factory for creating Item test fixtures."""
    return Item(name=name, sell_in=sell_in, quality=quality)


def qualities_over(items: list[Item], days: int, advance) -> list[list[int]]:
    """Tick ``items`` ``days`` times, collecting every item's quality per tick."""
    trajectory = []
    for _ in range(days):
        advance(items)
        trajectory.append([item.quality for item in items])
    return trajectory


@pytest.fixture
def mixed_inventory() -> list[Item]:
    """One item of every category, in valid starting states."""
    return [
        make_item("+5 Dexterity Vest", 10, 20),
        make_item("Aged Brie", 2, 0),
        make_item("Elixir of the Mongoose", 5, 7),
        make_item(SULFURAS, 0, 80),
        make_item(SULFURAS, -1, 80),
        make_item(BACKSTAGE_PASS, 15, 20),
        make_item(BACKSTAGE_PASS, 10, 49),
        make_item(BACKSTAGE_PASS, 5, 49),
        make_item("Conjured Mana Cake", 3, 6),
    ]
