"""Update engine applying one simulated day of aging to an inventory."""

from __future__ import annotations

from collections.abc import Sequence

from aging_engine.rules import RULE_TABLE, ItemRule, match
from models.schemas import DaySnapshot, Item


class UnmatchedItemError(Exception):
    """Raised when no rule in the table claims an item."""

    def __init__(self, item: Item) -> None:
        super().__init__(f"Unable to find a matching aging rule for {item.name!r}")
        self.item = item


class AgingEngine:
    """Applies the first matching rule to every item, once per tick.

    Matching is strict: an item that no rule claims raises
    ``UnmatchedItemError``. The default table ends in a catch-all, so this
    only happens with a custom ``rules`` table.
    """

    def __init__(self, rules: Sequence[ItemRule] = RULE_TABLE) -> None:
        self.rules: tuple[ItemRule, ...] = tuple(rules)

    def match(self, item: Item) -> ItemRule:
        """Return the rule handling the item."""
        rule = match(item, self.rules)
        if rule is None:
            raise UnmatchedItemError(item)
        return rule

    def advance_one_day(self, items: list[Item]) -> list[Item]:
        """Age every item by one day in place and return the same list.

        All items are matched before any is mutated, so an unmatched item
        leaves the collection untouched.
        """
        matched = [(item, self.match(item)) for item in items]
        for item, rule in matched:
            rule.apply(item)
        return items


_default_engine = AgingEngine()


def advance_one_day(items: list[Item]) -> list[Item]:
    """Age every item by one day using the standard rule table."""
    return _default_engine.advance_one_day(items)


class Inventory:
    """A caller-owned collection of items aged together."""

    def __init__(self, items: list[Item] | None = None, engine: AgingEngine | None = None) -> None:
        self.items: list[Item] = items if items is not None else []
        self.engine = engine or _default_engine

    def advance_one_day(self) -> list[Item]:
        """Age the whole inventory by one day."""
        return self.engine.advance_one_day(self.items)


def simulate(
    items: list[Item],
    days: int,
    engine: AgingEngine | None = None,
) -> list[DaySnapshot]:
    """
    Age ``items`` for ``days`` days and record every day.

    Returns ``days + 1`` snapshots; day 0 is the initial state. Snapshots hold
    copies, so they do not change as the live items keep aging.
    """
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")

    engine = engine or _default_engine
    snapshots = [DaySnapshot(day=0, items=[item.model_copy() for item in items])]
    for day in range(1, days + 1):
        engine.advance_one_day(items)
        snapshots.append(DaySnapshot(day=day, items=[item.model_copy() for item in items]))
    return snapshots
