"""Ordered rule table deciding how each inventory item ages per day.

Several predicates overlap (every name satisfies the regular rule, and a
"Conjured Aged Brie" would satisfy more than one prefix), so the table is
evaluated top-to-bottom and the first match wins. The order is part of the
contract:

    1. legendary       name starts with "Sulfuras"
    2. aged            name is exactly "Aged Brie"
    3. backstage_pass  name starts with "Backstage passes"
    4. conjured        name starts with "Conjured"
    5. regular         anything else

Every transition except legendary decrements ``sell_in`` first and evaluates
its thresholds against the decremented value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from models.schemas import Item


MIN_QUALITY = 0
MAX_QUALITY = 50

LEGENDARY_PREFIX = "Sulfuras"
AGED_NAME = "Aged Brie"
BACKSTAGE_PASS_PREFIX = "Backstage passes"
CONJURED_PREFIX = "Conjured"


def _clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(quality, MAX_QUALITY))


def _raise_quality(quality: int, amount: int) -> int:
    """Raise quality one unit at a time, capping every unit at the maximum."""
    for _ in range(amount):
        quality = min(quality + 1, MAX_QUALITY)
    return _clamp_quality(quality)


def _lower_quality(quality: int, amount: int) -> int:
    return _clamp_quality(quality - amount)


class ItemRule(ABC):
    """Abstract base class for a category's match predicate and daily transition."""

    @property
    @abstractmethod
    def category(self) -> str:
        """Category name for introspection and tracing."""
        ...

    @abstractmethod
    def applies_to(self, item: Item) -> bool:
        """Return True if this rule handles the item."""
        ...

    @abstractmethod
    def apply(self, item: Item) -> None:
        """Age the item by one day, in place."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category!r})"


class LegendaryRule(ItemRule):
    """Legendary items never have to be sold and never change in quality."""

    @property
    def category(self) -> str:
        return "legendary"

    def applies_to(self, item: Item) -> bool:
        return item.name.startswith(LEGENDARY_PREFIX)

    def apply(self, item: Item) -> None:
        pass


class AgedRule(ItemRule):
    """Aged items gain quality the older they get."""

    @property
    def category(self) -> str:
        return "aged"

    def applies_to(self, item: Item) -> bool:
        return item.name == AGED_NAME

    def apply(self, item: Item) -> None:
        item.sell_in -= 1
        item.quality = _raise_quality(item.quality, 1)


class BackstagePassRule(ItemRule):
    """Backstage passes gain quality as the concert approaches, then drop to 0.

    ``SCHEDULE`` pairs an exclusive upper bound on the remaining days with the
    daily gain; the first bound the decremented ``sell_in`` is below wins.
    """

    SCHEDULE: tuple[tuple[int, int], ...] = ((5, 3), (10, 2))
    DEFAULT_GAIN = 1

    @property
    def category(self) -> str:
        return "backstage_pass"

    def applies_to(self, item: Item) -> bool:
        return item.name.startswith(BACKSTAGE_PASS_PREFIX)

    def apply(self, item: Item) -> None:
        item.sell_in -= 1

        if item.sell_in < 0:
            item.quality = MIN_QUALITY
            return

        item.quality = _raise_quality(item.quality, self.gain_for(item.sell_in))

    @classmethod
    def gain_for(cls, sell_in: int) -> int:
        """Daily quality gain for an already-decremented ``sell_in``."""
        for below, gain in cls.SCHEDULE:
            if sell_in < below:
                return gain
        return cls.DEFAULT_GAIN


class DegradingRule(ItemRule):
    """Base for items that lose quality daily, faster once expired."""

    FRESH_LOSS = 1
    EXPIRED_LOSS = 2

    def apply(self, item: Item) -> None:
        item.sell_in -= 1
        loss = self.EXPIRED_LOSS if item.sell_in < 0 else self.FRESH_LOSS
        item.quality = _lower_quality(item.quality, loss)


class ConjuredRule(DegradingRule):
    """Conjured items degrade twice as fast as regular items."""

    FRESH_LOSS = 2
    EXPIRED_LOSS = 4

    @property
    def category(self) -> str:
        return "conjured"

    def applies_to(self, item: Item) -> bool:
        return item.name.startswith(CONJURED_PREFIX)


class RegularRule(DegradingRule):
    """Catch-all for every item no other rule claims."""

    @property
    def category(self) -> str:
        return "regular"

    def applies_to(self, item: Item) -> bool:
        return True


RULE_TABLE: tuple[ItemRule, ...] = (
    LegendaryRule(),
    AgedRule(),
    BackstagePassRule(),
    ConjuredRule(),
    RegularRule(),
)

RULE_ORDER: tuple[str, ...] = tuple(rule.category for rule in RULE_TABLE)


def match(item: Item, rules: tuple[ItemRule, ...] = RULE_TABLE) -> ItemRule | None:
    """Return the first rule in ``rules`` that applies to the item, or None."""
    for rule in rules:
        if rule.applies_to(item):
            return rule
    return None
