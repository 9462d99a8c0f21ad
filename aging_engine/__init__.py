"""Aging engine module for rule-based daily inventory updates."""

from aging_engine.engine import (
    AgingEngine,
    Inventory,
    UnmatchedItemError,
    advance_one_day,
    simulate,
)
from aging_engine.rules import RULE_ORDER, RULE_TABLE, ItemRule, match

__all__ = [
    "AgingEngine",
    "Inventory",
    "ItemRule",
    "RULE_ORDER",
    "RULE_TABLE",
    "UnmatchedItemError",
    "advance_one_day",
    "match",
    "simulate",
]
