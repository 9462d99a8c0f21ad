"""Pydantic schemas for inventory items and simulation snapshots."""

from __future__ import annotations

from pydantic import BaseModel, Field


# =============================================================================
# Inventory Schemas
# =============================================================================


class Item(BaseModel):
    """A single inventory item, aged in place once per simulated day.

    Only types are checked on construction. Out-of-band quality values are
    accepted and pulled back into range by the first processed tick.
    """

    name: str = Field(description="Item name, used to pick the aging rule")
    sell_in: int = Field(description="Days left to sell the item; negative once expired")
    quality: int = Field(description="Value score, 0-50 for everything but legendary items")

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


class DaySnapshot(BaseModel):
    """State of an inventory at the end of a simulated day."""

    day: int = Field(ge=0, description="Day number, 0 is the initial state")
    items: list[Item] = Field(default_factory=list, description="Copies of the items on that day")
