"""Models module containing Pydantic schemas for inventory data."""

from models.schemas import DaySnapshot, Item

__all__ = [
    "DaySnapshot",
    "Item",
]
