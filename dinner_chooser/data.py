"""Static dish data derived from the editable constants."""

from __future__ import annotations

from typing import Any

from dinner_chooser.constant import DEFAULT_DISHES as _DEFAULT_DISHES_RAW, MAX_LEVEL, MIN_LEVEL, MOOD_CASCADE
from dinner_chooser.models import Dish


def is_level(value: object) -> bool:
    """Return True for an int between MIN_LEVEL and MAX_LEVEL (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and MIN_LEVEL <= value <= MAX_LEVEL


def dish_from_record(record: Any) -> Dish:
    """Build a dish from a ``{"name", "difficulties"}`` mapping.

    Difficulty order and duplicates are kept as stored. Raises ``ValueError``
    when the record does not have that shape.
    """
    if not isinstance(record, dict):
        raise ValueError(f"dish record must be an object, got {type(record).__name__}")

    name = record.get("name")
    difficulties = record.get("difficulties")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"dish record has invalid name: {name!r}")
    if not isinstance(difficulties, list) or not all(is_level(level) for level in difficulties):
        raise ValueError(f"dish {name!r} has invalid difficulties: {difficulties!r}")

    return Dish(name=name, difficulties=tuple(difficulties))


DEFAULT_DISH_LIST: tuple[Dish, ...] = tuple(dish_from_record(record) for record in _DEFAULT_DISHES_RAW)

MOOD_LEVELS: tuple[int, ...] = tuple(sorted(MOOD_CASCADE))


def default_dishes() -> list[Dish]:
    """Return a fresh copy of the default seed list."""
    return list(DEFAULT_DISH_LIST)
