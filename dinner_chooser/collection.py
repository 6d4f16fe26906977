"""Mutation rules for the ordered dish collection.

Every operation returns a new list and leaves its input untouched, so a
rejected add or remove is a no-op for the caller.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from dinner_chooser.data import default_dishes, is_level
from dinner_chooser.errors import DishIndexError, ValidationError
from dinner_chooser.models import Dish


def _name_key(name: str) -> str:
    return name.strip().lower()


def contains_name(dishes: Sequence[Dish], name: str) -> bool:
    """Check for a dish with the same name, ignoring case and outer whitespace."""
    key = _name_key(name)
    return any(_name_key(dish.name) == key for dish in dishes)


def add_dish(dishes: Sequence[Dish], name: str, difficulties: Iterable[int]) -> list[Dish]:
    """Append a new dish after validating its name and difficulties."""
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Enter a dish name")

    levels = list(difficulties)
    if not levels:
        raise ValidationError("Pick at least one difficulty category")

    bad_levels = [level for level in levels if not is_level(level)]
    if bad_levels:
        raise ValidationError(f"Difficulty categories must be between 1 and 5, got {bad_levels!r}")

    if contains_name(dishes, trimmed):
        raise ValidationError(f"{trimmed!r} is already in the list")

    return [*dishes, Dish(name=trimmed, difficulties=tuple(sorted(set(levels))))]


def remove_at(dishes: Sequence[Dish], index: int) -> list[Dish]:
    """Return the collection without the dish at ``index``."""
    if not (0 <= index < len(dishes)):
        raise DishIndexError(f"No dish at position {index} (list has {len(dishes)})")
    return [dish for idx, dish in enumerate(dishes) if idx != index]


def reset() -> list[Dish]:
    """Discard the current collection in favour of the default seed list."""
    return default_dishes()
