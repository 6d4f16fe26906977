"""Mood-weighted dish selection."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Sequence

from dinner_chooser.constant import MOOD_CASCADE
from dinner_chooser.data import is_level
from dinner_chooser.errors import NoDishesAvailable, NoMoodSelected
from dinner_chooser.models import Dish

logger = logging.getLogger(__name__)

STAGE_CATEGORY = "category"
STAGE_EASIER = "easier"
STAGE_ANY = "any"


@dataclass(frozen=True)
class Selection:
    """A chosen dish plus how it was reached."""

    dish: Dish
    mood: int
    category: int
    stage: str
    candidate_count: int


def _require_mood(mood: object) -> int:
    if not is_level(mood):
        raise NoMoodSelected("Pick a mood from 1 to 5 first")
    return mood  # type: ignore[return-value]


def category_for_draw(mood: int, draw: float) -> int:
    """Map a draw in [0, 1) to the primary difficulty category for ``mood``."""
    mood = _require_mood(mood)
    if not (0.0 <= draw < 1.0):
        raise ValueError(f"draw must be in [0, 1), got {draw!r}")

    for upper, category in MOOD_CASCADE[mood]:
        if draw < upper:
            return category
    raise ValueError(f"cascade for mood {mood} does not cover draw {draw!r}")


def category_probabilities(mood: int) -> list[tuple[int, float]]:
    """Return ``(category, probability)`` pairs in cascade order."""
    mood = _require_mood(mood)
    result: list[tuple[int, float]] = []
    lower = 0.0
    for upper, category in MOOD_CASCADE[mood]:
        result.append((category, round(upper - lower, 6)))
        lower = upper
    return result


def candidates_for(mood: int, category: int, dishes: Sequence[Dish]) -> tuple[str, list[Dish]]:
    """Resolve the first non-empty candidate pool and the stage it came from.

    Dishes tagged with ``category`` come first, then dishes with any difficulty
    at or below ``mood``, then the whole collection.
    """
    matching = [dish for dish in dishes if dish.has_difficulty(category)]
    if matching:
        return (STAGE_CATEGORY, matching)

    easier = [dish for dish in dishes if any(level <= mood for level in dish.difficulties)]
    if easier:
        return (STAGE_EASIER, easier)

    return (STAGE_ANY, list(dishes))


def select_with_draws(mood: int, dishes: Sequence[Dish], draw: float, pick_draw: float) -> Selection:
    """Pick a dish using two explicit draws in [0, 1) and report how it was reached."""
    mood = _require_mood(mood)
    if not dishes:
        raise NoDishesAvailable("Add dishes to the list")
    if not (0.0 <= pick_draw < 1.0):
        raise ValueError(f"pick_draw must be in [0, 1), got {pick_draw!r}")

    category = category_for_draw(mood, draw)
    stage, candidates = candidates_for(mood, category, dishes)
    index = min(math.floor(pick_draw * len(candidates)), len(candidates) - 1)
    dish = candidates[index]

    logger.debug(
        "choose mood=%s draw=%.4f category=%s stage=%s candidates=%s picked=%r",
        mood,
        draw,
        category,
        stage,
        len(candidates),
        dish.name,
    )
    return Selection(dish=dish, mood=mood, category=category, stage=stage, candidate_count=len(candidates))


def select(mood: int, dishes: Sequence[Dish], rng: random.Random | None = None) -> Selection:
    """Like ``select_with_draws`` with both draws taken from ``rng``."""
    rng = rng or random.Random()
    draw = rng.random()
    pick_draw = rng.random()
    return select_with_draws(mood, dishes, draw, pick_draw)


def choose_with_draws(mood: int, dishes: Sequence[Dish], draw: float, pick_draw: float) -> Dish:
    return select_with_draws(mood, dishes, draw, pick_draw).dish


def choose(mood: int, dishes: Sequence[Dish], rng: random.Random | None = None) -> Dish:
    """Pick a dish for ``mood``; the collection is never modified."""
    return select(mood, dishes, rng).dish
