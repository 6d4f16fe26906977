"""Editable static dish and mood configuration."""

from __future__ import annotations

MIN_LEVEL = 1
MAX_LEVEL = 5

DEFAULT_DISHES: list[dict[str, object]] = [
    {"name": "Оливье", "difficulties": [4, 5]},
    {"name": "Борщ", "difficulties": [4, 5]},
    {"name": "Гречка по купечески", "difficulties": [3, 4]},
    {"name": "Картошка пюре с котлетами", "difficulties": [3, 4]},
    {"name": "Омлет", "difficulties": [1, 2]},
    {"name": "Бутерброд", "difficulties": [1]},
]

# Per mood: (exclusive upper bound of the draw, difficulty category), in order.
MOOD_CASCADE: dict[int, tuple[tuple[float, int], ...]] = {
    1: ((0.9, 1), (1.0, 2)),
    2: ((0.8, 2), (0.9, 1), (1.0, 3)),
    3: ((0.7, 3), (0.9, 2), (1.0, 4)),
    4: ((0.7, 4), (0.9, 3), (1.0, 5)),
    5: ((0.8, 5), (1.0, 4)),
}

MOOD_LABELS: dict[int, str] = {
    1: "barely alive",
    2: "lazy",
    3: "normal",
    4: "inspired",
    5: "chef mode",
}
