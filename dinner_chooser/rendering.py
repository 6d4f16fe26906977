"""Rendering helpers for dishes, moods and selections."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from dinner_chooser.constant import MAX_LEVEL, MIN_LEVEL, MOOD_LABELS
from dinner_chooser.models import Dish
from dinner_chooser.selector import STAGE_ANY, STAGE_EASIER, Selection, category_probabilities

_LEVEL_STYLES: dict[int, str] = {
    1: "bold #0b1f0f on #5fbf72",
    2: "bold #0b1f0f on #a8d86e",
    3: "bold #1f1a0b on #e8c547",
    4: "bold #ffffff on #d9822b",
    5: "bold #ffffff on #b23a48",
}


def badge_style(level: int) -> str:
    """Return a consistent badge style for a difficulty or mood level."""
    return _LEVEL_STYLES.get(level, "bold #ffffff on #555555")


def format_difficulties(difficulties: tuple[int, ...]) -> Text:
    text = Text()
    for idx, level in enumerate(difficulties):
        if idx > 0:
            text.append(" ")
        text.append(f" {level} ", style=badge_style(level))
    return text


def format_dish_label(dish: Dish) -> Text:
    """Render a dish name followed by its difficulty badges."""
    text = Text()
    text.append(dish.name)
    text.append("  ")
    text.append_text(format_difficulties(dish.difficulties))
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the ``[start, end)`` slice that fits ``rows`` lines around ``selected``."""
    rows = max(1, rows)
    if total <= rows:
        return (0, max(total, 0))
    anchor = 0 if selected is None else selected - rows // 2
    start = min(max(anchor, 0), total - rows)
    return (start, start + rows)


def format_dish_list(dishes: Sequence[Dish], selected: int | None, rows: int) -> Text:
    """Render the numbered dish list, scrolled so ``selected`` stays visible."""
    start, end = window_bounds(len(dishes), rows, selected)
    lines = Text()
    if start > 0:
        lines.append("⋮\n", style="dim")

    for idx in range(start, end):
        if idx > start:
            lines.append("\n")
        lines.append("➤ " if idx == selected else "  ")
        lines.append(f"{idx + 1}. ")
        lines.append_text(format_dish_label(dishes[idx]))

    if end < len(dishes):
        lines.append("\n⋮", style="dim")
    return lines


def format_mood_bar(mood: int | None) -> Text:
    """Render the 1-5 mood buttons with the active one highlighted."""
    text = Text()
    for level in range(MIN_LEVEL, MAX_LEVEL + 1):
        if level > MIN_LEVEL:
            text.append(" ")
        if level == mood:
            text.append(f"[{level}]", style=badge_style(level))
        else:
            text.append(f" {level} ", style="dim")

    if mood is None:
        text.append("\nPress 1-5 to set how much cooking you feel like", style="italic")
        return text

    text.append(f"\nMood {mood}: {MOOD_LABELS.get(mood, '')}\n")
    for idx, (category, probability) in enumerate(category_probabilities(mood)):
        if idx > 0:
            text.append("  ")
        text.append(f" {category} ", style=badge_style(category))
        text.append(f" {probability:.0%}")
    return text


def format_selection(selection: Selection | None) -> Text:
    """Render the result panel."""
    if selection is None:
        return Text("Nothing chosen yet", style="dim italic")

    text = Text()
    text.append("Tonight we cook:\n", style="bold")
    text.append(selection.dish.name, style="bold #5fbf72")
    text.append("\nCategories: ")
    text.append_text(format_difficulties(selection.dish.difficulties))
    if selection.stage == STAGE_EASIER:
        text.append(f"\nNo category {selection.category} dishes, picked something easier", style="dim")
    elif selection.stage == STAGE_ANY:
        text.append(f"\nNo category {selection.category} or easier dishes, picked from the whole list", style="dim")
    return text
