import pytest

from dinner_chooser.data import default_dishes
from dinner_chooser.models import Dish
from dinner_chooser.rendering import format_dish_list, window_bounds


@pytest.mark.parametrize(
    "total,rows,selected,expected",
    [
        (0, 5, None, (0, 0)),
        (3, 5, 2, (0, 3)),
        (10, 4, None, (0, 4)),
        (10, 4, 0, (0, 4)),
        (10, 4, 5, (3, 7)),
        (10, 4, 9, (6, 10)),
        (10, 0, 3, (3, 4)),
    ],
)
def test_window_bounds(total: int, rows: int, selected: int | None, expected: tuple[int, int]) -> None:
    assert window_bounds(total, rows, selected) == expected


def test_dish_list_marks_selected_row() -> None:
    text = format_dish_list(default_dishes(), 1, 10).plain
    lines = text.split("\n")

    assert len(lines) == 6
    assert lines[0].startswith("  1. Оливье")
    assert lines[1].startswith("➤ 2. Борщ")


def test_dish_list_shows_scroll_markers_when_clipped() -> None:
    dishes = [Dish(f"dish-{idx}", (2,)) for idx in range(10)]
    lines = format_dish_list(dishes, 5, 4).plain.split("\n")

    assert lines[0] == "⋮"
    assert lines[-1] == "⋮"
    assert [line.split(". ")[0].strip("➤ ") for line in lines[1:-1]] == ["4", "5", "6", "7"]
