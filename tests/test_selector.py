import random
from collections import Counter

import pytest

from dinner_chooser.constant import MOOD_CASCADE
from dinner_chooser.data import default_dishes
from dinner_chooser.errors import NoDishesAvailable, NoMoodSelected
from dinner_chooser.models import Dish
from dinner_chooser.selector import (
    STAGE_ANY,
    STAGE_CATEGORY,
    STAGE_EASIER,
    candidates_for,
    category_for_draw,
    category_probabilities,
    choose,
    choose_with_draws,
    select_with_draws,
)

EXPECTED_TABLE = {
    1: {1: 0.9, 2: 0.1},
    2: {2: 0.8, 1: 0.1, 3: 0.1},
    3: {3: 0.7, 2: 0.2, 4: 0.1},
    4: {4: 0.7, 3: 0.2, 5: 0.1},
    5: {5: 0.8, 4: 0.2},
}


@pytest.mark.parametrize("mood,expected", [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)])
def test_draw_zero_picks_first_category(mood: int, expected: int) -> None:
    assert category_for_draw(mood, 0.0) == expected


@pytest.mark.parametrize(
    "mood,draw,expected",
    [
        (1, 0.8999, 1),
        (1, 0.9, 2),
        (2, 0.8, 1),
        (2, 0.9, 3),
        (3, 0.7, 2),
        (3, 0.9, 4),
        (4, 0.7, 3),
        (4, 0.95, 5),
        (5, 0.7999, 5),
        (5, 0.8, 4),
        (5, 0.9999, 4),
    ],
)
def test_interval_boundaries_are_half_open(mood: int, draw: float, expected: int) -> None:
    assert category_for_draw(mood, draw) == expected


@pytest.mark.parametrize("draw", [-0.1, 1.0, 1.5])
def test_draw_outside_unit_interval_is_rejected(draw: float) -> None:
    with pytest.raises(ValueError):
        category_for_draw(3, draw)


@pytest.mark.parametrize("mood", [None, 0, 6, True, "3", 2.5])
def test_invalid_mood_raises_no_mood_selected(mood: object) -> None:
    with pytest.raises(NoMoodSelected):
        choose_with_draws(mood, default_dishes(), 0.0, 0.0)  # type: ignore[arg-type]


def test_category_probabilities_match_table() -> None:
    for mood, expected in EXPECTED_TABLE.items():
        assert dict(category_probabilities(mood)) == pytest.approx(expected)


def test_empirical_category_frequencies_match_table() -> None:
    rng = random.Random(1234)
    samples = 20000
    for mood, expected in EXPECTED_TABLE.items():
        counts = Counter(category_for_draw(mood, rng.random()) for _ in range(samples))
        assert set(counts) == set(expected)
        for category, probability in expected.items():
            assert counts[category] / samples == pytest.approx(probability, abs=0.015)


def test_cascade_covers_unit_interval() -> None:
    for mood, rows in MOOD_CASCADE.items():
        bounds = [upper for upper, _ in rows]
        assert bounds == sorted(bounds)
        assert bounds[-1] == 1.0


def test_primary_category_candidates() -> None:
    dishes = default_dishes()
    stage, candidates = candidates_for(3, 3, dishes)

    assert stage == STAGE_CATEGORY
    assert [dish.name for dish in candidates] == ["Гречка по купечески", "Картошка пюре с котлетами"]


def test_falls_back_to_easier_dishes() -> None:
    dishes = [Dish("Стейк", (5,)), Dish("Омлет", (1,)), Dish("Суп", (3,))]
    selection = select_with_draws(2, dishes, 0.0, 0.0)

    assert selection.category == 2
    assert selection.stage == STAGE_EASIER
    assert selection.dish.name == "Омлет"
    assert selection.candidate_count == 1


def test_falls_back_to_whole_collection() -> None:
    dishes = [Dish("Стейк", (5,)), Dish("Утка", (5,))]
    for draw in (0.0, 0.5, 0.95):
        for pick_draw in (0.0, 0.49, 0.5, 0.99):
            selection = select_with_draws(1, dishes, draw, pick_draw)
            assert selection.stage == STAGE_ANY
            assert selection.dish.difficulties == (5,)

    assert choose_with_draws(1, dishes, 0.1, 0.0).name == "Стейк"
    assert choose_with_draws(1, dishes, 0.1, 0.5).name == "Утка"


@pytest.mark.parametrize("mood", [1, 2, 3, 4, 5])
def test_empty_collection_raises_no_dishes_available(mood: int) -> None:
    with pytest.raises(NoDishesAvailable):
        choose_with_draws(mood, [], 0.0, 0.0)
    with pytest.raises(NoDishesAvailable):
        choose(mood, [], random.Random(mood))


def test_pick_index_is_floor_of_draw_times_size() -> None:
    dishes = [Dish(f"dish-{idx}", (3,)) for idx in range(4)]
    assert choose_with_draws(3, dishes, 0.0, 0.0).name == "dish-0"
    assert choose_with_draws(3, dishes, 0.0, 0.25).name == "dish-1"
    assert choose_with_draws(3, dishes, 0.0, 0.74).name == "dish-2"
    assert choose_with_draws(3, dishes, 0.0, 0.9999).name == "dish-3"


def test_choose_does_not_mutate_collection() -> None:
    dishes = default_dishes()
    rng = random.Random(7)
    for _ in range(50):
        choose(4, dishes, rng)
    assert dishes == default_dishes()


def test_choose_is_deterministic_for_a_seed() -> None:
    dishes = default_dishes()
    first = [choose(3, dishes, random.Random(99)).name for _ in range(5)]
    second = [choose(3, dishes, random.Random(99)).name for _ in range(5)]
    assert first == second


def test_mood_one_mostly_picks_easy_dishes() -> None:
    dishes = default_dishes()
    rng = random.Random(42)
    picks = Counter(choose(1, dishes, rng).name for _ in range(2000))

    assert set(picks) <= {"Омлет", "Бутерброд"}
    assert picks["Бутерброд"] > picks["Омлет"] * 0.5
