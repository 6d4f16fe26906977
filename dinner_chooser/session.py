"""Session state shared by the UI: dish list, mood and the last pick."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from dinner_chooser import collection
from dinner_chooser.config import STORAGE_KEY
from dinner_chooser.data import is_level
from dinner_chooser.errors import NoMoodSelected
from dinner_chooser.models import Dish
from dinner_chooser.persistence import KeyValueStore, load_dishes, save_dishes
from dinner_chooser.selector import Selection, select

logger = logging.getLogger(__name__)


class DinnerSession:
    """Owns the dish collection and persists it after every mutation.

    Mutating methods return ``None`` on success or a warning message when the
    in-memory change went through but could not be saved. Validation and
    index errors propagate and leave the state unchanged.
    """

    def __init__(self, store: KeyValueStore, rng: random.Random | None = None, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.rng = rng or random.Random()
        self.key = key
        self.dishes: list[Dish] = []
        self.mood: int | None = None
        self.last_selection: Selection | None = None
        self.loaded = False

    @property
    def selected_dish(self) -> Dish | None:
        if self.last_selection is None:
            return None
        return self.last_selection.dish

    def load(self) -> str | None:
        dishes, error = load_dishes(self.store, self.key)
        self.dishes = dishes
        self.loaded = True
        if error is not None:
            return f"Could not load the dish list, using defaults: {error}"
        return None

    def set_mood(self, mood: int) -> None:
        if not is_level(mood):
            raise NoMoodSelected(f"Mood must be between 1 and 5, got {mood!r}")
        self.mood = mood
        logger.debug("set_mood mood=%s", mood)

    def choose_dinner(self) -> Selection:
        if self.mood is None:
            raise NoMoodSelected("Pick a mood from 1 to 5 first")
        self.last_selection = select(self.mood, self.dishes, self.rng)
        return self.last_selection

    def add_dish(self, name: str, difficulties: Iterable[int]) -> str | None:
        self.dishes = collection.add_dish(self.dishes, name, difficulties)
        logger.info("add_dish name=%r difficulties=%s", self.dishes[-1].name, self.dishes[-1].difficulties)
        return self._persist()

    def remove_dish(self, index: int) -> str | None:
        remaining = collection.remove_at(self.dishes, index)
        logger.info("remove_dish index=%s name=%r", index, self.dishes[index].name)
        self.dishes = remaining
        return self._persist()

    def reset_dishes(self) -> str | None:
        self.dishes = collection.reset()
        logger.info("reset_dishes dishes=%s", len(self.dishes))
        return self._persist()

    def _persist(self) -> str | None:
        error = save_dishes(self.store, self.dishes, self.key)
        if error is None:
            return None
        return f"Could not save the dish list: {error}"
