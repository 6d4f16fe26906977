import random

import pytest

from dinner_chooser.errors import PersistenceError


class FakeStore:
    """In-memory key-value store that can be told to fail."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_get = False
        self.fail_set = False
        self.set_calls = 0

    def get(self, key: str) -> str | None:
        if self.fail_get:
            raise PersistenceError("read failed")
        return self.data.get(key)

    def set(self, key: str, blob: str) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise PersistenceError("write failed")
        self.data[key] = blob


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240518)
