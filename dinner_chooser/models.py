"""Domain models for the dinner chooser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dish:
    """A dish name tagged with one or more difficulty categories."""

    name: str
    difficulties: tuple[int, ...]

    def has_difficulty(self, level: int) -> bool:
        return level in self.difficulties

    def to_record(self) -> dict[str, object]:
        return {"name": self.name, "difficulties": list(self.difficulties)}


Collection = list[Dish]
