"""Error kinds raised by the dish collection, selector and persistence."""

from __future__ import annotations


class DinnerChooserError(Exception):
    """Base class for all recoverable dinner chooser errors."""


class ValidationError(DinnerChooserError, ValueError):
    """A new dish was rejected (empty name, no difficulties, duplicate name)."""


class DishIndexError(DinnerChooserError, IndexError):
    """Removal requested for a position outside the collection."""


class NoMoodSelected(DinnerChooserError):
    """Selection requested before a mood between 1 and 5 was chosen."""


class NoDishesAvailable(DinnerChooserError):
    """Selection requested while the collection is empty."""


class PersistenceError(DinnerChooserError):
    """The key-value store failed to read, write or decode the dish list."""
