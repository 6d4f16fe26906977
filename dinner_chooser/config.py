"""Runtime configuration defaults for persistence and logging."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("DINNER_CHOOSER_DB", "data/dinner_chooser.db")

# Single key holding the whole serialized dish list.
STORAGE_KEY = "@dinner_chooser_dishes"

DEBUG_LOG_PATH = "/tmp/dinner-chooser-debug.log"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
