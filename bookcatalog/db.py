from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from flask import current_app


class JsonFileStore:
    """A JSON array kept in a single file.

    Every read loads the whole file and every write replaces it. ``update``
    holds a lock for one read-modify-write cycle so concurrent requests in the
    same process cannot drop each other's changes.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def ensure_exists(self) -> bool:
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("[]", encoding="utf-8")
        return True

    def read(self) -> Any:
        with self._lock:
            raw = self.path.read_text(encoding="utf-8")
        return json.loads(raw or "[]")

    def write(self, items: Any):
        payload = json.dumps(items, ensure_ascii=False)
        with self._lock:
            self.path.write_text(payload, encoding="utf-8")

    @contextmanager
    def update(self):
        with self._lock:
            items = self.read()
            yield items
            self.write(items)


def init_db(app):
    books_store = JsonFileStore(app.config["DB_PATH"])
    labels_store = JsonFileStore(app.config["DB_LABEL_PATH"])

    for store in (books_store, labels_store):
        if store.ensure_exists():
            app.logger.info("Created empty database file '%s'", store.path)

    app.extensions["books_store"] = books_store
    app.extensions["labels_store"] = labels_store


def get_books_store() -> JsonFileStore:
    return current_app.extensions["books_store"]


def get_labels_store() -> JsonFileStore:
    return current_app.extensions["labels_store"]


def db_is_ready() -> bool:
    try:
        get_books_store().read()
        get_labels_store().read()
    except (OSError, ValueError):
        return False
    return True
