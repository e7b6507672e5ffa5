from __future__ import annotations

from typing import Any

from ..db import JsonFileStore


class LabelsRepository:
    def __init__(self, store: JsonFileStore):
        self.store = store

    def list_labels(self) -> Any:
        return self.store.read()

    def is_known(self, label: Any) -> bool:
        if not isinstance(label, str) or not label:
            return False
        labels = self.list_labels()
        # the labels file is normally an array; an object's keys count as labels
        if not isinstance(labels, (list, dict)):
            return False
        return label in labels

    def replace_labels(self, labels: list[str]):
        self.store.write(labels)
