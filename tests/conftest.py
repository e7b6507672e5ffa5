import json

import pytest

from bookcatalog import create_app
from bookcatalog.config import TestConfig

LABELS = ["wish", "read", "reading"]


@pytest.fixture
def app(tmp_path):
    labels_path = tmp_path / "db_label.json"
    labels_path.write_text(json.dumps(LABELS), encoding="utf-8")

    class FileTestConfig(TestConfig):
        DB_PATH = str(tmp_path / "db.json")
        DB_LABEL_PATH = str(labels_path)
        IMAGE_DIR = str(tmp_path / "image")

    return create_app(FileTestConfig)


@pytest.fixture
def client(app):
    return app.test_client()
