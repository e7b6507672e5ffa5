import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    DB_PATH = os.getenv("DB", "./db.json")
    DB_LABEL_PATH = os.getenv("DB_LABEL", "./db_label.json")
    IMAGE_DIR = os.getenv("IMAGE_DIR", "./image")

    PORT = int(os.getenv("PORT", "3024"))
    DEBUG = env_bool("FLASK_DEBUG", False)

    DEFAULT_LABEL = os.getenv("DEFAULT_LABEL", "wish").strip() or "wish"
    PLACEHOLDER_IMAGE = "image/notimage.jpg"

    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))

    WRITE_RATE_LIMIT = os.getenv("WRITE_RATE_LIMIT", "60 per minute")
    RATELIMIT_ENABLED = env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    JSON_SORT_KEYS = False


class TestConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False
