import random
import time
from typing import Any


def generate_book_id() -> str:
    # six random digits + the low digits of the millisecond clock
    random_part = f"{random.randrange(10**6):06d}"
    clock_part = str(time.time_ns() // 1_000_000)[7:]
    return random_part + clock_part


def as_string(value: Any) -> str:
    if not value:
        return ""
    return str(value).strip()


def normalize_search(value: str | None) -> str:
    return (value or "").strip().lower()
