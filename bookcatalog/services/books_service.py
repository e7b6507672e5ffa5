from __future__ import annotations

from typing import Any

from flask import current_app

from ..db import JsonFileStore
from ..errors import NotFound, ValidationFailed
from ..repositories.books_repo import BooksRepository
from ..repositories.labels_repo import LabelsRepository
from ..utils import as_string, generate_book_id
from .image_storage_service import is_data_uri_image, save_data_uri_image

TITLE_REQUIRED_MESSAGE = "Book title is not specified"
DESCRIPTION_REQUIRED_MESSAGE = "Book description is not specified"


class BooksService:
    def __init__(self, books_store: JsonFileStore, labels_store: JsonFileStore):
        self.repo = BooksRepository(books_store)
        self.labels_repo = LabelsRepository(labels_store)

    def list_books(self, search: str | None = None):
        return self.repo.list_books(search=search)

    def list_books_by_label(self, label: str | None = None):
        return self.repo.list_by_label(label=label)

    def list_labels(self):
        return self.labels_repo.list_labels()

    def get_book(self, book_id: str):
        book = self.repo.get_book(book_id)
        if not book:
            raise NotFound()
        return book

    def create_book(self, data: dict[str, Any]):
        book_id = generate_book_id()
        book = self.make_book_from_data(data, book_id)
        book["id"] = book_id
        self.repo.insert_book(book)
        current_app.logger.info("Created book '%s'", book_id)
        return book

    def update_book(self, book_id: str, data: dict[str, Any]):
        def build_fields(current: dict[str, Any]):
            return self.make_book_from_data(
                {**current, **data},
                book_id,
                stored_image=current.get("image"),
            )

        updated = self.repo.update_book(book_id, build_fields)
        if updated is None:
            raise NotFound()
        return updated

    def delete_book(self, book_id: str):
        if not self.repo.delete_book(book_id):
            raise NotFound()
        current_app.logger.info("Deleted book '%s'", book_id)
        return {}

    def make_book_from_data(self, data: dict[str, Any], book_id: str, stored_image: str | None = None):
        """Validate and normalise the writable fields of a book.

        Raises ``ValidationFailed`` listing every empty required field. Image
        data-URIs are written to disk only once validation has passed.
        """
        book = {
            "title": as_string(data.get("title")),
            "author": as_string(data.get("author")),
            "description": as_string(data.get("description")),
            "label": self._as_label(data.get("label")),
            "image": data.get("image"),
            "rating": data.get("rating") or 0,
        }

        errors = []
        if not book["title"]:
            errors.append({"field": "title", "message": TITLE_REQUIRED_MESSAGE})
        if not book["description"]:
            errors.append({"field": "description", "message": DESCRIPTION_REQUIRED_MESSAGE})
        if errors:
            raise ValidationFailed(errors)

        book["image"] = self._as_image(book["image"], book_id, stored_image)
        return book

    def _as_label(self, value: Any) -> str:
        if self.labels_repo.is_known(value):
            return value
        return current_app.config["DEFAULT_LABEL"]

    def _as_image(self, value: Any, book_id: str, stored_image: str | None) -> str:
        if is_data_uri_image(value):
            return save_data_uri_image(value, book_id, current_app.config["IMAGE_DIR"])
        # an unchanged stored path survives updates
        if stored_image and value == stored_image:
            return stored_image
        return current_app.config["PLACEHOLDER_IMAGE"]
