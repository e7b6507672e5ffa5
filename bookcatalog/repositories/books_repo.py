from __future__ import annotations

from typing import Any

from ..db import JsonFileStore
from ..utils import normalize_search


class BooksRepository:
    def __init__(self, store: JsonFileStore):
        self.store = store

    def list_books(self, search: str | None = None) -> list[dict[str, Any]]:
        books = self.store.read()
        query_text = normalize_search(search)
        if not query_text:
            return books

        return [
            book
            for book in books
            if query_text in (book.get("title") or "").lower()
            or query_text in (book.get("description") or "").lower()
        ]

    def list_by_label(self, label: str | None = None) -> list[dict[str, Any]]:
        books = self.store.read()
        if not label:
            return books
        return [book for book in books if book.get("label") == label]

    def get_book(self, book_id: str) -> dict[str, Any] | None:
        return next((book for book in self.store.read() if book.get("id") == book_id), None)

    def insert_book(self, book: dict[str, Any]) -> dict[str, Any]:
        with self.store.update() as books:
            books.append(book)
        return book

    def update_book(self, book_id: str, build_fields) -> dict[str, Any] | None:
        """Merge ``build_fields(current)`` into the stored book.

        ``build_fields`` runs while the collection is held, so the merge sees
        the same snapshot that gets written back. Returns ``None`` when the id
        is unknown.
        """
        with self.store.update() as books:
            index = _find_index(books, book_id)
            if index is None:
                return None
            books[index].update(build_fields(dict(books[index])))
            return books[index]

    def delete_book(self, book_id: str) -> bool:
        with self.store.update() as books:
            index = _find_index(books, book_id)
            if index is None:
                return False
            del books[index]
        return True


def _find_index(books: list[dict[str, Any]], book_id: str) -> int | None:
    for index, book in enumerate(books):
        if book.get("id") == book_id:
            return index
    return None
