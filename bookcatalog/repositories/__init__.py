from .books_repo import BooksRepository
from .labels_repo import LabelsRepository

__all__ = [
    "BooksRepository",
    "LabelsRepository",
]
