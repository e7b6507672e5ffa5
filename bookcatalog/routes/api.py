import json

from flask import Blueprint, current_app, jsonify, request, url_for

from ..db import get_books_store, get_labels_store
from ..extensions import limiter
from ..services.books_service import BooksService

api_bp = Blueprint("api", __name__, url_prefix="/api")


def _write_rate_limit() -> str:
    """Limit for POST/PATCH/DELETE on books; exceeding it answers 429 with a JSON message."""
    return current_app.config.get("WRITE_RATE_LIMIT", "60 per minute")


def _books_service() -> BooksService:
    return BooksService(get_books_store(), get_labels_store())


def _json_body() -> dict:
    payload = json.loads(request.get_data(as_text=True))
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


@api_bp.route("/books", methods=["GET"], strict_slashes=False)
def books_list():
    search = request.args.get("search", "")
    return jsonify(_books_service().list_books(search=search))


@api_bp.route("/books", methods=["POST"], strict_slashes=False)
@limiter.limit(_write_rate_limit, methods=["POST"])
def books_create():
    book = _books_service().create_book(_json_body())
    response = jsonify(book)
    response.status_code = 201
    response.headers["Location"] = url_for("api.books_detail", book_id=book["id"])
    return response


@api_bp.route("/books/category/<path:label>")
def books_by_label(label):
    return jsonify(_books_service().list_books_by_label(label))


@api_bp.route("/books/<book_id>", methods=["GET"])
def books_detail(book_id):
    return jsonify(_books_service().get_book(book_id))


@api_bp.route("/books/<book_id>", methods=["PATCH"])
@limiter.limit(_write_rate_limit, methods=["PATCH"])
def books_update(book_id):
    return jsonify(_books_service().update_book(book_id, _json_body()))


@api_bp.route("/books/<book_id>", methods=["DELETE"])
@limiter.limit(_write_rate_limit, methods=["DELETE"])
def books_delete(book_id):
    return jsonify(_books_service().delete_book(book_id))


@api_bp.route("/label")
def labels_list():
    return jsonify(_books_service().list_labels())
