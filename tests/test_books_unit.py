import json

import pytest

from bookcatalog.db import JsonFileStore
from bookcatalog.errors import ValidationFailed
from bookcatalog.services.books_service import BooksService
from bookcatalog.services.image_storage_service import extension_for, is_data_uri_image, save_data_uri_image
from bookcatalog.utils import as_string, generate_book_id


def books_service(app):
    return BooksService(app.extensions["books_store"], app.extensions["labels_store"])


def test_generate_book_id_is_numeric():
    book_id = generate_book_id()
    assert book_id.isdigit()
    assert len(book_id) >= 12


def test_as_string_trims_and_handles_empty_values():
    assert as_string("  Dune ") == "Dune"
    assert as_string(None) == ""
    assert as_string(0) == ""
    assert as_string(42) == "42"


def test_extension_for_maps_mime_subtypes():
    assert extension_for("data:image/jpeg;base64,AAAA") == "jpg"
    assert extension_for("data:image/svg+xml;base64,AAAA") == "svg"
    assert extension_for("data:image/webp;base64,AAAA") == "webp"


def test_is_data_uri_image():
    assert is_data_uri_image("data:image/png;base64,AAAA")
    assert not is_data_uri_image("image/123.png")
    assert not is_data_uri_image(None)


def test_save_data_uri_image_returns_path_even_when_write_fails(tmp_path, caplog):
    blocker = tmp_path / "image"
    blocker.write_text("not a directory", encoding="utf-8")

    path = save_data_uri_image("data:image/png;base64,iVBORw0KGgo=", "42", blocker)

    assert path == "image/42.png"
    assert "Unable to store image" in caplog.text


def test_make_book_from_data_normalizes_fields(app):
    with app.app_context():
        book = books_service(app).make_book_from_data(
            {"title": " Dune ", "description": "Desert", "label": "reading", "rating": None, "extra": "x"},
            "1",
        )

    assert book == {
        "title": "Dune",
        "author": "",
        "description": "Desert",
        "label": "reading",
        "image": "image/notimage.jpg",
        "rating": 0,
    }


def test_make_book_from_data_validates_before_storing_image(app, tmp_path):
    with app.app_context():
        with pytest.raises(ValidationFailed) as excinfo:
            books_service(app).make_book_from_data(
                {"title": "Dune", "image": "data:image/png;base64,iVBORw0KGgo="},
                "7",
            )

    assert excinfo.value.status_code == 422
    assert excinfo.value.errors == [{"field": "description", "message": "Book description is not specified"}]
    assert not (tmp_path / "image" / "7.png").exists()


def test_labels_file_may_be_an_object(app):
    app.extensions["labels_store"].write({"classics": "Classics"})

    with app.app_context():
        service = books_service(app)
        assert service.make_book_from_data({"title": "a", "description": "b", "label": "classics"}, "1")["label"] == "classics"
        assert service.make_book_from_data({"title": "a", "description": "b", "label": "read"}, "1")["label"] == "wish"


def test_patch_with_new_path_string_resets_image_to_placeholder(app):
    app.extensions["books_store"].write(
        [{"id": "9", "title": "a", "description": "b", "label": "wish", "image": "image/9.png", "rating": 0}]
    )

    with app.app_context():
        updated = books_service(app).update_book("9", {"image": "https://example.com/cover.jpg"})

    assert updated["image"] == "image/notimage.jpg"


def test_store_update_skips_write_when_body_raises(tmp_path):
    store = JsonFileStore(tmp_path / "db.json")
    assert store.ensure_exists()
    assert not store.ensure_exists()

    with pytest.raises(RuntimeError):
        with store.update() as books:
            books.append({"id": "1"})
            raise RuntimeError("boom")

    assert json.loads(store.path.read_text(encoding="utf-8")) == []


def test_labels_file_holding_a_string_knows_no_labels(app):
    app.extensions["labels_store"].write("wishlist")

    with app.app_context():
        book = books_service(app).make_book_from_data({"title": "a", "description": "b", "label": "list"}, "1")

    assert book["label"] == "wish"
