from pathlib import Path

from flask import Blueprint, current_app, jsonify, send_from_directory

from ..db import db_is_ready
from .api import books_by_label

main_bp = Blueprint("main", __name__)


@main_bp.route("/category/<path:label>")
def category(label):
    return books_by_label(label)


@main_bp.route("/image/<path:filename>")
def image_file(filename):
    image_dir = Path(current_app.config["IMAGE_DIR"]).resolve()
    # clients only ever expect jpeg here, whatever the stored format
    return send_from_directory(image_dir, filename, mimetype="image/jpeg")


@main_bp.route("/healthz")
def healthz():
    if not db_is_ready():
        return jsonify({"status": "degraded", "database": "unreadable"}), 503
    return jsonify({"status": "ok", "database": "up"})
