from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_URI_IMAGE_PREFIX = "data:image"
EXTENSION_OVERRIDES = {"jpeg": "jpg", "svg+xml": "svg"}


def configure_image_storage(app):
    image_dir = Path(app.config["IMAGE_DIR"])
    image_dir.mkdir(parents=True, exist_ok=True)
    app.logger.info("Image storage directory: %s", image_dir.resolve())


def is_data_uri_image(value) -> bool:
    return isinstance(value, str) and value.startswith(DATA_URI_IMAGE_PREFIX)


def extension_for(data_uri: str) -> str:
    mime_type = data_uri.split(";", 1)[0]
    subtype = mime_type.split("/", 1)[1] if "/" in mime_type else ""
    return EXTENSION_OVERRIDES.get(subtype, subtype)


def save_data_uri_image(data_uri: str, image_id: str, image_dir) -> str:
    """Decode a base64 data-URI into ``{image_dir}/{image_id}.{ext}``.

    Returns the path relative to the server root. Failures are logged only;
    the path is returned whether or not the file was written.
    """
    extension = extension_for(data_uri)
    filename = f"{image_id}.{extension}"
    encoded = data_uri.split(";base64,")[-1]

    try:
        content = base64.b64decode(encoded)
        target_dir = Path(image_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / filename).write_bytes(content)
    except (binascii.Error, OSError) as exc:
        logger.warning("Unable to store image '%s': %s", filename, exc)

    return f"image/{filename}"
