import re
import base64
import binascii
from typing import Tuple, Optional
from urllib.parse import quote, unquote

from werkzeug.datastructures import FileStorage

from ..config.settings import Config

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]+)*?);base64,(?P<data>.*)$", re.S)


def truncate_message(message: str, limit: int) -> str:
    """Cut `message` to `limit` characters, marking the cut with '...'."""
    message = message or ""
    if len(message) > limit:
        return message[:limit] + "..."
    return message


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed"""
    return "." in filename and filename.rsplit(".", 1)[1].lower() in Config.ALLOWED_EXTENSIONS


def file_to_data_uri(upload: FileStorage) -> str:
    """Read an uploaded image into a 'data:<mime>;base64,<payload>' URI."""
    if not allowed_file(upload.filename or ""):
        raise ValueError(f"bad_extension:{upload.filename}")

    ext = upload.filename.rsplit(".", 1)[1].lower()
    mime = upload.mimetype if (upload.mimetype or "").startswith("image/") else _mime_for_extension(ext)
    payload = base64.b64encode(upload.read()).decode("ascii")
    return f"data:{mime};base64,{payload}"


def _mime_for_extension(ext: str) -> str:
    if ext in ("jpg", "jpeg"):
        return "image/jpeg"
    return f"image/{ext}"


def parse_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into (mime_type, raw bytes).

    Raises:
        ValueError: if the string is not a base64 data URI with a MIME type
    """
    m = _DATA_URI_RE.match((data_uri or "").strip())
    if not m or not m.group("mime"):
        raise ValueError("Image must be a base64 data URI with a MIME type")
    try:
        raw = base64.b64decode(m.group("data"), validate=False)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Image data is not valid base64: {e}")
    if not raw:
        raise ValueError("Image data URI has an empty payload")
    return m.group("mime").lower(), raw


def slugify(name: str) -> str:
    """Ingredient display name -> URL slug ('Olive Oil' -> 'olive-oil')."""
    return quote(re.sub(r"\s+", "-", (name or "").strip().lower()), safe="")


def deslugify(slug: Optional[str]) -> str:
    """Best-effort inverse of slugify ('olive-oil' -> 'Olive Oil').

    Hyphens that were part of the original name come back as spaces.
    """
    text = unquote(slug or "").replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)
