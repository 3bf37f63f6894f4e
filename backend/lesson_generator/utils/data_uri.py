"""
Helpers for base64 data URIs exchanged with the frontend.

Images travel as ``data:<mime>;base64,<payload>`` strings; reference images
may also arrive as a bare base64 payload.
"""
import base64
import binascii
import re
from typing import Tuple, Union

DATA_URI_PATTERN = re.compile(r'^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?,(?P<payload>.*)$', re.DOTALL)


def split_data_uri(value: str, default_mime_type: str = "image/jpeg") -> Tuple[str, str]:
    """
    Split a data URI into (mime_type, base64 payload).

    A bare payload is returned unchanged with the default MIME type.
    """
    match = DATA_URI_PATTERN.match(value.strip())
    if not match:
        return default_mime_type, value.strip()
    return match.group('mime') or default_mime_type, match.group('payload')


def decode_image(value: str, default_mime_type: str = "image/jpeg") -> Tuple[str, bytes]:
    """
    Decode a data URI or bare base64 string to (mime_type, raw bytes).

    Raises:
        ValueError: if the payload is empty or not valid base64
    """
    mime_type, payload = split_data_uri(value, default_mime_type)
    if not payload:
        raise ValueError("Image payload is empty")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Image payload is not valid base64: {e}") from e
    return mime_type, data


def to_data_uri(mime_type: str, data: Union[bytes, str]) -> str:
    """Build a data URI from raw bytes (or an already encoded payload)."""
    if isinstance(data, (bytes, bytearray)):
        payload = base64.b64encode(data).decode('ascii')
    else:
        payload = data
    return f"data:{mime_type};base64,{payload}"
