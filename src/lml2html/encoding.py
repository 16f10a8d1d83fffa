"""Entity encoding and Base64 payload decoding.

:func:`encode` is the only escaping applied to attribute values, so its
character set must cover everything that can end a double-quoted attribute
or open a new tag.
"""

from __future__ import annotations

import base64
import binascii
import re

from lml2html.errors import DecodeError

_ENTITY_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "\xa0": "&nbsp;",
}

_ENTITY_RE = re.compile("[&<>\"\xa0]")


def encode(text: str) -> str:
    """Replace reserved characters in *text* with named HTML entities."""
    return _ENTITY_RE.sub(lambda m: _ENTITY_MAP[m.group(0)], text)


def decode_base64_utf8(payload: str) -> str:
    """Decode a standard Base64 *payload* and read the bytes as UTF-8.

    Raises:
        DecodeError: *payload* has characters outside the Base64 alphabet,
            bad padding, or decodes to bytes that are not UTF-8.
    """
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"invalid base64 payload: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"payload is not valid UTF-8: {exc}") from exc
