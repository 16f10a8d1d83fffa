"""Hand-written scanners for LML special tags and their attributes.

The document is never parsed into a tree.  :func:`scan_tags` walks the text
once and splits it into literal runs and special-tag spans; the driver in
:mod:`lml2html.converter` replaces the spans and echoes everything else.
:func:`parse_attributes` reads the key/value pairs of one opening tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

# ---------------------------------------------------------------------------
# Token definitions
# ---------------------------------------------------------------------------


class TokenType(Enum):
    TEXT = "text"
    BOX = "box"
    ANCHOR = "anchor"
    FOCUS = "focus"


@dataclass
class Token:
    type: TokenType
    # Exact source span covered by the token.
    source: str
    # Box tokens only: the opening ``<lake-box ...>`` tag.
    open_tag: str = ""


class _State(Enum):
    OUTSIDE = "outside"
    IN_OPEN_TAG = "in_open_tag"
    SEEK_CLOSE = "seek_close"


_BOX_OPEN_RE = re.compile(r"<lake-box(?=[\s/])", re.IGNORECASE | re.ASCII)
_BOX_CLOSE_RE = re.compile(r"</lake-box>", re.IGNORECASE | re.ASCII)
_MARKER_RE = re.compile(r"<(anchor|focus)\s*/>", re.IGNORECASE)

_MARKER_TYPES = {"anchor": TokenType.ANCHOR, "focus": TokenType.FOCUS}

# ---------------------------------------------------------------------------
# Tag scanner
# ---------------------------------------------------------------------------


def scan_tags(text: str) -> Iterator[Token]:
    """Yield the literal runs and special-tag spans of *text* in order.

    Joining ``token.source`` over all tokens reproduces *text* exactly.

    A box span starts at ``<lake-box`` and ends after the first following
    ``</lake-box>``; without a closing tag it runs to the end of *text*.
    A ``<lake-box`` that is never closed by ``>`` is literal text, as is a
    bare ``<lake-box>`` with nothing between the name and ``>``.
    """
    length = len(text)
    pos = 0
    text_start = 0
    tag_start = 0
    open_end = 0
    state = _State.OUTSIDE

    while True:
        if state is _State.OUTSIDE:
            lt = text.find("<", pos)
            if lt == -1:
                break
            if _BOX_OPEN_RE.match(text, lt):
                tag_start = lt
                state = _State.IN_OPEN_TAG
                continue
            marker = _MARKER_RE.match(text, lt)
            if marker:
                if lt > text_start:
                    yield Token(TokenType.TEXT, text[text_start:lt])
                yield Token(_MARKER_TYPES[marker.group(1).lower()], marker.group(0))
                pos = text_start = marker.end()
                continue
            pos = lt + 1

        elif state is _State.IN_OPEN_TAG:
            gt = text.find(">", tag_start)
            if gt == -1:
                pos = tag_start + 1
                state = _State.OUTSIDE
                continue
            open_end = gt + 1
            state = _State.SEEK_CLOSE

        else:
            close = _BOX_CLOSE_RE.search(text, open_end)
            end = close.end() if close else length
            if tag_start > text_start:
                yield Token(TokenType.TEXT, text[text_start:tag_start])
            yield Token(
                TokenType.BOX,
                text[tag_start:end],
                open_tag=text[tag_start:open_end],
            )
            pos = text_start = end
            state = _State.OUTSIDE

    if text_start < length:
        yield Token(TokenType.TEXT, text[text_start:])


# ---------------------------------------------------------------------------
# Attribute parser
# ---------------------------------------------------------------------------

_KEY_RE = re.compile(r"[\w\-:]+", re.ASCII)
_UNQUOTED_STOP = frozenset("\"'<>")
_TAG_TERMINATORS = frozenset("/>")


def parse_attributes(tag: str) -> dict[str, str]:
    """Return the attributes of the opening tag *tag*.

    Recognises ``key=value``, ``key="value"`` and ``key='value'``.  Each
    occurrence must be preceded by whitespace and followed by whitespace,
    ``/`` or ``>``.  Keys are lower-cased and a repeated key keeps its last
    value.  Bare flags such as ``data-hidden`` produce no entry.
    """
    attrs: dict[str, str] = {}
    length = len(tag)
    pos = 0

    while pos < length:
        if not tag[pos].isspace():
            pos += 1
            continue
        while pos < length and tag[pos].isspace():
            pos += 1
        found = _read_attribute(tag, pos)
        if found is None:
            continue
        key, value, pos = found
        attrs[key.lower()] = value

    return attrs


def _read_attribute(tag: str, pos: int) -> tuple[str, str, int] | None:
    """Read one attribute starting at *pos*; return ``(key, value, end)``."""
    key_match = _KEY_RE.match(tag, pos)
    if key_match is None:
        return None
    eq = key_match.end()
    if eq + 1 >= len(tag) or tag[eq] != "=":
        return None

    start = eq + 1
    quote = tag[start]
    if quote in ("\"", "'"):
        close = tag.find(quote, start + 1)
        if close == -1:
            return None
        value = tag[start + 1:close]
        end = close + 1
    else:
        end = start
        while end < len(tag) and not (
            tag[end].isspace() or tag[end] in _UNQUOTED_STOP
        ):
            end += 1
        if end == start:
            return None
        if end >= len(tag) or not (
            tag[end].isspace() or tag[end] in _TAG_TERMINATORS
        ):
            # Fall back to the last "/" inside the run as the terminator.
            slash = tag.rfind("/", start + 1, end)
            if slash == -1:
                return None
            end = slash
        value = tag[start:end]

    if end >= len(tag):
        return None
    if not (tag[end].isspace() or tag[end] in _TAG_TERMINATORS):
        return None
    return key_match.group(0), value, end
