"""Built-in box renderers and the renderer registry.

A renderer receives the decoded box value and the entity encoder and
returns either a :class:`Node` or a :class:`RawHtml` (a plain ``str`` is
accepted as raw HTML too).  Node attributes are always entity-encoded by
the serializer; inner HTML and raw HTML are emitted as given.

Trust boundary: ``codeBlock`` puts ``lang`` into its class attribute and
``equation`` puts ``code`` into the element body without encoding.  Box
values are assumed to come from the same editor instance; integrators
rendering untrusted documents should override those two renderers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Union

# ---------------------------------------------------------------------------
# Render results
# ---------------------------------------------------------------------------


@dataclass
class Node:
    """One HTML element to emit."""

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    is_void: bool = False
    inner_html: Optional[str] = None


@dataclass(frozen=True)
class RawHtml:
    """Pre-built markup, emitted unchanged."""

    html: str


RenderResult = Union[Node, RawHtml, str]
EncodeFn = Callable[[str], str]
BoxRenderer = Callable[[Mapping[str, str], EncodeFn], RenderResult]
Registry = dict[str, BoxRenderer]

# ---------------------------------------------------------------------------
# Embed helpers
# ---------------------------------------------------------------------------

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/"
TWITTER_EMBED_URL = "https://platform.twitter.com/embed/Tweet.html?id="

_ID_RE = re.compile(r"[A-Za-z0-9_-]+")


def extract_id(url: str) -> str:
    """Return the last run of ``[A-Za-z0-9_-]`` in *url*, or ``""``."""
    runs = _ID_RE.findall(url)
    return runs[-1] if runs else ""


# ---------------------------------------------------------------------------
# Built-in renderers
# ---------------------------------------------------------------------------


def render_hr(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    return RawHtml('<div class="lake-box-block lake-hr"><hr /></div>')


def render_image(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    attrs: dict[str, str] = {}
    if box_value.get("url"):
        attrs["src"] = box_value["url"]
    if box_value.get("width"):
        attrs["width"] = box_value["width"]
    if box_value.get("height"):
        attrs["height"] = box_value["height"]
    if box_value.get("caption"):
        attrs["alt"] = box_value["caption"]
    attrs["border"] = "0"
    return Node("img", attrs, is_void=True)


def render_emoji(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    attrs: dict[str, str] = {}
    if box_value.get("url"):
        attrs["src"] = box_value["url"]
    attrs.update(width="32", height="32", border="0")
    return Node("img", attrs, is_void=True)


def render_file(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    attrs: dict[str, str] = {}
    if box_value.get("url"):
        attrs["href"] = box_value["url"]
    attrs["target"] = "_blank"
    return Node("a", attrs, inner_html=encode(box_value.get("name", "")))


def render_code_block(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    # lang is not encoded, see module docstring.
    lang = box_value.get("lang", "")
    code = encode(box_value.get("code", ""))
    return RawHtml(f'<pre class="lang-{lang}"><code>{code}</code></pre>')


def render_equation(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    return Node("code", inner_html=box_value.get("code", ""))


def render_video(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    video_id = extract_id(box_value.get("url", ""))
    return Node(
        "iframe",
        {
            "src": YOUTUBE_EMBED_URL + video_id,
            "title": "YouTube video player",
            "frameborder": "0",
            "allow": (
                "accelerometer; autoplay; clipboard-write; encrypted-media; "
                "gyroscope; picture-in-picture; web-share"
            ),
            "referrerpolicy": "strict-origin-when-cross-origin",
            "allowfullscreen": "true",
            "style": "width: 560px; height: 315px;",
        },
        inner_html="",
    )


def render_twitter(box_value: Mapping[str, str], encode: EncodeFn) -> RenderResult:
    tweet_id = extract_id(box_value.get("url", ""))
    return Node(
        "iframe",
        {
            "src": TWITTER_EMBED_URL + tweet_id,
            "title": "Twitter tweet",
            "scrolling": "no",
            "frameborder": "0",
            "allowtransparency": "true",
            "allowfullscreen": "true",
            "style": "width: 550px; height: 300px;",
        },
        inner_html="",
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_BUILTIN_RENDERERS: dict[str, BoxRenderer] = {
    "hr": render_hr,
    "image": render_image,
    "emoji": render_emoji,
    "file": render_file,
    "codeBlock": render_code_block,
    "equation": render_equation,
    "video": render_video,
    "twitter": render_twitter,
}

BOX_TYPES = list(_BUILTIN_RENDERERS.keys())


def get_default_box_renderers() -> Registry:
    """Return a new registry holding the built-in renderers.

    Each call builds a separate dict, so callers may add or replace entries
    and pass the result to :func:`lml2html.to_html` without affecting
    anyone else.

    Usage::

        renderers = get_default_box_renderers()
        renderers["image"] = lambda value, encode: RawHtml("<figure></figure>")
        html = to_html(text, renderers)
    """
    return dict(_BUILTIN_RENDERERS)
