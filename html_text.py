from __future__ import annotations

import re
from typing import Tuple


# Order matters: "&amp;" is decoded after the others so "&amp;lt;" yields "&lt;"
ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&#39;", "'"),
    ("&#x27;", "'"),
)

_BREAK_TAGS: Tuple[str, ...] = ("<p>", "</p>", "<br>", "<br/>")
TAG_PATTERN = re.compile(r"<[^>]*>")


def unescape(text: str) -> str:
    """Decode the small fixed set of entities the API emits.

    Anything else (``&nbsp;``, ``&#8212;`` ...) is left as-is.
    """
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def decode(html: str) -> str:
    """Turn an HTML fragment into plain text lines.

    Paragraph and line-break tags become newlines, entities are decoded, the
    remaining tags are dropped and blank lines are removed. Pure function.
    """
    for tag in _BREAK_TAGS:
        html = html.replace(tag, "\n")
    text = TAG_PATTERN.sub("", unescape(html))

    lines = [ln.strip() for ln in text.split("\n")]
    return "\n".join(ln for ln in lines if ln)
