"""Pull ``<pre><code>`` blocks and their surrounding prose out of answer HTML.

This is a regex scan over the body, not an HTML parser: only the exact
``<pre ...><code ...>...</code></pre>`` shape is recognised, and nesting or
malformed markup is not handled.
"""

from __future__ import annotations

import re
from typing import List

from html_text import TAG_PATTERN, decode, unescape
from models import ExtractedContent


PROSE_LIMIT = 150

_PRE_CODE_PATTERN = re.compile(r"<pre[^>]*><code[^>]*>(.*?)</code></pre>", re.DOTALL)
# ":python" / ":shell" style hint on the first line of a snippet
_LANG_HINT_PATTERN = re.compile(r"\A:\w+\s*\n")


def clean_code(code: str) -> str:
    code = unescape(code)
    code = _LANG_HINT_PATTERN.sub("", code, count=1)
    code = TAG_PATTERN.sub("", code)
    return code.strip()


def _trim_before(text: str) -> str:
    """Keep the sentence that most likely introduces the snippet."""
    if len(text) <= PROSE_LIMIT:
        return text
    sentences = text.split(".")
    if len(sentences) > 1:
        return sentences[-2].strip() + "."
    return text[-PROSE_LIMIT:]


def _trim_after(text: str) -> str:
    if len(text) <= PROSE_LIMIT:
        return text
    text = text[:PROSE_LIMIT]
    idx = text.rfind(".")
    if idx != -1:
        text = text[: idx + 1]
    return text


def extract(html: str) -> ExtractedContent:
    """Split an answer body into code snippets and the prose around them.

    Returns an empty ExtractedContent when the body holds no code block;
    callers fall back to ``decode`` on the whole body in that case.
    """
    matches = list(_PRE_CODE_PATTERN.finditer(html))
    if not matches:
        return ExtractedContent()

    code: List[str] = []
    for match in matches:
        snippet = clean_code(match.group(1))
        if snippet:
            code.append(snippet)

    before = _trim_before(decode(html[: matches[0].start()]).strip())
    after = _trim_after(decode(html[matches[-1].end():]).strip())
    return ExtractedContent(code=tuple(code), before=before, after=after)
