"""Records decoded from Stack Exchange API items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from errors import DecodeError


def _require_object(item: Any) -> Dict[str, Any]:
    if not isinstance(item, dict):
        raise DecodeError(f"expected a JSON object, got {type(item).__name__}")
    return item


def _int_field(data: Dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"field {key!r} is not an integer: {value!r}") from e


@dataclass(frozen=True)
class Question:
    title: str
    question_id: int
    answer_count: int
    score: int
    link: str
    body: str

    @classmethod
    def from_api(cls, item: Any) -> "Question":
        data = _require_object(item)
        return cls(
            title=str(data.get("title", "")),
            question_id=_int_field(data, "question_id"),
            answer_count=_int_field(data, "answer_count"),
            score=_int_field(data, "score"),
            link=str(data.get("link", "")),
            body=str(data.get("body", "")),
        )


@dataclass(frozen=True)
class Answer:
    score: int
    is_accepted: bool
    body: str

    @classmethod
    def from_api(cls, item: Any) -> "Answer":
        data = _require_object(item)
        return cls(
            score=_int_field(data, "score"),
            is_accepted=bool(data.get("is_accepted", False)),
            body=str(data.get("body", "")),
        )


@dataclass(frozen=True)
class ExtractedContent:
    """Code blocks found in an answer body and the prose around them.

    `before` and `after` are empty whenever `code` is empty.
    """

    code: Tuple[str, ...] = ()
    before: str = ""
    after: str = ""
