"""Compose the terminal output for one Stack Overflow answer."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Protocol, Sequence, TextIO

from config import Options
from errors import RetrievalError
from extract import extract
from html_text import decode, unescape
from models import Answer, Question


logger = logging.getLogger(__name__)

NO_ANSWERS = "no answers"
RULE_WIDTH = 70
QUESTION_PREVIEW_CHARS = 300
ANSWER_PREVIEW_CHARS = 200
ELLIPSIS = "..."


class AnswerSource(Protocol):
    def get_answers(self, question_id: int) -> Sequence[Answer]: ...


def _shorten(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def _header(question: Question, answer: Answer, index: int, total: int) -> List[str]:
    accepted = " [ACCEPTED]" if answer.is_accepted else ""
    return [
        f"Question: {unescape(question.title)}",
        f"Score: {question.score} | Answers: {question.answer_count}",
        "-" * RULE_WIDTH,
        "",
        _shorten(decode(question.body), QUESTION_PREVIEW_CHARS),
        "",
        "=" * RULE_WIDTH,
        f"Answer {index}/{total} | Score: {answer.score}{accepted}",
        "-" * RULE_WIDTH,
    ]


def render(question: Question, answer: Answer, index: int, total: int, verbosity: int) -> str:
    """Build the text for `answer` at the given verbosity.

    0 prints the snippet(s) only, 1 adds the sentences around them and
    2 adds the question header and permalink. Without any code block the
    decoded answer body is printed instead (shortened at level 0).
    """
    lines: List[str] = []
    if verbosity >= 2:
        lines.extend(_header(question, answer, index, total))

    content = extract(answer.body)

    if verbosity >= 1 and content.before:
        lines.append(content.before)
        if content.code:
            lines.append("")

    if content.code:
        for i, snippet in enumerate(content.code):
            if i:
                lines.append("")
            lines.append(snippet)
    else:
        text = decode(answer.body)
        if verbosity == 0:
            text = _shorten(text, ANSWER_PREVIEW_CHARS)
        lines.append(text)

    if verbosity >= 1 and content.after:
        if content.code:
            lines.append("")
        lines.append(content.after)

    if verbosity >= 2:
        lines.append("")
        lines.append(question.link)

    return "\n".join(lines) + "\n"


def show_answer(
    source: AnswerSource,
    question: Question,
    options: Options,
    out: Optional[TextIO] = None,
) -> None:
    """Fetch the answers to `question` and write the selected one to `out`.

    Fetch failures are not raised: the question was already found, so a
    plain "no answers" line is printed instead.
    """
    out = out or sys.stdout
    if question.answer_count == 0:
        print(NO_ANSWERS, file=out)
        return

    try:
        answers = list(source.get_answers(question.question_id))
    except RetrievalError as e:
        logger.info("could not fetch answers for %s: %s", question.question_id, e)
        answers = []
    if not answers:
        print(NO_ANSWERS, file=out)
        return

    index = min(max(options.answer, 1), len(answers))
    out.write(render(question, answers[index - 1], index, len(answers), options.verbosity))
