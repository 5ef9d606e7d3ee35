"""
Turns the raw text of a question-generation call into a clean question list.

The upstream model is asked for a JSON array but may answer with an object
wrapping the array, an object of numbered questions, or prose around an
array. Each strategy below returns a list on success or None on a miss, and
the first success wins.
"""

import json
import logging
import re

from app.core.exceptions import QuestionParseError

logger = logging.getLogger(__name__)

MAX_QUESTIONS = 10

_BRACKETED = re.compile(r"\[[\s\S]*\]")


def _direct_sequence(document):
    if isinstance(document, list):
        return document
    return None


def _sequence_field(document):
    if not isinstance(document, dict):
        return None
    if isinstance(document.get("questions"), list):
        return document["questions"]
    return None


def _text_values(document):
    # Always succeeds: a parsed document with no text values is an empty list
    if not isinstance(document, dict):
        return []
    return [value for value in document.values() if isinstance(value, str)]


STRUCTURED_STRATEGIES = (_direct_sequence, _sequence_field, _text_values)


def _bracketed_array(raw: str):
    match = _BRACKETED.search(raw)
    if not match:
        return None

    try:
        items = json.loads(match.group(0))
    except ValueError:
        return None

    if not isinstance(items, list):
        return None

    questions = []
    for item in items:
        if isinstance(item, str):
            questions.append(item)
        elif isinstance(item, dict):
            questions.append(item.get("question"))
        else:
            questions.append(None)
    return questions


def _clean(candidates: list) -> list:
    return [
        q for q in candidates[:MAX_QUESTIONS]
        if isinstance(q, str) and q
    ]


def normalize_questions(raw: str) -> list:
    try:
        document = json.loads(raw)
    except (TypeError, ValueError):
        candidates = _bracketed_array(raw or "")
    else:
        candidates = None
        for strategy in STRUCTURED_STRATEGIES:
            candidates = strategy(document)
            if candidates is not None:
                break

    if candidates is None:
        logger.error(f"Could not parse questions from AI response: {str(raw)[:200]!r}")
        raise QuestionParseError("Could not parse questions from AI response")

    questions = _clean(candidates)
    if not questions:
        logger.warning("AI response parsed but contained no usable questions")
    return questions
