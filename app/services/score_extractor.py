import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5

_SCORE_PATTERN = re.compile(r"(\d+)\s*/\s*10")


@dataclass(frozen=True)
class ScoreExtraction:
    """Score and feedback read from evaluator text.

    ``parsed`` is False when no score line was found and ``score`` holds the
    neutral default instead.
    """
    score: int
    feedback: str
    parsed: bool


def extract_score(text: str) -> ScoreExtraction:
    text = text or ""
    match = _SCORE_PATTERN.search(text)

    if not match:
        logger.warning("No score found in evaluation, using default score %d", DEFAULT_SCORE)
        return ScoreExtraction(score=DEFAULT_SCORE, feedback=text, parsed=False)

    return ScoreExtraction(score=int(match.group(1)), feedback=text, parsed=True)
