import logging
from sqlalchemy.orm import Session
from typing import Optional
from uuid import uuid4

from app.ai import llm_client
from app.core.exceptions import ValidationError
from app.models.question_result import QuestionResult
from app.services.persistence import commit, fetch
from app.services.score_extractor import extract_score

logger = logging.getLogger(__name__)


def submit_answer(
    db: Session,
    session_id: str,
    question: str,
    answer_text: str,
    eye_contact_score: Optional[int] = None,
) -> QuestionResult:
    if not answer_text or not answer_text.strip():
        raise ValidationError("Answer text is required")

    # session_id is stored as given, without checking the session exists
    evaluation = llm_client.evaluate_answer(question, answer_text)
    extraction = extract_score(evaluation)

    result = QuestionResult(
        id=str(uuid4()),
        session_id=session_id,
        question=question,
        answer_text=answer_text,
        answer_score=extraction.score,
        eye_contact_score=eye_contact_score,
        feedback=extraction.feedback,
    )
    commit(db, result)

    logger.info(f"Recorded answer {result.id} for session {session_id} (score {result.answer_score})")
    return result


def list_results(db: Session, session_id: str) -> list:
    return fetch(
        lambda: db.query(QuestionResult)
        .filter(QuestionResult.session_id == session_id)
        .order_by(QuestionResult.created_at.asc())
        .all()
    )
