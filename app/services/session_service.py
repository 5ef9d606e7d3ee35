import logging
from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional
from uuid import uuid4

from app.ai import llm_client
from app.core.exceptions import NotFoundError, ValidationError
from app.models.question_result import QuestionResult
from app.models.session import InterviewSession
from app.services.persistence import commit, fetch
from app.services.question_parser import normalize_questions
from app.utils.enums import SessionStatus

logger = logging.getLogger(__name__)


def start_session(db: Session, role: str, user_id: Optional[str] = None) -> InterviewSession:
    if not role or not role.strip():
        raise ValidationError("Role is required")

    raw = llm_client.generate_questions(role)
    questions = normalize_questions(raw)

    session = InterviewSession(
        id=str(uuid4()),
        user_id=user_id,
        role=role,
        questions=questions,
    )
    commit(db, session)

    logger.info(
        f"Created session {session.id} for role {role!r} "
        f"with {len(questions)} questions"
    )
    return session


def get_session(db: Session, session_id: str) -> InterviewSession:
    session = fetch(
        lambda: db.query(InterviewSession).filter_by(id=session_id).first()
    )
    if not session:
        raise NotFoundError("Session not found")
    return session


def session_status(session: InterviewSession) -> SessionStatus:
    if session.completed_at is not None:
        return SessionStatus.COMPLETED
    return SessionStatus.ACTIVE


def complete_session(db: Session, session_id: str) -> InterviewSession:
    session = get_session(db, session_id)

    if session_status(session) != SessionStatus.ACTIVE:
        raise ValidationError("Session is already completed")

    scores = fetch(
        lambda: [
            score or 0
            for (score,) in db.query(QuestionResult.answer_score)
            .filter(QuestionResult.session_id == session_id)
            .all()
        ]
    )

    session.completed_at = datetime.utcnow()
    session.overall_score = sum(scores) / len(scores) if scores else None
    commit(db, session)
    return session
