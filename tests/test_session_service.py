import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import PersistenceError, ValidationError
from app.models.session import InterviewSession
from app.services import session_service
from app.services.answer_service import submit_answer


def test_start_session_stores_normalized_questions(db_session, fake_llm):
    fake_llm["responses"]["questions"] = '{"1": "First?", "2": "", "3": "Third?"}'

    session = session_service.start_session(db_session, "Data Engineer")

    stored = db_session.query(InterviewSession).filter_by(id=session.id).one()
    assert stored.questions == ["First?", "Third?"]
    assert stored.completed_at is None
    assert stored.overall_score is None


def test_start_session_rejects_missing_role(db_session, fake_llm):
    with pytest.raises(ValidationError):
        session_service.start_session(db_session, None)
    assert fake_llm["calls"]["generate"] == []


def test_write_failure_becomes_persistence_error(db_session, fake_llm, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(PersistenceError):
        submit_answer(db_session, "s1", "q", "an answer", 70)
