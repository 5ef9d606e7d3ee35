from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.schemas.answer import QuestionResultResponse
from app.schemas.error import ErrorResponse
from app.schemas.session import (
    SessionCreate,
    SessionCreated,
    SessionDetail,
    SessionCompleted,
)
from app.services.answer_service import list_results
from app.services.session_service import (
    start_session,
    get_session,
    complete_session,
    session_status,
)

router = APIRouter()


# Question generation blocks on the AI service, so this runs in the threadpool
@router.post(
    "/sessions",
    response_model=SessionCreated,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def create_interview_session(
    payload: SessionCreate,
    db: Session = Depends(get_db),
):
    session = start_session(db, payload.role, payload.user_id)
    return {
        "session_id": session.id,
        "role": session.role,
        "questions": session.questions,
        "created_at": session.created_at,
    }


@router.get(
    "/sessions/{session_id}",
    response_model=SessionDetail,
    responses={404: {"model": ErrorResponse}},
)
async def get_interview_session(
    session_id: str,
    db: Session = Depends(get_db),
):
    session = get_session(db, session_id)
    return {
        "session_id": session.id,
        "user_id": session.user_id,
        "role": session.role,
        "questions": session.questions,
        "status": session_status(session),
        "created_at": session.created_at,
        "completed_at": session.completed_at,
        "overall_score": session.overall_score,
    }


@router.post(
    "/sessions/{session_id}/complete",
    response_model=SessionCompleted,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def complete_interview_session(
    session_id: str,
    db: Session = Depends(get_db),
):
    session = complete_session(db, session_id)
    return {
        "session_id": session.id,
        "status": session_status(session),
        "completed_at": session.completed_at,
        "overall_score": session.overall_score,
    }


@router.get(
    "/sessions/{session_id}/results",
    response_model=List[QuestionResultResponse],
)
async def get_session_results(
    session_id: str,
    db: Session = Depends(get_db),
):
    return list_results(db, session_id)
