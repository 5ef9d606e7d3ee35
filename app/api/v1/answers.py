from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.answer import AnswerCreate, AnswerEvaluated
from app.schemas.error import ErrorResponse
from app.services.answer_service import submit_answer

router = APIRouter()


@router.post(
    "/answers",
    response_model=AnswerEvaluated,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def evaluate_answer(
    answer: AnswerCreate,
    db: Session = Depends(get_db),
):
    result = submit_answer(
        db,
        session_id=answer.session_id,
        question=answer.question,
        answer_text=answer.answer_text,
        eye_contact_score=answer.eye_contact_score,
    )
    return {
        "result_id": result.id,
        "score": result.answer_score,
        "feedback": result.feedback,
    }
