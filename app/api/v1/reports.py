from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.error import ErrorResponse
from app.schemas.report import InterviewReport
from app.services.report_service import generate_report

router = APIRouter()


@router.get(
    "/reports/{session_id}",
    response_model=InterviewReport,
    responses={404: {"model": ErrorResponse}},
)
async def get_interview_report(
    session_id: str,
    db: Session = Depends(get_db)
):
    return generate_report(db, session_id)
