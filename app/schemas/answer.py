from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class AnswerCreate(BaseModel):
    session_id: str
    question: str
    answer_text: str = ""
    eye_contact_score: Optional[int] = None


class AnswerEvaluated(BaseModel):
    result_id: str
    score: int
    feedback: str


class QuestionResultResponse(BaseModel):
    id: str
    session_id: str
    question: str
    answer_text: str
    answer_score: int
    eye_contact_score: Optional[int]
    feedback: str
    created_at: datetime

    class Config:
        from_attributes = True
