from pydantic import BaseModel
from typing import List


class InterviewReport(BaseModel):
    session_id: str
    total_questions: int
    avg_answer_score: float
    avg_eye_score: float
    strengths: List[str]
    improvements: List[str]
