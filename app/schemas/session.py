from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional
from app.utils.enums import SessionStatus


class SessionCreate(BaseModel):
    # Emptiness is checked by the service so it answers with ValidationError
    role: str = ""
    user_id: Optional[str] = None


class SessionCreated(BaseModel):
    session_id: str
    role: str
    questions: List[str]
    created_at: datetime


class SessionDetail(BaseModel):
    session_id: str
    user_id: Optional[str]
    role: str
    questions: List[str]
    status: SessionStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    overall_score: Optional[float] = None


class SessionCompleted(BaseModel):
    session_id: str
    status: SessionStatus
    completed_at: datetime
    overall_score: Optional[float] = Field(
        None, description="Mean answer score, null when nothing was answered"
    )
