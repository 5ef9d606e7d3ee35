from sqlalchemy import Column, String, Integer, DateTime, Text
from datetime import datetime
from app.core.database import Base


class QuestionResult(Base):
    __tablename__ = "question_results"

    id = Column(String, primary_key=True, index=True)
    # Plain column: results may reference a session that does not exist
    session_id = Column(String, index=True, nullable=False)

    question = Column(Text)
    answer_text = Column(Text, nullable=False)

    answer_score = Column(Integer)
    eye_contact_score = Column(Integer, nullable=True)
    feedback = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
