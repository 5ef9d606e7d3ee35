import os

# Must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GROQ_API_KEY"] = "test-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace the AI service with canned responses and record the calls."""
    from app.ai import llm_client

    calls = {"generate": [], "evaluate": []}
    responses = {
        "questions": '["What is a closure?", "Explain the GIL."]',
        "evaluation": "Score: 7/10\nFeedback: Clear and mostly correct.",
    }

    def generate_questions(role):
        calls["generate"].append(role)
        return responses["questions"]

    def evaluate_answer(question, answer):
        calls["evaluate"].append((question, answer))
        return responses["evaluation"]

    monkeypatch.setattr(llm_client, "generate_questions", generate_questions)
    monkeypatch.setattr(llm_client, "evaluate_answer", evaluate_answer)
    return {"calls": calls, "responses": responses}
