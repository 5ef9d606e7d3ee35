import logging

import requests

from app.core.config import settings
from app.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

QUESTION_SYSTEM_PROMPT = (
    "You are an expert technical interviewer. Generate exactly 10 concise, "
    "role-specific technical interview questions. Return ONLY a valid JSON "
    "array of strings, no extra text."
)

EVALUATION_SYSTEM_PROMPT = """You are a strict but fair technical interviewer. Evaluate the candidate's answer concisely.

Format your response exactly as:
Score: X/10
Feedback: [2-3 sentences of constructive feedback on technical accuracy, clarity, and completeness]"""


def _chat_completion(messages: list, **extra) -> str:
    """
    Send one chat completion request and return the message content.

    Any transport failure, non-2xx status or unexpected payload shape is
    raised as UpstreamError. There is no retry.
    """
    if not settings.GROQ_API_KEY:
        raise UpstreamError("AI service is not configured")

    payload = {
        "model": settings.LLM_MODEL,
        "messages": messages,
        **extra,
    }
    headers = {
        "Authorization": f"Bearer {settings.GROQ_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            settings.GROQ_API_URL,
            json=payload,
            headers=headers,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logger.error(f"AI service unreachable: {e}")
        raise UpstreamError("AI service unreachable") from e

    if not response.ok:
        logger.error(f"AI service response: {response.status_code} - {response.text[:500]}")
        raise UpstreamError(f"AI service returned status {response.status_code}")

    try:
        content = response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"Malformed AI service payload: {response.text[:500]}")
        raise UpstreamError("Malformed response from AI service") from e

    if not isinstance(content, str):
        raise UpstreamError("Malformed response from AI service")

    return content


def generate_questions(role: str) -> str:
    return _chat_completion(
        [
            {"role": "system", "content": QUESTION_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": f"Generate 10 technical interview questions for the role: {role}",
            },
        ],
        response_format={"type": "json_object"},
    )


def evaluate_answer(question: str, answer: str) -> str:
    return _chat_completion(
        [
            {"role": "system", "content": EVALUATION_SYSTEM_PROMPT},
            {"role": "user", "content": f"Question: {question}\nAnswer: {answer}"},
        ]
    )
