"""
Error taxonomy for the interview engine.

Every error carries a short machine-readable ``reason`` and the HTTP status
the API layer answers with. Messages are meant for the caller; internal
details go to the log only.
"""


class InterviewError(Exception):
    reason = "InterviewError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InterviewError):
    """Caller input fails a precondition (missing role, empty answer)."""
    reason = "ValidationError"
    status_code = 400


class NotFoundError(InterviewError):
    reason = "NotFound"
    status_code = 404


class UpstreamError(InterviewError):
    """The generation/evaluation API failed or returned unusable content."""
    reason = "UpstreamError"
    status_code = 502


class QuestionParseError(UpstreamError):
    reason = "QuestionParseError"


class PersistenceError(InterviewError):
    reason = "PersistenceError"
    status_code = 500
