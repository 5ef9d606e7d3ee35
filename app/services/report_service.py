import logging
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.services.answer_service import list_results
from app.services.report_builder import build_report

logger = logging.getLogger(__name__)


def generate_report(db: Session, session_id: str) -> dict:
    results = list_results(db, session_id)

    if not results:
        raise NotFoundError("No results found for this session")

    report = build_report(session_id, results)
    logger.info(f"Generated report for session {session_id} from {len(results)} results")
    return report
