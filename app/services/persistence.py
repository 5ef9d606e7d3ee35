import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def commit(db: Session, instance=None):
    """Commit pending changes, optionally adding and refreshing ``instance``."""
    try:
        if instance is not None:
            db.add(instance)
        db.commit()
        if instance is not None:
            db.refresh(instance)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Database write failed: {e}")
        raise PersistenceError("Failed to save data") from e
    return instance


def fetch(query):
    try:
        return query()
    except SQLAlchemyError as e:
        logger.exception(f"Database read failed: {e}")
        raise PersistenceError("Failed to load data") from e
