"""Commit/rollback boundary shared by the services"""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agroflow.core.exceptions import UnhandledError

logger = logging.getLogger(__name__)


@contextmanager
def atomic(db: Session, action: str):
    """Run the block as one transaction.

    Commits on success. Any failure rolls back; database errors are re-raised
    as ``UnhandledError("Error <action>: <cause>")``, domain errors unchanged.
    """
    try:
        yield
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Error {action}: {exc}")
        raise UnhandledError(f"Error {action}: {exc}") from exc
    except Exception:
        db.rollback()
        raise
