"""
Shared persistence helpers for the SQL repositories.
"""
from sqlmodel import Session, SQLModel
from sqlalchemy.exc import IntegrityError
from typing import Optional, TypeVar
import logging

from spaceship.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def save(session: Session, record: ModelT) -> Optional[ModelT]:
    """
    Insert or update a single row and return it refreshed from the store.

    Returns None when the store rejects the row (unknown foreign key, NOT NULL
    violation, ...); the session is rolled back.
    """
    session.add(record)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"Store rejected {type(record).__name__} row: {e.orig}")
        return None
    session.refresh(record)
    return record


def remove(session: Session, model: type[SQLModel], record_id: int) -> bool:
    """
    Delete a row by primary key. Returns True if a row was removed.

    Raises:
        ConflictError: If other rows still reference this one
    """
    record = session.get(model, record_id)
    if record is None:
        return False
    session.delete(record)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"Cannot delete {model.__name__} {record_id}: {e.orig}")
        raise ConflictError(f"{model.__name__} {record_id} is still referenced") from e
    return True
