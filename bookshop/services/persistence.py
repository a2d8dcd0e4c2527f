# bookshop/services/persistence.py
# Generic persistence delegates wrapped by the book write pipeline.
#
#   PersistProcessor.process(entity) -- insert/update, commit, return stored state
#   RemoveProcessor.process(entity)  -- delete, cascades per FK rules
#
# Both are resource-agnostic; nothing book-specific belongs here.

import logging
import uuid
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger("bookshop.persistence")

T = TypeVar("T")

# SQLSTATE unique_violation (PostgreSQL)
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when an IntegrityError comes from a UNIQUE constraint / index."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code:
        return code == UNIQUE_VIOLATION
    # SQLite: "UNIQUE constraint failed: books.book"
    return "unique constraint" in str(orig).lower()


class PersistProcessor:
    """Durably stores an entity and returns its canonical post-write state."""

    def __init__(self, db: Session):
        self.db = db

    def allocate_id(self, entity) -> uuid.UUID:
        """Assign the primary key ahead of insert when the entity has none."""
        if entity.id is None:
            entity.id = uuid.uuid4()
        return entity.id

    def process(self, entity: T) -> T:
        """
        Add, flush and commit. The session is rolled back on any failure and
        the original exception is re-raised for the caller to interpret.
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        logger.debug("Persisted %r", entity)
        return entity


class RemoveProcessor:
    """Deletes an entity; related rows follow the storage cascade rules."""

    def __init__(self, db: Session):
        self.db = db

    def process(self, entity) -> None:
        try:
            self.db.delete(entity)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.debug("Removed %r", entity)
