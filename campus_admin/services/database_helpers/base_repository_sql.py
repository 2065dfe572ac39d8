# /campus_admin/services/database_helpers/base_repository_sql.py

"""
Shared persistence mechanics for the SQL repositories.

Each concrete repository only adds its finder queries; writing and
deleting rows works the same way for every table and lives here.
"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...core.exceptions import ConstraintViolationError, DuplicateRecordError

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation, reported by PostgreSQL drivers as `pgcode` / `sqlstate`.
UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Tells a duplicate-key failure apart from foreign-key, NOT NULL and check failures."""
    driver_error = error.orig
    sqlstate = getattr(driver_error, "pgcode", None) or getattr(driver_error, "sqlstate", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    message = str(driver_error).lower()
    return "unique constraint failed" in message or "duplicate key" in message


class BaseRepositorySQL:
    # Human-readable entity name used in error messages.
    entity_name = "Record"

    def __init__(self, db_session: Session):
        self.db = db_session

    def save(self, entity):
        """
        Inserts or updates `entity`, commits, and returns the refreshed row
        (so store-assigned defaults such as autoincrement IDs are populated).

        Raises:
            DuplicateRecordError: the row would duplicate a unique key.
            ConstraintViolationError: any other integrity constraint failed.
        """
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Rejected write for %s: %s", self.entity_name, e.orig)
            if is_unique_violation(e):
                raise DuplicateRecordError(
                    f"{self.entity_name} conflicts with an existing record.", entity=self.entity_name
                ) from e
            raise ConstraintViolationError(
                f"{self.entity_name} violates a store constraint.", entity=self.entity_name
            ) from e
        self.db.refresh(entity)
        return entity

    def delete(self, entity) -> None:
        """Deletes a row that was previously loaded through this repository."""
        self.db.delete(entity)
        self.db.commit()
