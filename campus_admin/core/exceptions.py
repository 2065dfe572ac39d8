# /campus_admin/core/exceptions.py

"""
Business-level exceptions raised by the service and repository layers.

They subclass `ValueError`, so any caller that already treats a
`ValueError` as "bad request" keeps working; the routers catch the
specific subclasses to choose the right HTTP status.
"""

from typing import Any


class CampusAdminError(ValueError):
    """Base class for every expected, client-visible failure."""


class NotFoundError(CampusAdminError):
    """
    A lookup that the operation depends on found nothing.

    Carries the kind of entity and the identifier that was missing so the
    HTTP layer (or a log line) can report it without parsing the message.
    """

    def __init__(self, message: str, entity: str, identifier: Any):
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier


class ConstraintViolationError(CampusAdminError):
    """The store rejected a write: a missing reference, a required field left empty, and so on."""

    def __init__(self, message: str, entity: str):
        super().__init__(message)
        self.entity = entity


class DuplicateRecordError(ConstraintViolationError):
    """The store rejected a write because it would duplicate a unique key."""
