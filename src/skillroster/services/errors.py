"""Failures raised inside a unit of work.

Raising lets :meth:`Roster.transaction` roll the unit back; the public
service method then converts the failure into a :class:`ServiceError`.
Storage errors are classified once, here, so every operation reports a
uniqueness violation the same way.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from skillroster.services.result import (
    CONFLICT,
    INTERNAL,
    NOT_FOUND,
    VALIDATION_FAILED,
    ServiceError,
)


class ServiceFailure(Exception):
    """Base class for classified service failures."""

    code: str = INTERNAL

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}

    def to_error(self) -> ServiceError:
        return ServiceError(code=self.code, message=self.message, detail=self.detail)


class ValidationFailure(ServiceFailure):
    code = VALIDATION_FAILED


class NotFound(ServiceFailure):
    code = NOT_FOUND


class Conflict(ServiceFailure):
    code = CONFLICT


def classify_storage_error(exc: SQLAlchemyError) -> ServiceError:
    """Map a storage exception onto the error taxonomy.

    Constraint violations are conflicts; everything else is internal.
    """
    if isinstance(exc, IntegrityError):
        return ServiceError(
            code=CONFLICT,
            message="Request conflicts with existing data",
            detail={"reason": str(exc.orig)},
        )
    return ServiceError(code=INTERNAL, message=str(exc))
