"""BaseService — abstract foundation for all skillroster services.

Every service receives a :class:`Roster` at construction time. The Roster
provides pooled, transactional access to the database. Services own their
transaction boundaries via ``self._roster.transaction()``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import SQLAlchemyError

from skillroster.services.errors import ServiceFailure, classify_storage_error
from skillroster.services.result import ServiceResult

if TYPE_CHECKING:
    from skillroster.infrastructure.store import Roster

logger = structlog.get_logger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Subclasses implement profile and skill operations using the roster
    for all data access.

    Usage::

        class SkillService(BaseService):
            def create_skill(self, name: str) -> ServiceResult:
                return self._run("create_skill", lambda: ...)
    """

    def __init__(self, roster: Roster) -> None:
        self._roster = roster

    def _run(self, op: str, work: Callable[[], ServiceResult]) -> ServiceResult:
        """Run *work* and turn classified failures into a failed result.

        By the time a failure reaches this point, the transaction that
        raised it has already rolled back.
        """
        try:
            return work()
        except ServiceFailure as exc:
            logger.info("service.failed", op=op, code=exc.code, message=exc.message)
            return ServiceResult(ok=False, op=op, error=exc.to_error())
        except SQLAlchemyError as exc:
            error = classify_storage_error(exc)
            logger.warning("transaction.rolled_back", op=op, code=error.code, error=str(exc))
            return ServiceResult(ok=False, op=op, error=error)
