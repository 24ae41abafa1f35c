from __future__ import annotations

import asyncio
import functools
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

R = TypeVar("R")

# Failures raised by the storage engine or the driver underneath it.
STORAGE_ERRORS: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def _describe(operation: str, entity: str | None) -> str:
    return f"{operation} the {entity} entity" if entity else operation


class HospitalDataError(Exception):
    detail: str = "An unexpected data-access error occurred"

    def __init__(self, detail: str | None = None, **kwargs: Any) -> None:
        self.detail = detail or self.__class__.detail
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


class PersistenceError(HospitalDataError):
    """Raised at the repository boundary when the storage engine fails.

    The engine exception is kept as ``cause`` and as ``__cause__``.
    """

    detail = "Persistence operation failed"

    def __init__(
        self,
        operation: str | None = None,
        *,
        entity: str | None = None,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        self.operation = operation
        self.entity = entity
        self.cause = cause
        detail = self.detail
        if operation:
            detail = f"An error occurred while {_describe(operation, entity)}"
            if cause is not None:
                detail = f"{detail}: {cause}"
        super().__init__(detail=detail, operation=operation, entity=entity, **kwargs)


def persistence_guard(operation: str) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Log storage failures of a repository coroutine once, then raise them as PersistenceError.

    ``operation`` reads as a gerund ("adding", "saving changes to") and the
    wrapped method's ``self.entity_name``, when it has one, names the entity type.
    """

    def decorator(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> R:
            entity = getattr(self, "entity_name", None)
            target = _describe(operation, entity)
            try:
                return await func(self, *args, **kwargs)
            except asyncio.CancelledError:
                logger.error("Cancelled while {target}", target=target)
                raise
            except STORAGE_ERRORS as exc:
                logger.error(
                    "An error occurred while {target}: {error}",
                    target=target,
                    error=exc,
                )
                raise PersistenceError(operation, entity=entity, cause=exc) from exc

        return wrapper

    return decorator
