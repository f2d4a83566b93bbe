"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from devbase.domain.models.base import DomainException, ErrorKind, UnauthorizedError
from devbase.domain.models.principal import Principal

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass(frozen=True)
class RequestContext(Generic[T]):
    """
    Everything a use case may read from the incoming request.
    Built by the router from validated input; no framework objects inside.
    """

    principal: Optional[Principal] = None
    body: Optional[T] = None
    query: Optional[Any] = None
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_kind: ErrorKind,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_kind=error_kind,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: DomainException) -> "UseCaseResult[T]":
        """Create error result from a domain exception."""
        return cls.error_result(exc.message, exc.kind)


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.

    Domain exceptions become error results; anything else (database
    failures, bugs) propagates to the global error handler.
    """

    async def execute(self, context: RequestContext[T]) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        started = time.perf_counter()

        try:
            await self._validate_request(context)
            result = await self._execute_business_logic(context)
        except DomainException as exc:
            elapsed = time.perf_counter() - started
            logger.info(
                "%s failed with %s: %s",
                type(self).__name__, exc.kind.value, exc.message
            )
            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": elapsed,
                "exception_type": type(exc).__name__
            }
            return error_result

        elapsed = time.perf_counter() - started
        return UseCaseResult.success_result(
            result,
            metadata={"execution_time_seconds": elapsed}
        )

    async def _validate_request(self, context: RequestContext[T]) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, context: RequestContext[T]) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Base class for use cases that act on behalf of an authenticated principal.
    """

    async def _validate_request(self, context: RequestContext[T]) -> None:
        await super()._validate_request(context)

        if context.principal is None:
            raise UnauthorizedError()

    @staticmethod
    def principal_of(context: RequestContext[Any]) -> Principal:
        if context.principal is None:
            raise UnauthorizedError()
        return context.principal
