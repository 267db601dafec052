"""
Base Service Interface

Shared service contract and the error hierarchy used by the trade
journal services. Errors carry the service name so log lines and API
error mapping can tell the risk, trade store and analysis layers apart.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for the journal services.

    InputT is what the service consumes (a raw analysis body, a trade form),
    OutputT what it produces. health_check() reports whether the service can
    take requests right now, e.g. False when the AI gateway key is missing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service once.

        Raises:
            ServiceError: subclass describing what went wrong
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if service is healthy and can process requests."""
        pass


class ServiceError(Exception):
    """Base exception for journal service errors. message is safe to show callers."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Caller sent bad input; fixing the request fixes the error."""
    pass


class ExternalAPIError(ServiceError):
    """The AI gateway (or another upstream) failed."""
    pass


class RateLimitError(ExternalAPIError):
    """Upstream rate limit hit. Retry after backoff."""
    pass


class ConfigurationError(ServiceError):
    """Required configuration is missing. Not recoverable per request."""
    pass
