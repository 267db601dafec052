"""
Trade Analysis Service

Validator -> Gateway orchestration. The only entry point of the analysis
subsystem reachable from outside.

handle() never raises: every failure becomes an {error} body plus a status
code.
"""

from dataclasses import dataclass
from typing import Any, Optional
import logging

from tradejournal.core.config import Settings
from tradejournal.schemas.analysis import AnalysisResponse
from tradejournal.services.analysis.errors import (
    AnalysisValidationError,
    GatewayNotConfiguredError,
    UpstreamFailureError,
    UpstreamQuotaExhaustedError,
    UpstreamRateLimitedError,
)
from tradejournal.services.analysis.gateway import AnalysisGateway, build_analysis_gateway
from tradejournal.services.analysis.validator import validate_analysis_request
from tradejournal.services.base import BaseService

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass
class AnalysisOutcome:
    """Transport-ready result of one analysis request."""

    status_code: int
    body: dict


class AnalysisService(BaseService[Any, AnalysisResponse]):
    """Validates a trade batch and asks the AI gateway for feedback."""

    def __init__(self, gateway: AnalysisGateway):
        self.gateway = gateway

    @property
    def name(self) -> str:
        return "AnalysisService"

    async def execute(self, input_data: Any) -> AnalysisResponse:
        """
        Validate then request feedback.

        Raises:
            AnalysisValidationError: request is malformed
            ExternalAPIError: gateway failed
        """
        trades = validate_analysis_request(input_data)
        logger.info(f"Requesting feedback for {len(trades)} trades")
        feedback = await self.gateway.request_feedback(trades)
        return AnalysisResponse(feedback=feedback)

    async def handle(self, raw_body: Any) -> AnalysisOutcome:
        """Run execute() and shape every outcome for transport."""
        try:
            response = await self.execute(raw_body)
        except AnalysisValidationError as e:
            logger.info(f"Rejected analysis request: {e.message}")
            return AnalysisOutcome(400, {"error": e.message})
        except UpstreamRateLimitedError as e:
            return AnalysisOutcome(429, {"error": e.message})
        except UpstreamQuotaExhaustedError as e:
            return AnalysisOutcome(402, {"error": e.message})
        except UpstreamFailureError as e:
            return AnalysisOutcome(500, {"error": e.message})
        except Exception:
            logger.exception("Unexpected error in analysis request")
            return AnalysisOutcome(500, {"error": INTERNAL_ERROR_MESSAGE})

        return AnalysisOutcome(200, response.model_dump())

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        await self.gateway.close()


class UnavailableAnalysisService(AnalysisService):
    """
    Stand-in when the gateway cannot be built (missing API key).
    Every request fails the same way.
    """

    def __init__(self, error: GatewayNotConfiguredError):
        self.error = error

    async def execute(self, input_data: Any) -> AnalysisResponse:
        raise self.error

    async def handle(self, raw_body: Any) -> AnalysisOutcome:
        return AnalysisOutcome(500, {"error": self.error.message})

    async def health_check(self) -> bool:
        return False

    async def close(self) -> None:
        pass


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def init_analysis_service(settings: Settings) -> AnalysisService:
    """
    Build the analysis service once at startup.
    A missing gateway key disables the analysis path, not the whole app.
    """
    global _service_instance
    try:
        _service_instance = AnalysisService(build_analysis_gateway(settings))
    except GatewayNotConfiguredError as e:
        logger.error(f"Analysis disabled: {e.message}")
        _service_instance = UnavailableAnalysisService(e)
    return _service_instance


def get_analysis_service() -> AnalysisService:
    """Get the analysis service, building it from settings on first use."""
    if _service_instance is None:
        from tradejournal.core.config import settings

        return init_analysis_service(settings)
    return _service_instance


async def close_analysis_service() -> None:
    global _service_instance
    if _service_instance is not None:
        await _service_instance.close()
        _service_instance = None
