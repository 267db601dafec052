"""
AI Gateway Client

Sends a batch of trades to an OpenAI-compatible chat completions endpoint
and returns the feedback text.

Status mapping:
    429            -> UpstreamRateLimitedError (no retry here)
    402            -> UpstreamQuotaExhaustedError
    other non-2xx  -> UpstreamFailureError (raw body logged, never returned)
    bad 2xx shape  -> UpstreamFailureError
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

import httpx
import openai

from tradejournal.core.config import Settings
from tradejournal.schemas.analysis import AnalysisTrade
from tradejournal.services.analysis.errors import (
    GatewayNotConfiguredError,
    UpstreamFailureError,
    UpstreamQuotaExhaustedError,
    UpstreamRateLimitedError,
)
from tradejournal.services.analysis.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    format_analysis_prompt,
)

logger = logging.getLogger(__name__)


@dataclass
class GatewayConfig:
    """Configuration for the AI gateway client."""

    api_key: str
    base_url: str = "https://ai.gateway.lovable.dev/v1"
    model: str = "google/gemini-2.5-flash"
    timeout_seconds: float = 60.0


class AnalysisGateway(ABC):
    """Upstream that turns a trade batch into feedback text."""

    @abstractmethod
    async def request_feedback(self, trades: list[AnalysisTrade]) -> str:
        """Return feedback text or raise an ExternalAPIError subclass."""
        pass

    async def close(self) -> None:
        pass


class OpenAICompatibleGateway(AnalysisGateway):
    """Gateway implementation using the OpenAI SDK against a custom base URL."""

    def __init__(
        self,
        config: GatewayConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._client = openai.AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )

    async def request_feedback(self, trades: list[AnalysisTrade]) -> str:
        messages = [
            {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
            {"role": "user", "content": format_analysis_prompt(trades)},
        ]

        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                messages=messages,
            )
        except openai.APIStatusError as e:
            if e.status_code == 429:
                logger.warning("AI gateway rate limited the request")
                raise UpstreamRateLimitedError() from e
            if e.status_code == 402:
                logger.warning("AI gateway credits depleted")
                raise UpstreamQuotaExhaustedError() from e
            logger.error(f"AI gateway error: {e.status_code} {e.response.text}")
            raise UpstreamFailureError({"status": e.status_code}) from e
        except openai.APIError as e:
            logger.error(f"AI gateway request failed: {e}")
            raise UpstreamFailureError() from e

        return self._extract_feedback(response)

    def _extract_feedback(self, response) -> str:
        """First completion's message text. Anything else is a failure."""
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Unexpected AI gateway response shape: {response!r}")
            raise UpstreamFailureError() from e

        if not isinstance(content, str) or not content:
            logger.error(f"AI gateway returned no feedback text: {response!r}")
            raise UpstreamFailureError()

        return content

    async def close(self) -> None:
        await self._client.close()


def build_analysis_gateway(
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
) -> OpenAICompatibleGateway:
    """
    Build the gateway from settings.

    Raises:
        GatewayNotConfiguredError: if no API key is configured
    """
    if not settings.ai_gateway_api_key:
        raise GatewayNotConfiguredError()

    config = GatewayConfig(
        api_key=settings.ai_gateway_api_key,
        base_url=settings.ai_gateway_base_url,
        model=settings.ai_gateway_model,
        timeout_seconds=settings.ai_gateway_timeout_seconds,
    )
    return OpenAICompatibleGateway(config, http_client=http_client)
