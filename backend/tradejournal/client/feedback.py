"""
Trade Feedback Client

Caller-side entry point for AI trade feedback:
throttle -> POST /api/v1/analyze-trades -> feedback text.

Only the last five trades are sent.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

import aiohttp

from tradejournal.client.throttle import AnalysisRequestThrottle

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/v1/analyze-trades"
TRADES_PER_ANALYSIS = 5
UNKNOWN_ERROR = "Unknown error"

ANALYSIS_FIELDS = ("crypto_pair", "entry_price", "stop_loss", "risk_percent")


class FeedbackClientError(Exception):
    """Base exception for feedback client errors."""
    pass


class NoTradesError(FeedbackClientError):
    def __init__(self):
        super().__init__("Add some trades first to get AI feedback")


class ThrottleDeniedError(FeedbackClientError):
    """Not a failure: analysis is allowed again after retry_after_seconds."""

    def __init__(self, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        super().__init__(f"You can analyze again in {retry_after_seconds} seconds")


class FeedbackRequestError(FeedbackClientError):
    """Server answered with an error body."""

    def __init__(self, status: int, error: str):
        self.status = status
        self.error = error
        super().__init__(error)


def _to_payload(trade: Any) -> dict:
    """Accept TradeRecord-like models or plain mappings."""
    if hasattr(trade, "model_dump"):
        trade = trade.model_dump()
    if not isinstance(trade, Mapping):
        raise TypeError(f"Unsupported trade type: {type(trade).__name__}")
    return {field: trade.get(field) for field in ANALYSIS_FIELDS}


class TradeFeedbackClient:
    """
    Async client for the analysis endpoint.

    One instance per user session; its throttle state is not shared.
    """

    def __init__(
        self,
        base_url: str,
        throttle: Optional[AnalysisRequestThrottle] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: float = 90.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.throttle = throttle or AnalysisRequestThrottle()
        self._session = session
        self._timeout_seconds = timeout_seconds

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def analyze(self, trades: Sequence[Any], now_ms: Optional[int] = None) -> str:
        """
        Request feedback on the most recent trades.

        Raises:
            NoTradesError: nothing to analyze (throttle untouched)
            ThrottleDeniedError: still cooling down
            FeedbackRequestError: server returned an error, an unreadable
                body, or could not be reached (status 0)
        """
        if not trades:
            raise NoTradesError()

        decision = self.throttle.try_acquire(now_ms)
        if not decision.allowed:
            raise ThrottleDeniedError(decision.retry_after_seconds)

        payload = {"trades": [_to_payload(t) for t in trades[-TRADES_PER_ANALYSIS:]]}

        session = await self._ensure_session()
        try:
            async with session.post(f"{self.base_url}{ANALYZE_PATH}", json=payload) as response:
                status = response.status
                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    # Non-JSON body, e.g. a proxy error page
                    data = None
        except aiohttp.ClientError as e:
            logger.warning(f"Analysis request could not be sent: {e}")
            raise FeedbackRequestError(0, UNKNOWN_ERROR) from e

        if status != 200:
            error = data.get("error") if isinstance(data, dict) else None
            error = error or UNKNOWN_ERROR
            logger.warning(f"Analysis request failed: {status} {error}")
            raise FeedbackRequestError(status, error)

        feedback = data.get("feedback") if isinstance(data, dict) else None
        if not isinstance(feedback, str):
            logger.warning(f"Analysis response has no feedback: {data!r}")
            raise FeedbackRequestError(status, UNKNOWN_ERROR)
        return feedback
