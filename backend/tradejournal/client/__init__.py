"""
Trade Journal Client

Caller-side pieces of the analysis pipeline: the per-session cooldown
throttle and the async HTTP client for the analysis endpoint.
"""

from tradejournal.client.throttle import (
    COOLDOWN_MS,
    AnalysisRequestThrottle,
    ThrottleDecision,
    ThrottleState,
)
from tradejournal.client.feedback import (
    FeedbackClientError,
    FeedbackRequestError,
    NoTradesError,
    ThrottleDeniedError,
    TradeFeedbackClient,
)

__all__ = [
    "COOLDOWN_MS",
    "AnalysisRequestThrottle",
    "ThrottleDecision",
    "ThrottleState",
    "FeedbackClientError",
    "FeedbackRequestError",
    "NoTradesError",
    "ThrottleDeniedError",
    "TradeFeedbackClient",
]
