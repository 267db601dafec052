"""
Trade Analysis Errors

InputError family (AnalysisValidationError) - caller can fix the request.
Upstream family (ExternalAPIError) - imposed by the AI gateway.
ConfigurationError - missing gateway key; analysis path is unavailable.
"""

from typing import Optional

from tradejournal.services.base import (
    ConfigurationError,
    ExternalAPIError,
    RateLimitError,
    ValidationError,
)

SERVICE_NAME = "AnalysisService"


# =============================================================================
# VALIDATION
# =============================================================================


class AnalysisValidationError(ValidationError):
    """Inbound analysis request failed validation."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        details = {"index": index} if index is not None else None
        super().__init__(SERVICE_NAME, message, details)


class MalformedRequestError(AnalysisValidationError):
    def __init__(self):
        super().__init__("Invalid request: trades array is required")


class EmptyBatchError(AnalysisValidationError):
    def __init__(self):
        super().__init__("At least one trade is required")


class BatchTooLargeError(AnalysisValidationError):
    def __init__(self, max_size: int):
        super().__init__(f"Maximum {max_size} trades allowed per analysis")


class InvalidElementError(AnalysisValidationError):
    def __init__(self, index: int):
        super().__init__(f"Invalid trade at position {index}", index)


class InvalidFieldError(AnalysisValidationError):
    """A single trade field is missing or out of range."""

    field: str = ""

    def __init__(self, index: int):
        super().__init__(f"Invalid {self.field} at trade {index}", index)


class InvalidPairError(InvalidFieldError):
    field = "crypto_pair"


class InvalidEntryPriceError(InvalidFieldError):
    field = "entry_price"


class InvalidStopLossError(InvalidFieldError):
    field = "stop_loss"


class InvalidRiskPercentError(InvalidFieldError):
    field = "risk_percent"


# =============================================================================
# UPSTREAM
# =============================================================================


class UpstreamRateLimitedError(RateLimitError):
    """Gateway returned 429. Caller may retry after backoff."""

    def __init__(self):
        super().__init__(SERVICE_NAME, "Rate limit exceeded. Please try again later.")


class UpstreamQuotaExhaustedError(ExternalAPIError):
    """Gateway returned 402. Needs credits added; do not retry."""

    def __init__(self):
        super().__init__(SERVICE_NAME, "AI credits depleted. Please add credits to continue.")


class UpstreamFailureError(ExternalAPIError):
    """Unexpected gateway status or response shape. Message is generic."""

    def __init__(self, details: dict = None):
        super().__init__(SERVICE_NAME, "AI gateway error", details)


class GatewayNotConfiguredError(ConfigurationError):
    def __init__(self):
        super().__init__(SERVICE_NAME, "AI gateway is not configured")
