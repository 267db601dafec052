"""
Trade Analysis Pipeline

CONTRACT:
    Input:  raw request body {"trades": [...]} (1-10 trades)
    Output: feedback text, or {error} + status code

RESPONSIBILITIES:
    - Validate the batch (first failure wins, 1-indexed messages)
    - Render trades into a prompt
    - Call the AI gateway once, no retries
    - Map upstream failures: 429 -> 429, 402 -> 402, anything else -> 500

The raw upstream body is logged server-side only, never returned.
"""

from tradejournal.services.analysis.gateway import (
    AnalysisGateway,
    GatewayConfig,
    OpenAICompatibleGateway,
    build_analysis_gateway,
)
from tradejournal.services.analysis.service import (
    AnalysisOutcome,
    AnalysisService,
    UnavailableAnalysisService,
    close_analysis_service,
    get_analysis_service,
    init_analysis_service,
)
from tradejournal.services.analysis.validator import validate_analysis_request

__all__ = [
    # Gateway
    "AnalysisGateway",
    "GatewayConfig",
    "OpenAICompatibleGateway",
    "build_analysis_gateway",
    # Service
    "AnalysisOutcome",
    "AnalysisService",
    "UnavailableAnalysisService",
    "close_analysis_service",
    "get_analysis_service",
    "init_analysis_service",
    # Validation
    "validate_analysis_request",
]
