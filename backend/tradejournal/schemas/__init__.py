"""
Trade Journal Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from tradejournal.schemas.risk import (
    HIGH_RISK_THRESHOLD_PERCENT,
    RiskMetrics,
    RiskCalculationRequest,
    RiskCalculationResponse,
)
from tradejournal.schemas.trade import TradeCreate, TradeRecord
from tradejournal.schemas.analysis import (
    MAX_BATCH_SIZE,
    AnalysisTrade,
    AnalysisResponse,
    AnalysisErrorResponse,
)

__all__ = [
    # Risk
    "HIGH_RISK_THRESHOLD_PERCENT",
    "RiskMetrics",
    "RiskCalculationRequest",
    "RiskCalculationResponse",
    # Trades
    "TradeCreate",
    "TradeRecord",
    # Analysis
    "MAX_BATCH_SIZE",
    "AnalysisTrade",
    "AnalysisResponse",
    "AnalysisErrorResponse",
]
