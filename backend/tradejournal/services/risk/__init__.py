"""
Trade Risk Engine

CONTRACT:
    Input:  entry price, stop loss, position size, account size
    Output: RiskMetrics (risk_amount, risk_percent) or None

PURE PYTHON - deterministic, no hidden state, never raises.
Insufficient input yields None ("no risk to display"), not an error.
High risk (> 2%) is a display flag only.
"""

from tradejournal.services.risk.calculator import compute_risk

__all__ = ["compute_risk"]
