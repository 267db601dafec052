"""
Trade Risk Calculator

Turns entry price, stop loss, position size and account size into the
dollar risk and account risk percent of one trade.

PURE PYTHON - no I/O, no hidden state. Safe to call on every keystroke.
Missing or unusable input is not an error: the result is simply None.
"""

import math
from typing import Optional, Union

from tradejournal.schemas.risk import RiskMetrics

Number = Union[int, float, str, None]


def _to_number(value: Number) -> Optional[float]:
    """Parse a form value into a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def compute_risk(
    entry_price: Number,
    stop_loss: Number,
    position_size: Number,
    account_size: Number,
) -> Optional[RiskMetrics]:
    """
    Compute risk metrics for a single trade.

    risk_amount  = |entry - stop| / entry * position_size
    risk_percent = risk_amount / account_size * 100

    Returns None unless all four inputs are finite numbers, stop loss is
    non-zero and entry, position and account sizes are positive.
    The percent is not clamped and may exceed 100.
    """
    entry = _to_number(entry_price)
    stop = _to_number(stop_loss)
    position = _to_number(position_size)
    account = _to_number(account_size)

    if entry is None or stop is None or position is None or account is None:
        return None
    if stop == 0 or entry <= 0 or position <= 0 or account <= 0:
        return None

    price_diff = abs(entry - stop)
    risk_amount = (price_diff / entry) * position
    risk_percent = (risk_amount / account) * 100

    return RiskMetrics(risk_amount=risk_amount, risk_percent=risk_percent)
