"""
Analysis Request Validator

Checks an inbound analysis body before anything is sent upstream.
Checks run in order and stop at the first failure. Trade positions in
messages are 1-indexed.

PURE PYTHON - never mutates its input.
"""

import math
from collections.abc import Mapping
from typing import Any

from tradejournal.schemas.analysis import AnalysisTrade, MAX_BATCH_SIZE, MAX_PAIR_LENGTH
from tradejournal.services.analysis.errors import (
    BatchTooLargeError,
    EmptyBatchError,
    InvalidElementError,
    InvalidEntryPriceError,
    InvalidPairError,
    InvalidRiskPercentError,
    InvalidStopLossError,
    MalformedRequestError,
)


def _is_number(value: Any) -> bool:
    """Finite int/float. bool is excluded even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _utf16_length(text: str) -> int:
    """Length in UTF-16 code units, as browsers count string length."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def _validate_trade(trade: Any, position: int) -> AnalysisTrade:
    if not isinstance(trade, Mapping):
        raise InvalidElementError(position)

    pair = trade.get("crypto_pair")
    if not isinstance(pair, str) or not 1 <= _utf16_length(pair) <= MAX_PAIR_LENGTH:
        raise InvalidPairError(position)

    entry_price = trade.get("entry_price")
    if not _is_number(entry_price) or entry_price <= 0:
        raise InvalidEntryPriceError(position)

    stop_loss = trade.get("stop_loss")
    if not _is_number(stop_loss) or stop_loss <= 0:
        raise InvalidStopLossError(position)

    risk_percent = trade.get("risk_percent")
    if not _is_number(risk_percent) or not 0 <= risk_percent <= 100:
        raise InvalidRiskPercentError(position)

    return AnalysisTrade(
        crypto_pair=pair,
        entry_price=entry_price,
        stop_loss=stop_loss,
        risk_percent=risk_percent,
    )


def validate_analysis_request(raw_body: Any) -> list[AnalysisTrade]:
    """
    Validate a raw analysis request body.

    Returns:
        The validated batch, in request order (1-10 trades)

    Raises:
        AnalysisValidationError: subclass naming the first failed check
    """
    if not isinstance(raw_body, Mapping):
        raise MalformedRequestError()

    trades = raw_body.get("trades")
    if not isinstance(trades, list):
        raise MalformedRequestError()

    if len(trades) == 0:
        raise EmptyBatchError()

    if len(trades) > MAX_BATCH_SIZE:
        raise BatchTooLargeError(MAX_BATCH_SIZE)

    return [_validate_trade(trade, i) for i, trade in enumerate(trades, start=1)]
