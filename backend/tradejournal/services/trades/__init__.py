"""
Trade Journal Store

CONTRACT:
    create(user_id, TradeCreate) -> TradeRecord
    list(user_id)                -> list[TradeRecord] (newest first)
    delete(user_id, trade_id)    -> None | TradeNotFoundError

risk_percent is derived by the risk engine at creation and never recomputed.
"""

from tradejournal.services.trades.interface import (
    InvalidTradeError,
    TradeNotFoundError,
    TradeStore,
)
from tradejournal.services.trades.store import SqlTradeStore

__all__ = [
    "InvalidTradeError",
    "TradeNotFoundError",
    "TradeStore",
    "SqlTradeStore",
]
