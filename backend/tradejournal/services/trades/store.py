"""
SQLite Trade Store

TradeStore backed by an async SQLAlchemy session.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tradejournal.db.database import add_trade, get_trades, remove_trade
from tradejournal.schemas.trade import TradeCreate, TradeRecord
from tradejournal.services.risk import compute_risk
from tradejournal.services.trades.interface import (
    InvalidTradeError,
    TradeNotFoundError,
    TradeStore,
)

logger = logging.getLogger(__name__)


class SqlTradeStore(TradeStore):
    """Trade store using the request-scoped database session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user_id: str, trade: TradeCreate) -> TradeRecord:
        """Persist a trade with its risk percent fixed at creation."""
        metrics = compute_risk(
            trade.entry_price,
            trade.stop_loss,
            trade.position_size,
            trade.account_size,
        )
        if metrics is None:
            raise InvalidTradeError()

        row = await add_trade(
            self.session,
            {
                "user_id": user_id,
                "crypto_pair": trade.crypto_pair,
                "entry_price": trade.entry_price,
                "stop_loss": trade.stop_loss,
                "account_size": trade.account_size,
                "risk_percent": metrics.risk_percent,
            },
        )
        logger.info(
            f"Logged trade {row.id} {row.crypto_pair} risk={metrics.risk_percent:.2f}%"
        )
        return TradeRecord.model_validate(row)

    async def list(self, user_id: str) -> list[TradeRecord]:
        rows = await get_trades(self.session, user_id)
        return [TradeRecord.model_validate(row) for row in rows]

    async def delete(self, user_id: str, trade_id: str) -> None:
        removed = await remove_trade(self.session, trade_id, user_id)
        if removed != 1:
            raise TradeNotFoundError(trade_id)
        logger.info(f"Deleted trade {trade_id}")
