"""
SQLAlchemy models for the trade journal database.

Uses SQLite for local persistence of logged trades.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Index, String
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Trade(Base):
    """
    Trade journal entry.
    risk_percent is computed once at creation; position size is not stored.
    Rows are never updated in place.
    """
    __tablename__ = "trades"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(50), nullable=False, default="default", index=True)
    crypto_pair = Column(String(20), nullable=False)

    entry_price = Column(Float, nullable=False)
    stop_loss = Column(Float, nullable=False)
    account_size = Column(Float, nullable=False)
    risk_percent = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index("ix_trades_user_created", "user_id", "created_at"),
    )
