"""
Trade Store Interface

Defines the contract for the trade journal data store.
"""

from abc import ABC, abstractmethod

from tradejournal.schemas.trade import TradeCreate, TradeRecord
from tradejournal.services.base import ServiceError, ValidationError


class InvalidTradeError(ValidationError):
    """Risk could not be derived from the submitted fields."""

    def __init__(self):
        super().__init__("TradeStore", "Please fill in all fields with valid numbers")


class TradeNotFoundError(ServiceError):
    def __init__(self, trade_id: str):
        super().__init__("TradeStore", f"Trade {trade_id} not found", {"trade_id": trade_id})


class TradeStore(ABC):
    """
    Trade Store Contract.

    create: derive risk_percent, persist, return record with id + created_at
    list:   all records of one user, newest first
    delete: remove exactly one record, or raise TradeNotFoundError

    Records are never updated in place.
    """

    @abstractmethod
    async def create(self, user_id: str, trade: TradeCreate) -> TradeRecord:
        pass

    @abstractmethod
    async def list(self, user_id: str) -> list[TradeRecord]:
        pass

    @abstractmethod
    async def delete(self, user_id: str, trade_id: str) -> None:
        pass
