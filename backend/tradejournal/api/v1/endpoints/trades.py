"""
Trade Journal API Endpoints

Create, list and delete logged trades.
"""

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from tradejournal.db.database import get_db
from tradejournal.schemas.trade import TradeCreate, TradeRecord
from tradejournal.services.trades import (
    InvalidTradeError,
    SqlTradeStore,
    TradeNotFoundError,
    TradeStore,
)

router = APIRouter()


def get_trade_store(session: AsyncSession = Depends(get_db)) -> TradeStore:
    return SqlTradeStore(session)


def get_user_id(x_user_id: str = Header(default="default", max_length=50)) -> str:
    # Authentication is handled outside this service
    return x_user_id


@router.post("", response_model=TradeRecord, status_code=201)
async def create_trade(
    trade: TradeCreate,
    user_id: str = Depends(get_user_id),
    store: TradeStore = Depends(get_trade_store),
):
    """
    Log a new trade.

    Risk percent is computed from entry, stop, position size and account
    size, then stored. Position size itself is not stored.
    """
    try:
        return await store.create(user_id, trade)
    except InvalidTradeError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("", response_model=list[TradeRecord])
async def list_trades(
    user_id: str = Depends(get_user_id),
    store: TradeStore = Depends(get_trade_store),
):
    """List the user's trades, newest first."""
    return await store.list(user_id)


@router.delete("/{trade_id}", status_code=204)
async def delete_trade(
    trade_id: str,
    user_id: str = Depends(get_user_id),
    store: TradeStore = Depends(get_trade_store),
):
    """Delete one trade."""
    try:
        await store.delete(user_id, trade_id)
    except TradeNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)
