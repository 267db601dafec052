"""
CONTRACT 2: Trade Journal

Input: TradeCreate (form submission)
Output: TradeRecord (stored trade)

risk_percent is derived once, at creation, from the four risk inputs.
position_size is NOT stored, so risk is never recomputed afterwards.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TradeCreate(BaseModel):
    """New trade as submitted from the trade form."""

    crypto_pair: str = Field(..., min_length=1, max_length=20, examples=["BTC/USDT"])
    entry_price: float = Field(..., gt=0)
    stop_loss: float = Field(..., gt=0)
    position_size: float = Field(..., gt=0, description="Dollar notional; used for risk only")
    account_size: float = Field(..., gt=0)


class TradeRecord(BaseModel):
    """
    Stored trade.
    Created on submit, read on list, destroyed on delete. Never updated.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    crypto_pair: str
    entry_price: float
    stop_loss: float
    account_size: float
    risk_percent: float
    created_at: datetime
