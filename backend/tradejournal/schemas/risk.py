"""
CONTRACT 1: Trade Risk

Input: entry price + stop loss + position size + account size
Output: RiskMetrics (or nothing, when input is insufficient)

DETERMINISTIC computation - see services/risk/calculator.py.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field, computed_field


# Display threshold only - not a data constraint
HIGH_RISK_THRESHOLD_PERCENT = 2.0


class RiskMetrics(BaseModel):
    """Dollar and account-percent risk of one trade."""

    risk_amount: float = Field(..., ge=0, description="Dollar amount lost if stop is hit")
    risk_percent: float = Field(..., ge=0, description="Risk as % of account size (unclamped)")

    @computed_field
    @property
    def is_high_risk(self) -> bool:
        return self.risk_percent > HIGH_RISK_THRESHOLD_PERCENT


class RiskCalculationRequest(BaseModel):
    """
    Raw risk inputs as typed into the trade form.
    Strings are accepted; anything unparseable yields an empty result.
    """

    entry_price: Optional[Union[float, str]] = None
    stop_loss: Optional[Union[float, str]] = None
    position_size: Optional[Union[float, str]] = None
    account_size: Optional[Union[float, str]] = None


class RiskCalculationResponse(BaseModel):
    """Risk preview. All-null when inputs are insufficient."""

    risk_amount: Optional[float] = None
    risk_percent: Optional[float] = None
    is_high_risk: bool = False
