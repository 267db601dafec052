"""
Risk API Endpoints

Live risk preview for the trade form.
"""

from fastapi import APIRouter

from tradejournal.schemas.risk import RiskCalculationRequest, RiskCalculationResponse
from tradejournal.services.risk import compute_risk

router = APIRouter()


@router.post("/calculate", response_model=RiskCalculationResponse)
async def calculate_risk(request: RiskCalculationRequest):
    """
    Compute dollar and percent risk for the current form values.

    Incomplete or invalid input returns an empty preview, not an error.
    """
    metrics = compute_risk(
        request.entry_price,
        request.stop_loss,
        request.position_size,
        request.account_size,
    )
    if metrics is None:
        return RiskCalculationResponse()

    return RiskCalculationResponse(
        risk_amount=metrics.risk_amount,
        risk_percent=metrics.risk_percent,
        is_high_risk=metrics.is_high_risk,
    )
