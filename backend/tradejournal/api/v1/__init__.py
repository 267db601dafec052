"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from tradejournal.api.v1.endpoints import analysis, risk, trades

router = APIRouter()

# Include all endpoint routers
router.include_router(trades.router, prefix="/trades", tags=["Trades"])
router.include_router(risk.router, prefix="/risk", tags=["Risk"])
router.include_router(analysis.router, prefix="/analyze-trades", tags=["Trade Analysis"])
