"""
Trade Analysis API Endpoints

POST a batch of 1-10 trades, get AI feedback text back.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from tradejournal.core.config import settings
from tradejournal.core.cors import analysis_cors_headers
from tradejournal.schemas.analysis import AnalysisErrorResponse, AnalysisResponse
from tradejournal.services.analysis import AnalysisService, get_analysis_service

router = APIRouter()


@router.post(
    "",
    response_model=AnalysisResponse,
    responses={
        400: {"model": AnalysisErrorResponse, "description": "Invalid trades"},
        402: {"model": AnalysisErrorResponse, "description": "AI credits depleted"},
        429: {"model": AnalysisErrorResponse, "description": "AI rate limit"},
        500: {"model": AnalysisErrorResponse, "description": "AI gateway or configuration error"},
    },
)
async def analyze_trades(
    request: Request,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Get AI feedback on a batch of trades.

    The body is validated by hand (not by FastAPI) so that errors name the
    offending trade position and always come back as {"error": ...}.
    """
    try:
        raw_body = await request.json()
    except ValueError:
        # Unparseable JSON is treated like a missing trades array
        raw_body = None

    outcome = await service.handle(raw_body)
    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.body,
        headers=analysis_cors_headers(settings),
    )


@router.options("")
async def analyze_trades_options():
    """Preflight reply: no body, same headers as POST."""
    return Response(headers=analysis_cors_headers(settings))
