"""
CONTRACT 3: Trade Analysis

Input: {"trades": [...]} (1-10 trades)
Output: AnalysisResponse (feedback text) or AnalysisErrorResponse

Inbound bodies are validated by services/analysis/validator.py, not by
pydantic, so that error messages name the offending trade position.
These models describe the wire shapes and carry the validated batch.
"""

from pydantic import BaseModel, Field


MAX_BATCH_SIZE = 10
MAX_PAIR_LENGTH = 20


class AnalysisTrade(BaseModel):
    """One trade as sent for analysis."""

    crypto_pair: str = Field(..., min_length=1, max_length=MAX_PAIR_LENGTH)
    entry_price: float = Field(..., gt=0)
    stop_loss: float = Field(..., gt=0)
    risk_percent: float = Field(..., ge=0, le=100)


class AnalysisResponse(BaseModel):
    feedback: str


class AnalysisErrorResponse(BaseModel):
    error: str
