"""
Eligibility API Routes
Evaluate single reversal requests and the reversal table
"""

from fastapi import APIRouter, HTTPException
from typing import List

from refund_engine.config import settings
from refund_engine.domain.models import Err
from refund_engine.domain.schemas import EligibilityResponse, ReversalRequestIn, ReversalRow
from refund_engine.domain.services.eligibility_engine import evaluate_refund_request
from refund_engine.services.reversal_table_service import ReversalTableService

router = APIRouter()


@router.post("/check", response_model=EligibilityResponse)
async def check_eligibility(payload: ReversalRequestIn):
    """
    Evaluate one reversal request
    """
    from refund_engine.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")

    result = evaluate_refund_request(payload.to_domain(), config_engine.rules)
    if isinstance(result, Err):
        raise HTTPException(
            status_code=422,
            detail={"kind": result.error.kind, "message": result.error.message},
        )
    return EligibilityResponse.from_decision(result.value)


@router.get("/reversals", response_model=List[ReversalRow])
async def get_reversal_table():
    """
    Evaluate every record in the reversal data file
    """
    from refund_engine.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")

    service = ReversalTableService(settings.reversals_data_file, config_engine.rules)
    try:
        return service.build_rows()
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=500, detail=str(e))
