import logging
from functools import partial
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from ..core.config import Settings, get_settings
from ..core.metrics import track_duration
from ..models.base import TextModel
from ..models.provider import build_model
from ..schemas import AnalysisRequest, ListingsResponse, ValuationReport
from ..services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)

router = APIRouter()

LISTINGS_ERROR = "Failed to fetch RERA listings from the AI model."
VALUATION_ERROR = "Failed to generate the property analysis from the AI model."

ModelFactory = Callable[[], TextModel]

def model_factory(settings: Settings = Depends(get_settings)) -> ModelFactory:
    # Deferred: a missing API key must fail inside the handler, not at startup
    return partial(build_model, settings)

@router.post("/find-rera-listings", response_model=ListingsResponse)
async def find_rera_listings(
    body: AnalysisRequest,
    make_model: ModelFactory = Depends(model_factory),
):
    try:
        with track_duration("find_rera_listings", address=body.address):
            svc = AnalysisService(make_model())
            return await svc.find_rera_listings(body.address)
    except Exception:
        logger.exception("RERA listing lookup failed", extra={"address": body.address})
        raise HTTPException(status_code=500, detail=LISTINGS_ERROR)

@router.post("/analyze-property", response_model=ValuationReport)
async def analyze_property(
    body: AnalysisRequest,
    make_model: ModelFactory = Depends(model_factory),
):
    try:
        with track_duration("analyze_property", address=body.address):
            svc = AnalysisService(make_model())
            return await svc.value_property(body.address)
    except Exception:
        logger.exception("Property analysis failed", extra={"address": body.address})
        raise HTTPException(status_code=500, detail=VALUATION_ERROR)
