import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool

from ..core.errors import ModelResponseError
from ..core.utils import strip_code_fences
from ..models.base import TextModel
from ..prompts import (
    RERA_LISTINGS_TEMPLATE,
    VALUATION_REPORT_TEMPLATE,
    describe_schema,
    render_prompt,
)
from ..schemas import ListingsResponse, ValuationReport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

def parse_model_reply(text: str, schema: type[T]) -> T:
    """
    Sanitize and validate raw model output.
    Fences are stripped, the rest must be JSON matching `schema` in full.
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ModelResponseError(f"Model reply is not valid JSON: {exc}") from exc
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ModelResponseError(
            f"Model reply does not match {schema.__name__}: {exc.error_count()} error(s)"
        ) from exc

class AnalysisService:
    """
    Orchestrates:
      address → prompt → model (worker thread) → fence strip → JSON → schema
    Holds no state between requests; one instance per request is fine.
    """
    def __init__(self, model: TextModel):
        self.model = model

    async def _ask(self, template: str, address: str, schema: type[T]) -> T:
        prompt = render_prompt(template, address, describe_schema(schema.model_json_schema()))
        logger.debug("Prompting %s", self.model.name, extra={"address": address, "provider": self.model.name})
        # SDK calls block; keep them off the event loop
        reply = await run_in_threadpool(self.model.generate, prompt)
        return parse_model_reply(reply, schema)

    async def find_rera_listings(self, address: str) -> ListingsResponse:
        return await self._ask(RERA_LISTINGS_TEMPLATE, address, ListingsResponse)

    async def value_property(self, address: str) -> ValuationReport:
        return await self._ask(VALUATION_REPORT_TEMPLATE, address, ValuationReport)
