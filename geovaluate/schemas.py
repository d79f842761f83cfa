from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Address = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class AnalysisRequest(BaseModel):
    address: Address
    lat: float | None = None
    lng: float | None = None

# ----- Model output shapes -----
# Frozen and tolerant of extra keys: the model may add fields we don't ask for.

class ReraListing(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    project_name: str
    developer: str
    details: str
    source_url: str

class ListingsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    listings: list[ReraListing]

class HedonicFactor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    factor: str
    score: int = Field(ge=0, le=5, strict=True)
    justification: str

class ValuationReport(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    address: str
    fair_value_estimate: str
    hedonic_analysis: list[HedonicFactor]
    growth_trends: str
    projected_appreciation: str
    sources: list[str]
