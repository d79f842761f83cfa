import logging
from typing import Callable, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel

from .base import MapView, Place
from ..schemas import ListingsResponse, ValuationReport

logger = logging.getLogger(__name__)

NO_PLACE_WARNING = "Please select a location first."
FETCH_ERROR = "Failed to fetch analysis. Please check your backend URL and ensure the server is running."

LISTINGS_PATH = "/api/find-rera-listings"
VALUATION_PATH = "/api/analyze-property"

T = TypeVar("T", bound=BaseModel)

def _log_alert(message: str) -> None:
    logger.warning(message)

class AnalysisSession:
    """
    State behind the analyze form: picked place, map view, busy flag,
    and the outcome of the last request (a result or an error string).

    One request per `analyze()` / `find_listings()` call. While a request
    is in flight `can_submit` is False; nothing else stops a caller from
    submitting twice.
    """
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 120.0,
        alert: Callable[[str], None] = _log_alert,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.alert = alert
        self._transport = transport

        self.map = MapView()
        self.selected_place: Optional[Place] = None
        self.is_busy = False
        self.result: Optional[Union[ListingsResponse, ValuationReport]] = None
        self.error: Optional[str] = None

    @property
    def selected_address(self) -> str:
        return self.selected_place.formatted_address if self.selected_place else ""

    @property
    def can_submit(self) -> bool:
        return not self.is_busy and bool(self.selected_address)

    def select_place(self, place: Place) -> None:
        # Picker results without geometry are ignored, like the map widget does
        point = place.point
        if point is None:
            return
        self.selected_place = place
        self.map.pan_to(point)
        self.result = None
        self.error = None

    async def find_listings(self) -> Optional[ListingsResponse]:
        return await self._submit(LISTINGS_PATH, ListingsResponse)

    async def analyze(self) -> Optional[ValuationReport]:
        return await self._submit(VALUATION_PATH, ValuationReport)

    async def _submit(self, path: str, schema: type[T]) -> Optional[T]:
        if not self.selected_address:
            self.alert(NO_PLACE_WARNING)
            return None

        self.is_busy = True
        self.error = None
        self.result = None
        body = {"address": self.selected_address}
        if self.selected_place.point is not None:
            body.update(lat=self.selected_place.lat, lng=self.selected_place.lng)

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                r = await client.post(path, json=body)
                r.raise_for_status()
                result = schema.model_validate(r.json())
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # Every failure kind collapses to one on-screen message
            logger.error("Request to %s failed: %s", path, exc, extra={"address": body["address"]})
            self.error = FETCH_ERROR
            return None
        finally:
            self.is_busy = False

        self.result = result
        return result
