from typing import Optional
from dataclasses import dataclass

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float

# Erode, Tamil Nadu
DEFAULT_CENTER = GeoPoint(lat=11.3410, lng=77.7172)
DEFAULT_ZOOM = 12
FOCUSED_ZOOM = 15

@dataclass(frozen=True)
class Place:
    """What the place-picker hands back: an address and, usually, a location."""
    formatted_address: str
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def point(self) -> Optional[GeoPoint]:
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(lat=self.lat, lng=self.lng)

@dataclass
class MapView:
    center: GeoPoint = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM

    def pan_to(self, point: GeoPoint, zoom: int = FOCUSED_ZOOM) -> None:
        self.center = point
        self.zoom = zoom
