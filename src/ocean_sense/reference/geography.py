"""Geographic bounds for the target region."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """South/west/north/east lat-lon bounding box."""

    south: float
    west: float
    north: float
    east: float

    def as_wkt(self) -> str:
        """Return the box as a WKT polygon (lon lat order, closed ring)."""
        s, w, n, e = self.south, self.west, self.north, self.east
        return f"POLYGON(({w} {s}, {e} {s}, {e} {n}, {w} {n}, {w} {s}))"

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east


# Arabian Sea + Bay of Bengal, including the Indian coast
NORTH_INDIAN_OCEAN = BoundingBox(south=-10.0, west=40.0, north=30.0, east=100.0)
