"""
Purpose: Domain models for the Rides capability.
What it does:
- Defines core data structures:
- Location (lat, lon), passed through untouched
- RouteSummary (source, destination, time in seconds, distance in meters)
- Ride (walk leg + drive leg, totals, price, savings)
- MLPricingData (the 8 features the pricing model expects per ride)

Rule: No HTTP calls, no pricing logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, List


@dataclass(frozen=True)
class Location:
    """
    A geographic point. Opaque to the pricing core beyond pass-through.
    """
    lat: float
    lon: float

    @classmethod
    def new(cls, lat: float, lon: float) -> Location:
        return cls(lat=float(lat), lon=float(lon))

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class RouteSummary:
    """
    One directed leg as produced by the routing collaborator.
    """
    source: Location
    destination: Location
    time: float  # seconds
    distance: float  # meters


@dataclass
class Ride:
    """
    Walk to a pickup point, then drive to the destination.

    price and savings stay at 0.0 until the ride goes through pricing.
    """
    source: Location
    pickup_point: Location
    destination: Location

    walk_time: float
    walk_distance: float
    drive_time: float
    drive_distance: float

    total_time: float
    total_distance: float

    price: float = 0.0
    savings: float = 0.0  # percent saved against the no-walk baseline

    def to_dict(self) -> Dict[str, object]:
        """Response body shape for a single ride (camelCase keys)."""
        return {
            "source": self.source.to_dict(),
            "pickupPoint": self.pickup_point.to_dict(),
            "destination": self.destination.to_dict(),
            "walkTime": self.walk_time,
            "walkDistance": self.walk_distance,
            "driveTime": self.drive_time,
            "driveDistance": self.drive_distance,
            "totalTime": self.total_time,
            "totalDistance": self.total_distance,
            "price": self.price,
            "savings": self.savings,
        }


@dataclass(frozen=True)
class MLPricingData:
    """
    Feature tuple for one ride. Field order is the wire order.
    """
    time_in_seconds: float
    distance_in_meters: float
    time_to_historic_ratio: float
    time_to_no_traffic_ratio: float
    day_of_week_sin: float
    day_of_week_cos: float
    time_of_day_sin: float
    time_of_day_cos: float

    def as_row(self) -> List[float]:
        return [getattr(self, name) for name in FEATURE_NAMES]


FEATURE_NAMES = tuple(f.name for f in fields(MLPricingData))
