"""
Rides domain package.

Public API:
- Domain models: Location, RouteSummary, Ride, MLPricingData
- Assembly: build_ride, build_rides
- Output: rides_to_payload, rides_to_json
"""
from .models import Location, RouteSummary, Ride, MLPricingData, FEATURE_NAMES
from .assembler import build_ride, build_rides
from .serialization import rides_to_payload, rides_to_json

__all__ = ["Location",
           "RouteSummary",
             "Ride",
               "MLPricingData",
               "FEATURE_NAMES",
               "build_ride",
               "build_rides",
               "rides_to_payload",
               "rides_to_json",
               ]
