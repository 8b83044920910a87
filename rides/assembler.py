"""
Purpose: Turn paired route legs into Ride records.

The inbound leg goes from the rider's source to the pickup point (walked),
the outbound leg from the pickup point to the destination (driven).
The pickup point is taken from inbound.destination; callers are trusted to
pass an outbound leg that starts there.
"""
from __future__ import annotations

from typing import List, Sequence

from .models import Ride, RouteSummary


def build_ride(inbound: RouteSummary, outbound: RouteSummary) -> Ride:
    return Ride(
        source=inbound.source,
        pickup_point=inbound.destination,
        destination=outbound.destination,
        walk_time=inbound.time,
        walk_distance=inbound.distance,
        drive_time=outbound.time,
        drive_distance=outbound.distance,
        total_time=inbound.time + outbound.time,
        total_distance=inbound.distance + outbound.distance,
    )


def build_rides(
        inbounds: Sequence[RouteSummary],
        outbounds: Sequence[RouteSummary],
) -> List[Ride]:
    """
    Batch version of build_ride, pairing legs by index.

    Raises:
        ValueError: if the two sequences differ in length.
    """
    if len(inbounds) != len(outbounds):
        raise ValueError(
            f"inbounds and outbounds must have the same length, "
            f"got {len(inbounds)} and {len(outbounds)}"
        )

    return [build_ride(inbound, outbound) for inbound, outbound in zip(inbounds, outbounds)]
