#Purpose: Encode priced rides as a response body for the invocation handler.
#Field names follow Ride.to_dict(); nothing here knows about pricing.

from __future__ import annotations

import json
from typing import Dict, List, Sequence

from .models import Ride


def rides_to_payload(rides: Sequence[Ride]) -> List[Dict[str, object]]:
    return [ride.to_dict() for ride in rides]


def rides_to_json(rides: Sequence[Ride]) -> str:
    return json.dumps(rides_to_payload(rides))
