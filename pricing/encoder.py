"""
Purpose: Wire format for pricing requests.

Request body shape:
    {"data": [[f0, f1, ..., f7], ...]}

One row per ride, in ride order, features in MLPricingData field order.
json.dumps writes floats with repr(), which round-trips float64 exactly.
"""
from __future__ import annotations

import json
import math
from numbers import Real
from typing import List, Sequence

from rides.models import FEATURE_NAMES, MLPricingData

from .errors import EncodingError


def build_pricing_json(pricing_data: Sequence[MLPricingData]) -> str:
    rows = [data.as_row() for data in pricing_data]
    try:
        return json.dumps({"data": rows}, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot encode pricing features: {e}") from e


def decode_pricing_json(text: str) -> List[MLPricingData]:
    """
    Inverse of build_pricing_json. Used to replay captured request bodies.
    """
    try:
        document = json.loads(text)
    except ValueError as e:
        raise EncodingError(f"Pricing request is not valid JSON: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("data"), list):
        raise EncodingError('Pricing request must be an object with a "data" array')

    out: List[MLPricingData] = []
    for index, row in enumerate(document["data"]):
        if not isinstance(row, list) or len(row) != len(FEATURE_NAMES):
            raise EncodingError(f"Row {index} must hold exactly {len(FEATURE_NAMES)} features")
        features: List[float] = []
        for value in row:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise EncodingError(f"Row {index} has a non-numeric feature: {value!r}")
            try:
                feature = float(value)
            except (OverflowError, ValueError) as e:
                raise EncodingError(f"Row {index} has a feature that does not fit a float") from e
            if not math.isfinite(feature):
                raise EncodingError(f"Row {index} has a non-finite feature: {value!r}")
            features.append(feature)
        out.append(MLPricingData(*features))
    return out
