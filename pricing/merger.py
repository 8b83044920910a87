"""
Purpose: Apply prices returned by the pricing service back onto rides.
What it does:

Validates the response document against the ride count:
  {"prices": [p_0, ..., p_{n-1}, baseline]}
The trailing element is the "no pickup" baseline (drive straight from the
source, no walk). It is only used to compute savings:

  savings_i = 100 * (baseline - p_i) / baseline

Rule: all-or-nothing. Every value is validated and computed before any ride
is touched.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Sequence, Tuple

from rides.models import Ride

from .errors import ResponseFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingResponse:
    """
    Typed view of a pricing service reply.
    """
    prices: Tuple[float, ...]

    @property
    def ride_prices(self) -> Tuple[float, ...]:
        return self.prices[:-1]

    @property
    def baseline(self) -> float:
        return self.prices[-1]

    @classmethod
    def from_payload(cls, payload: Any, expected_rides: int) -> PricingResponse:
        if not isinstance(payload, dict):
            raise ResponseFormatError("Pricing response must be a JSON object")
        if "prices" not in payload:
            raise ResponseFormatError('Pricing response has no "prices" field')

        prices = payload["prices"]
        if not isinstance(prices, list):
            raise ResponseFormatError('"prices" must be an array')
        if len(prices) != expected_rides + 1:
            raise ResponseFormatError(
                f'"prices" must hold {expected_rides + 1} values '
                f"({expected_rides} rides + baseline), got {len(prices)}"
            )

        values: List[float] = []
        for index, price in enumerate(prices):
            if isinstance(price, bool) or not isinstance(price, Real):
                raise ResponseFormatError(f"Price at index {index} is not a number: {price!r}")
            try:
                value = float(price)
            except (OverflowError, ValueError) as e:
                raise ResponseFormatError(f"Price at index {index} does not fit a float") from e
            if not math.isfinite(value):
                raise ResponseFormatError(f"Price at index {index} is not a finite number: {price!r}")
            values.append(value)

        return cls(prices=tuple(values))


def compute_savings(price: float, baseline: float) -> float:
    """Percentage saved against the baseline; 0.0 when the baseline is 0."""
    if baseline == 0:
        return 0.0
    return 100 * (baseline - price) / baseline


def apply_prices(rides: Sequence[Ride], response: PricingResponse) -> Sequence[Ride]:
    """
    Write price and savings onto each ride in place and return the same sequence.

    Calling it again with another response overwrites the previous values.
    """
    if len(response.ride_prices) != len(rides):
        raise ResponseFormatError(
            f"Got {len(response.ride_prices)} ride prices for {len(rides)} rides"
        )

    baseline = response.baseline
    if baseline == 0:
        logger.warning("Baseline price is 0; savings set to 0 for %d rides", len(rides))

    updates: List[Tuple[float, float]] = []
    for index, price in enumerate(response.ride_prices):
        savings = compute_savings(price, baseline)
        if not math.isfinite(savings):
            raise ResponseFormatError(
                f"Savings for ride {index} overflow (price {price!r}, baseline {baseline!r})"
            )
        updates.append((price, savings))

    for ride, (price, savings) in zip(rides, updates):
        ride.price = price
        ride.savings = savings

    return rides
