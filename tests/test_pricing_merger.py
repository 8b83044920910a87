import math

import pytest

from pricing.errors import ResponseFormatError
from pricing.merger import PricingResponse, apply_prices, compute_savings
from rides.models import Location, Ride


def make_ride(walk_time=100.0, drive_time=500.0):
    here = Location.new(0.0, 0.0)
    return Ride(
        source=here,
        pickup_point=here,
        destination=here,
        walk_time=walk_time,
        walk_distance=120.0,
        drive_time=drive_time,
        drive_distance=4000.0,
        total_time=walk_time + drive_time,
        total_distance=4120.0,
    )


def test_apply_prices_sets_price_and_savings():
    rides = [make_ride(), make_ride()]
    response = PricingResponse.from_payload({"prices": [10.0, 20.0, 40.0]}, expected_rides=2)

    priced = apply_prices(rides, response)

    assert priced is rides
    assert rides[0].price == 10.0
    assert rides[0].savings == 75.0
    assert rides[1].price == 20.0
    assert rides[1].savings == 50.0


def test_price_above_baseline_gives_negative_savings():
    assert compute_savings(50.0, 40.0) == -25.0


def test_zero_baseline_gives_zero_savings():
    rides = [make_ride(), make_ride()]
    response = PricingResponse.from_payload({"prices": [10.0, 0.0, 0.0]}, expected_rides=2)

    apply_prices(rides, response)

    for ride in rides:
        assert ride.savings == 0.0
        assert math.isfinite(ride.savings)
    assert rides[0].price == 10.0


def test_reapplying_overwrites_previous_prices():
    rides = [make_ride()]
    apply_prices(rides, PricingResponse.from_payload({"prices": [5.0, 10.0]}, expected_rides=1))
    apply_prices(rides, PricingResponse.from_payload({"prices": [8.0, 10.0]}, expected_rides=1))
    assert rides[0].price == 8.0
    assert rides[0].savings == pytest.approx(20.0)


def test_response_exposes_baseline_and_ride_prices():
    response = PricingResponse.from_payload({"prices": [1, 2, 3]}, expected_rides=2)
    assert response.ride_prices == (1.0, 2.0)
    assert response.baseline == 3.0


@pytest.mark.parametrize(
    "payload",
    [
        [10.0, 40.0],
        {"price": [10.0, 40.0]},
        {"prices": "10,40"},
        {"prices": [10.0]},
        {"prices": [10.0, 20.0, 40.0]},
        {"prices": [10.0, "40"]},
        {"prices": [True, 40.0]},
        {"prices": [10.0, float("inf")]},
    ],
)
def test_malformed_payloads_are_rejected(payload):
    with pytest.raises(ResponseFormatError):
        PricingResponse.from_payload(payload, expected_rides=1)


def test_apply_prices_rejects_response_for_other_ride_count():
    rides = [make_ride(), make_ride()]
    response = PricingResponse.from_payload({"prices": [10.0, 40.0]}, expected_rides=1)

    with pytest.raises(ResponseFormatError):
        apply_prices(rides, response)

    assert all(ride.price == 0.0 and ride.savings == 0.0 for ride in rides)


def test_price_too_large_for_a_float_is_rejected():
    huge = int("1" + "0" * 400)
    with pytest.raises(ResponseFormatError):
        PricingResponse.from_payload({"prices": [huge, 40]}, expected_rides=1)


def test_overflowing_savings_are_rejected_before_any_ride_changes():
    rides = [make_ride(), make_ride()]
    response = PricingResponse.from_payload({"prices": [10.0, 1e308, -1e308]}, expected_rides=2)

    with pytest.raises(ResponseFormatError):
        apply_prices(rides, response)

    assert all(ride.price == 0.0 and ride.savings == 0.0 for ride in rides)
