#Purpose: The pricing service "adapter/client".
#Sole responsibility: send feature vectors to the pricing endpoint over HTTP
#and hand back validated prices.
#Encapsulates endpoint-specific details:
#request body encoding ({"data": [[8 floats], ...]})
#timeouts and the single retry on connection failures
#parsing the {"prices": [...]} reply into PricingResponse
#It should not compute features or routes.

from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

import requests

from rides.models import MLPricingData, Ride

from .config import PricingConfig
from .encoder import build_pricing_json
from .errors import PricingHTTPError, ResponseFormatError, TransportError
from .merger import PricingResponse, apply_prices

logger = logging.getLogger(__name__)


class PricingClient:
    """
    Pricing Adapter / Client

    Sole responsibility:
    - Talk to the pricing service via HTTP
    - Encode MLPricingData rows, decode the prices
    - Merge prices and savings back into rides

    One POST per call (plus at most config.max_retries retries on
    connection errors and timeouts).
    """
    def __init__(self, config: PricingConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls) -> PricingClient:
        return cls(PricingConfig.from_env())

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

        #----------------
        # HTTP exchange
        #----------------
    def _post(self, body: str) -> requests.Response:
        attempts = self.config.max_retries + 1
        last_error: Optional[Exception] = None

        for attempt in range(1, attempts + 1):
            try:
                return self.session.post(
                    self.config.endpoint_url,
                    data=body,
                    headers={"Content-Type": "application/json"},
                    timeout=self.config.timeout_seconds,
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                last_error = e
                logger.warning(
                    "Pricing request attempt %d/%d to %s failed: %s",
                    attempt, attempts, self.config.endpoint_url, e,
                )
            except requests.RequestException as e:
                logger.error(f"Error making pricing request: {e}")
                raise TransportError(f"Error making pricing request: {e}") from e

        logger.error(f"Giving up on pricing request after {attempts} attempts: {last_error}")
        raise TransportError(
            f"Pricing service unreachable after {attempts} attempts: {last_error}"
        ) from last_error

    def request_prices(self, pricing_data: Sequence[MLPricingData]) -> PricingResponse:
        """
        POST the feature rows and return the validated reply.

        Returns:
            PricingResponse with len(pricing_data) ride prices plus the baseline.
        """
        body = build_pricing_json(pricing_data)
        logger.info("Requesting %d prices from %s", len(pricing_data), self.config.endpoint_url)
        logger.debug("Request body: %s", body)

        response = self._post(body)
        if not 200 <= response.status_code < 300:
            raise PricingHTTPError(
                response.status_code,
                f"Pricing service returned HTTP {response.status_code}",
            )

        try:
            text = response.text
        except requests.RequestException as e:
            raise TransportError(f"Error reading pricing response body: {e}") from e
        logger.debug("Response body: %s", text)

        try:
            payload = json.loads(text)
        except ValueError as e:
            raise ResponseFormatError(f"Pricing response is not valid JSON: {e}") from e

        return PricingResponse.from_payload(payload, expected_rides=len(pricing_data))

        #----------------
        # Public entry point
        #----------------
    def price_rides(self, rides: Sequence[Ride], pricing_data: Sequence[MLPricingData]) -> Sequence[Ride]:
        """
        Price rides in place using one feature row per ride (same order).

        Either every ride is priced or an error is raised and no ride changes.
        Empty input returns [] without calling the endpoint.

        Raises:
            ValueError: rides and pricing_data differ in length.
            EncodingError, TransportError, ResponseFormatError: the stage that failed.
        """
        if len(rides) != len(pricing_data):
            raise ValueError(
                f"Need one pricing row per ride, got {len(pricing_data)} rows for {len(rides)} rides"
            )
        if not rides:
            return []

        response = self.request_prices(pricing_data)
        return apply_prices(rides, response)


def price_rides(
        rides: Sequence[Ride],
        pricing_data: Sequence[MLPricingData],
        client: Optional[PricingClient] = None,
) -> Sequence[Ride]:
    """Convenience wrapper; builds a client from the environment when none is given."""
    if client is not None:
        return client.price_rides(rides, pricing_data)

    client = PricingClient.from_env()
    try:
        return client.price_rides(rides, pricing_data)
    finally:
        client.close()
