"""
Purpose: Configuration for the pricing client (single source of truth).

The endpoint and timeouts are passed to PricingClient explicitly.
PricingConfig.from_env() is the only place that reads the environment.

Example .env:
    PRICING_API_URL=http://localhost:8080/predict
    PRICING_TIMEOUT_SEC=10
    PRICING_MAX_RETRIES=1
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class PricingConfig:
    """
    Settings for talking to the pricing service.

    Notes:
    - timeout_seconds bounds each HTTP attempt, not the whole call.
    - max_retries only applies to connection failures and timeouts;
      HTTP error statuses are never retried.
    """
    endpoint_url: str
    timeout_seconds: float = 10.0
    max_retries: int = 1

    def __post_init__(self) -> None:
        if not self.endpoint_url:
            raise ValueError("endpoint_url must be set")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")

    @classmethod
    def from_env(cls) -> PricingConfig:
        load_dotenv()
        url = os.getenv("PRICING_API_URL")
        if not url:
            raise ValueError("Pricing API URL not set. Please set PRICING_API_URL in the .env file.")

        return cls(
            endpoint_url=url,
            timeout_seconds=float(os.getenv("PRICING_TIMEOUT_SEC", "10")),
            max_retries=int(os.getenv("PRICING_MAX_RETRIES", "1")),
        )
