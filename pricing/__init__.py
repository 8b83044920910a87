"""
Pricing subpackage.

Public API:
- PricingClient, price_rides
- PricingConfig
- build_pricing_json, decode_pricing_json
- PricingResponse, apply_prices, compute_savings
- Errors: PricingError, EncodingError, TransportError, PricingHTTPError, ResponseFormatError
"""

from .client import PricingClient, price_rides
from .config import PricingConfig
from .encoder import build_pricing_json, decode_pricing_json
from .errors import (
    EncodingError,
    PricingError,
    PricingHTTPError,
    ResponseFormatError,
    TransportError,
)
from .merger import PricingResponse, apply_prices, compute_savings

__all__ = [
    "PricingClient",
    "price_rides",
    "PricingConfig",
    "build_pricing_json",
    "decode_pricing_json",
    "PricingResponse",
    "apply_prices",
    "compute_savings",
    "PricingError",
    "EncodingError",
    "TransportError",
    "PricingHTTPError",
    "ResponseFormatError",
]
