"""
Error taxonomy for the pricing pipeline.

Every failure is surfaced to the caller as one of these; which class is
raised tells the caller which stage failed.
"""


class PricingError(Exception):
    """Base class for pricing failures."""
    pass


class EncodingError(PricingError):
    """Feature vectors could not be serialized (or parsed back)."""
    pass


class TransportError(PricingError):
    """The request could not be sent or the response could not be read."""
    pass


class PricingHTTPError(TransportError):
    """The pricing service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(PricingError):
    """The response body is not the expected {"prices": [...]} document."""
    pass
