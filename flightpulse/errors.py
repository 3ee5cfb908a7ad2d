"""
Exception types for Flightpulse UK.

Upstream and cache errors are recovered inside the aggregator and never
reach API callers. InvalidRequestError is turned into a 400 by the API layer.
"""

from typing import Optional


class FlightpulseError(Exception):
    """Base class for all Flightpulse errors."""


class UpstreamError(FlightpulseError):
    """The live data provider could not deliver a usable response."""


class UpstreamTimeoutError(UpstreamError):
    """The upstream request did not complete within the configured timeout."""


class UpstreamHTTPError(UpstreamError):
    """The upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f'OpenSky API returned {status_code}')


class UpstreamPayloadError(UpstreamError):
    """The upstream body was not valid JSON or not a JSON object."""


class CacheError(FlightpulseError):
    """The cache backend failed to read or write an entry."""


class InvalidRequestError(FlightpulseError):
    """A client request is missing a required parameter."""

    def __init__(self, message: str, example: Optional[str] = None):
        self.example = example
        super().__init__(message)
