"""
Typed records for Flightpulse UK.

All records are frozen dataclasses: live flights are rebuilt per fetch
(or from the cache) and reference data is loaded once at import time.
"""

from flightpulse.models.airport import Airport
from flightpulse.models.flight import (
    SOURCE_FALLBACK,
    SOURCE_LIVE,
    Flight,
    FlightBatch,
    now_ms,
)
from flightpulse.models.flight_details import FlightDetails

__all__ = [
    'Airport',
    'Flight',
    'FlightBatch',
    'FlightDetails',
    'SOURCE_FALLBACK',
    'SOURCE_LIVE',
    'now_ms',
]
