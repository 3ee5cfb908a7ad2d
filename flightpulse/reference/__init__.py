"""
Static reference data for Flightpulse UK.

Everything here is immutable and loaded once at import time.
"""

from flightpulse.reference.airports import UK_AIRPORTS, find_by_iata, find_by_icao, search_airports
from flightpulse.reference.fallback import FALLBACK_FLIGHTS, get_fallback_batch
from flightpulse.reference.flight_details import FLIGHT_DETAILS, get_flight_details

__all__ = [
    'UK_AIRPORTS',
    'find_by_iata',
    'find_by_icao',
    'search_airports',
    'FALLBACK_FLIGHTS',
    'get_fallback_batch',
    'FLIGHT_DETAILS',
    'get_flight_details',
]
