"""
State normalization - raw OpenSky rows to public Flight records.

Stages per row:
1. Parse: validate the positional array into a StateVector
2. Filter: require a callsign and a finite position
3. Convert: SI units to feet / knots / feet-per-minute
4. Enrich: airline and origin hub from the callsign prefix

Malformed rows are skipped individually; upstream order is preserved
and output stops at the configured limit.
"""

import logging
from typing import Any, Iterable, List, Optional

from flightpulse.ingestion.callsigns import DEFAULT_HUB, resolve_airline, resolve_origin_hub
from flightpulse.ingestion.opensky_client import StateVector
from flightpulse.ingestion.units import _round_half_up, meters_to_feet, mps_to_fpm, mps_to_knots
from flightpulse.models import Flight
from flightpulse.models.flight import (
    DESTINATION_UNKNOWN,
    SQUAWK_UNKNOWN,
    STATUS_IN_AIR,
    STATUS_ON_GROUND,
)

logger = logging.getLogger(__name__)

MAX_FLIGHTS = 100


def to_flight(sv: StateVector, default_hub: str = DEFAULT_HUB) -> Optional[Flight]:
    """
    Convert one parsed state vector into a Flight.

    Returns None when the state has no callsign or no usable position.
    """
    callsign = (sv.callsign or '').strip().upper()
    if not callsign or not sv.has_position():
        return None

    heading = _round_half_up(sv.true_track or 0) % 360

    return Flight(
        icao24=sv.icao24,
        callsign=callsign,
        origin_country=sv.origin_country or 'Unknown',
        lat=float(sv.latitude),
        lng=float(sv.longitude),
        altitude=max(0, meters_to_feet(sv.baro_altitude)),
        heading=heading,
        speed=max(0, mps_to_knots(sv.velocity)),
        vertical_rate=mps_to_fpm(sv.vertical_rate),
        on_ground=sv.on_ground,
        squawk=sv.squawk or SQUAWK_UNKNOWN,
        origin=resolve_origin_hub(callsign, default_hub),
        destination=DESTINATION_UNKNOWN,
        airline=resolve_airline(callsign),
        status=STATUS_ON_GROUND if sv.on_ground else STATUS_IN_AIR,
    )


def normalize(
    raw_states: Optional[Iterable[Any]],
    limit: int = MAX_FLIGHTS,
    default_hub: str = DEFAULT_HUB,
) -> List[Flight]:
    """
    Normalize raw OpenSky state rows into at most `limit` flights.

    Never raises on individual rows; a None or non-iterable input
    yields an empty list.
    """
    if raw_states is None or isinstance(raw_states, (str, bytes, dict)):
        return []

    try:
        rows = iter(raw_states)
    except TypeError:
        return []

    flights: List[Flight] = []
    skipped = 0

    for row in rows:
        if len(flights) >= limit:
            break

        sv = StateVector.from_array(row)
        flight = to_flight(sv, default_hub) if sv else None
        if flight is None:
            skipped += 1
            continue

        flights.append(flight)

    logger.debug(f'Normalized {len(flights)} flights ({skipped} rows skipped)')

    return flights
