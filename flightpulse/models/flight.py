"""
Flight and FlightBatch - the public live-flight records.

A Flight is one normalized aircraft observation in display units. A
FlightBatch is what the aggregator hands to the API layer: up to 100
flights plus provenance (live or fallback) and the fetch instant.

Both are frozen and serialize to the camelCase JSON shape served by
/api/flights. from_dict() rebuilds them from that shape so batches can
round-trip through the cache.
"""

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

SOURCE_LIVE = 'live'
SOURCE_FALLBACK = 'fallback'

STATUS_ON_GROUND = 'On Ground'
STATUS_IN_AIR = 'In Air'

DESTINATION_UNKNOWN = 'TBD'
SQUAWK_UNKNOWN = 'N/A'


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Flight:
    """
    Normalized live flight.

    Fields:
        icao24: 6-character hex transponder address (lowercase)
        callsign: Trimmed uppercase callsign, never empty
        lat / lng: WGS84 position in decimal degrees
        altitude: Barometric altitude in feet (>= 0)
        heading: True track in whole degrees (0-359)
        speed: Ground speed in knots (>= 0)
        vertical_rate: Feet per minute, positive when climbing
    """
    icao24: str
    callsign: str
    origin_country: str
    lat: float
    lng: float
    altitude: int
    heading: int
    speed: int
    vertical_rate: int
    on_ground: bool
    squawk: str

    # Enrichment (derived from callsign / on_ground for live data)
    origin: str
    destination: str
    airline: str
    status: str

    # Schedule display fields, only known for fallback data
    aircraft: str = 'Aircraft'
    dep_time: str = '--:--'
    arr_time: str = '--:--'
    remaining: str = 'N/A'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'icao24': self.icao24,
            'callsign': self.callsign,
            'originCountry': self.origin_country,
            'lat': self.lat,
            'lng': self.lng,
            'altitude': self.altitude,
            'heading': self.heading,
            'speed': self.speed,
            'verticalRate': self.vertical_rate,
            'onGround': self.on_ground,
            'squawk': self.squawk,
            'origin': self.origin,
            'destination': self.destination,
            'status': self.status,
            'airline': self.airline,
            'aircraft': self.aircraft,
            'depTime': self.dep_time,
            'arrTime': self.arr_time,
            'remaining': self.remaining,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Flight':
        """Rebuild a Flight from its to_dict() form. Raises KeyError/TypeError if malformed."""
        return cls(
            icao24=data['icao24'],
            callsign=data['callsign'],
            origin_country=data['originCountry'],
            lat=float(data['lat']),
            lng=float(data['lng']),
            altitude=int(data['altitude']),
            heading=int(data['heading']),
            speed=int(data['speed']),
            vertical_rate=int(data['verticalRate']),
            on_ground=bool(data['onGround']),
            squawk=data['squawk'],
            origin=data['origin'],
            destination=data['destination'],
            airline=data['airline'],
            status=data['status'],
            aircraft=data.get('aircraft', 'Aircraft'),
            dep_time=data.get('depTime', '--:--'),
            arr_time=data.get('arrTime', '--:--'),
            remaining=data.get('remaining', 'N/A'),
        )


@dataclass(frozen=True)
class FlightBatch:
    """
    One response worth of flights.

    Created fresh per aggregator call or rebuilt from the cache.
    Immutable once returned.
    """
    flights: Tuple[Flight, ...]
    timestamp: int
    source: str
    from_cache: bool = False
    note: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.flights)

    def as_cached(self) -> 'FlightBatch':
        """Copy of this batch flagged as served from cache."""
        return replace(self, from_cache=True)

    def to_dict(self) -> dict:
        """Serialized form used for the cache and the /api/flights body."""
        result = {
            'flights': [f.to_dict() for f in self.flights],
            'timestamp': self.timestamp,
            'source': self.source,
            'count': self.count,
        }
        if self.note:
            result['note'] = self.note
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FlightBatch':
        """Rebuild a batch from its to_dict() form. Raises KeyError/TypeError/ValueError if malformed."""
        return cls(
            flights=tuple(Flight.from_dict(f) for f in data['flights']),
            timestamp=int(data['timestamp']),
            source=data['source'],
            note=data.get('note'),
        )
