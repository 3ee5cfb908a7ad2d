"""
Typed records for the single-flight detail endpoint (/api/flight).

Each nested record builds its own JSON fragment so the response shape
is spelled out field by field.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AirlineRef:
    name: str
    iata: str
    icao: str
    logo: Optional[str] = None

    def to_dict(self) -> dict:
        return {'name': self.name, 'iata': self.iata, 'icao': self.icao, 'logo': self.logo}


@dataclass(frozen=True)
class AircraftRef:
    type: str
    registration: str
    age: str
    icao24: str

    def to_dict(self) -> dict:
        return {
            'type': self.type,
            'registration': self.registration,
            'age': self.age,
            'icao24': self.icao24,
        }


@dataclass(frozen=True)
class AirportRef:
    """Departure or arrival airport, with the gate assigned to this flight."""
    iata: str
    icao: str
    name: str
    city: str
    country: str
    terminal: str
    gate: str
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {
            'iata': self.iata,
            'icao': self.icao,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'terminal': self.terminal,
            'gate': self.gate,
            'lat': self.lat,
            'lng': self.lng,
        }


@dataclass(frozen=True)
class FlightTimes:
    """ISO-8601 UTC times. Actual arrival stays None while en route."""
    scheduled_departure: str
    scheduled_arrival: str
    actual_departure: Optional[str]
    actual_arrival: Optional[str]
    estimated_arrival: Optional[str]

    def to_dict(self) -> dict:
        return {
            'scheduled': {
                'departure': self.scheduled_departure,
                'arrival': self.scheduled_arrival,
            },
            'actual': {
                'departure': self.actual_departure,
                'arrival': self.actual_arrival,
            },
            'estimated': {
                'arrival': self.estimated_arrival,
            },
        }


@dataclass(frozen=True)
class FlightStatus:
    code: str
    text: str
    delay: int
    on_time: bool

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'text': self.text,
            'delay': self.delay,
            'onTime': self.on_time,
        }


@dataclass(frozen=True)
class FlightPosition:
    lat: float
    lng: float
    altitude: int
    speed: int
    heading: int
    vertical_speed: int
    squawk: str

    def to_dict(self) -> dict:
        return {
            'lat': self.lat,
            'lng': self.lng,
            'altitude': self.altitude,
            'altitudeUnit': 'ft',
            'speed': self.speed,
            'speedUnit': 'kts',
            'heading': self.heading,
            'verticalSpeed': self.vertical_speed,
            'verticalSpeedUnit': 'fpm',
            'squawk': self.squawk,
        }


@dataclass(frozen=True)
class FlightProgress:
    """Route progress; distances in statute miles."""
    percentage: int
    elapsed: str
    remaining: str
    distance_total: int
    distance_flown: int
    distance_remaining: int

    def to_dict(self) -> dict:
        return {
            'percentage': self.percentage,
            'elapsed': self.elapsed,
            'remaining': self.remaining,
            'distance': {
                'total': self.distance_total,
                'flown': self.distance_flown,
                'remaining': self.distance_remaining,
                'unit': 'miles',
            },
        }


@dataclass(frozen=True)
class PastFlight:
    date: str
    delay: int
    status: str

    def to_dict(self) -> dict:
        return {'date': self.date, 'delay': self.delay, 'status': self.status}


@dataclass(frozen=True)
class FlightHistory:
    on_time_rating: int
    average_delay: int
    last_flights: Tuple[PastFlight, ...] = ()

    def to_dict(self) -> dict:
        return {
            'onTimeRating': self.on_time_rating,
            'averageDelay': self.average_delay,
            'delayUnit': 'minutes',
            'lastFlights': [f.to_dict() for f in self.last_flights],
        }


@dataclass(frozen=True)
class FlightDetails:
    """Full detail record for one callsign."""
    callsign: str
    flight_number: str
    airline: AirlineRef
    aircraft: AircraftRef
    origin: AirportRef
    destination: AirportRef
    times: FlightTimes
    status: FlightStatus
    position: FlightPosition
    progress: FlightProgress
    history: FlightHistory

    def __repr__(self) -> str:
        return f'<FlightDetails {self.callsign} {self.origin.iata}-{self.destination.iata}>'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'callsign': self.callsign,
            'flightNumber': self.flight_number,
            'airline': self.airline.to_dict(),
            'aircraft': self.aircraft.to_dict(),
            'origin': self.origin.to_dict(),
            'destination': self.destination.to_dict(),
            'times': self.times.to_dict(),
            'status': self.status.to_dict(),
            'position': self.position.to_dict(),
            'progress': self.progress.to_dict(),
            'history': self.history.to_dict(),
        }
