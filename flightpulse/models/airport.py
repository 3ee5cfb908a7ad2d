"""
Airport model - static reference data for UK airports.

Loaded once as a constant table (see flightpulse.reference.airports)
and never mutated at runtime.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Airport:
    """
    Static airport information keyed by IATA code.

    Fields:
        iata: 3-letter IATA code (e.g., 'LHR')
        icao: 4-letter ICAO code (e.g., 'EGLL')
        elevation: Field elevation in feet
        terminals: Terminal names
        airlines: Main airlines serving the airport
        type: 'international' or 'regional'
        size: 'large', 'medium' or 'small'
    """
    iata: str
    icao: str
    name: str
    city: str
    country: str
    lat: float
    lng: float
    elevation: int
    timezone: str
    terminals: Tuple[str, ...]
    airlines: Tuple[str, ...]
    type: str
    size: str
    runways: int
    annual_passengers: Optional[int] = None

    def __repr__(self) -> str:
        return f'<Airport {self.iata}/{self.icao} {self.name}>'

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, city, IATA or ICAO."""
        query = query.lower()
        return (
            query in self.iata.lower()
            or query in self.icao.lower()
            or query in self.name.lower()
            or query in self.city.lower()
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'iata': self.iata,
            'icao': self.icao,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'lat': self.lat,
            'lng': self.lng,
            'elevation': self.elevation,
            'timezone': self.timezone,
            'terminals': list(self.terminals),
            'airlines': list(self.airlines),
            'type': self.type,
            'size': self.size,
            'runways': self.runways,
            'annualPassengers': self.annual_passengers,
        }
