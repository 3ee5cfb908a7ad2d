"""
Fixed detail records for /api/flight.

Schedule data is not correlated with live traffic, so details exist only
for the sample flights that also appear in the fallback set.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from flightpulse.models.flight_details import (
    AircraftRef,
    AirlineRef,
    AirportRef,
    FlightDetails,
    FlightHistory,
    FlightPosition,
    FlightProgress,
    FlightStatus,
    FlightTimes,
    PastFlight,
)

_BRITISH_AIRWAYS = AirlineRef(
    'British Airways', 'BA', 'BAW',
    'https://www.britishairways.com/assets/images/MediaHub/Media-Database/Logos/British-Airways-logo.png',
)
_VIRGIN_ATLANTIC = AirlineRef('Virgin Atlantic', 'VS', 'VIR')


def _heathrow(terminal: str, gate: str) -> AirportRef:
    return AirportRef('LHR', 'EGLL', 'London Heathrow', 'London', 'United Kingdom',
                      terminal, gate, 51.4700, -0.4543)


def _jfk(terminal: str, gate: str) -> AirportRef:
    return AirportRef('JFK', 'KJFK', 'John F. Kennedy International', 'New York', 'United States',
                      terminal, gate, 40.6413, -73.7781)


FLIGHT_DETAILS: Mapping[str, FlightDetails] = MappingProxyType({
    'BA123': FlightDetails(
        callsign='BA123',
        flight_number='BA 123',
        airline=_BRITISH_AIRWAYS,
        aircraft=AircraftRef('Boeing 777-300ER', 'G-STBJ', '5 years', '40f678'),
        origin=_heathrow('5', 'B32'),
        destination=_jfk('7', '4'),
        times=FlightTimes('2024-01-15T11:45:00Z', '2024-01-15T14:30:00Z',
                          '2024-01-15T11:47:00Z', None, '2024-01-15T14:28:00Z'),
        status=FlightStatus('EN_ROUTE', 'En Route', 0, True),
        position=FlightPosition(53.2, -4.8, 36000, 510, 275, 0, '7421'),
        progress=FlightProgress(65, '4h 30m', '2h 15m', 3451, 2243, 1208),
        history=FlightHistory(88, 8, (
            PastFlight('2024-01-14', 5, 'On Time'),
            PastFlight('2024-01-13', 0, 'On Time'),
            PastFlight('2024-01-12', 22, 'Delayed'),
            PastFlight('2024-01-11', 0, 'On Time'),
            PastFlight('2024-01-10', 3, 'On Time'),
        )),
    ),
    'BA458': FlightDetails(
        callsign='BA458',
        flight_number='BA 458',
        airline=_BRITISH_AIRWAYS,
        aircraft=AircraftRef('Airbus A320', 'G-EUYT', '8 years', 'abc123'),
        origin=_heathrow('5', 'A10'),
        destination=AirportRef('CDG', 'LFPG', 'Charles de Gaulle', 'Paris', 'France',
                               '2E', 'K45', 49.0097, 2.5479),
        times=FlightTimes('2024-01-15T14:15:00Z', '2024-01-15T16:35:00Z',
                          '2024-01-15T14:18:00Z', None, '2024-01-15T16:38:00Z'),
        status=FlightStatus('EN_ROUTE', 'En Route', 3, True),
        position=FlightPosition(51.15, -0.18, 36000, 450, 135, 0, '5523'),
        progress=FlightProgress(67, '0h 52m', '1h 10m', 214, 143, 71),
        history=FlightHistory(92, 5),
    ),
    'BA217': FlightDetails(
        callsign='BA217',
        flight_number='BA 217',
        airline=_BRITISH_AIRWAYS,
        aircraft=AircraftRef('Boeing 777-200', 'G-VIIA', '12 years', 'def456'),
        origin=_heathrow('5', 'C44'),
        destination=AirportRef('IAD', 'KIAD', 'Washington Dulles', 'Washington', 'United States',
                               'B', '12', 38.9531, -77.4565),
        times=FlightTimes('2024-01-15T10:30:00Z', '2024-01-15T14:15:00Z',
                          '2024-01-15T10:32:00Z', None, '2024-01-15T14:12:00Z'),
        status=FlightStatus('EN_ROUTE', 'En Route', 0, True),
        position=FlightPosition(51.8, -1.2, 38000, 510, 285, 0, '6142'),
        progress=FlightProgress(45, '3h 15m', '2h 45m', 3665, 1649, 2016),
        history=FlightHistory(85, 12),
    ),
    'VS3': FlightDetails(
        callsign='VS3',
        flight_number='VS 3',
        airline=_VIRGIN_ATLANTIC,
        aircraft=AircraftRef('Airbus A350-1000', 'G-VLUX', '3 years', 'a1b789'),
        origin=_heathrow('3', 'B36'),
        destination=_jfk('4', 'B25'),
        times=FlightTimes('2024-01-15T11:00:00Z', '2024-01-15T14:15:00Z',
                          '2024-01-15T11:15:00Z', None, '2024-01-15T14:30:00Z'),
        status=FlightStatus('EN_ROUTE', 'En Route - Delayed', 15, False),
        position=FlightPosition(52.1, -2.5, 40000, 520, 270, 0, '4521'),
        progress=FlightProgress(35, '2h 45m', '3h 15m', 3451, 1208, 2243),
        history=FlightHistory(78, 18),
    ),
})


def get_flight_details(callsign: str) -> Optional[FlightDetails]:
    """Detail record for a callsign (case-insensitive), or None if unknown."""
    return FLIGHT_DETAILS.get(callsign.strip().upper())
