"""
Fallback flights served when live data cannot be obtained.

A fixed snapshot of typical UK traffic. Same shape as normalized live
flights, so the API layer never has to know which path produced a batch.
"""

from typing import Optional, Tuple

from flightpulse.models import SOURCE_FALLBACK, Flight, FlightBatch, now_ms

DEFAULT_NOTE = 'Live data unavailable, showing sample flights'

FALLBACK_FLIGHTS: Tuple[Flight, ...] = (
    Flight(
        icao24='abc123', callsign='BA458', origin_country='United Kingdom',
        lat=51.15, lng=-0.18, altitude=36000, heading=135, speed=450,
        vertical_rate=0, on_ground=False, squawk='5523',
        origin='LHR', destination='CDG', airline='British Airways', status='On Time',
        aircraft='Airbus A320', dep_time='14:15', arr_time='16:35', remaining='1h 10m',
    ),
    Flight(
        icao24='def456', callsign='BA217', origin_country='United Kingdom',
        lat=51.8, lng=-1.2, altitude=38000, heading=285, speed=510,
        vertical_rate=0, on_ground=False, squawk='6142',
        origin='LHR', destination='IAD', airline='British Airways', status='On Time',
        aircraft='Boeing 777', dep_time='10:30', arr_time='14:15', remaining='2h 45m',
    ),
    Flight(
        icao24='a1b789', callsign='VS3', origin_country='United Kingdom',
        lat=52.1, lng=-2.5, altitude=40000, heading=270, speed=520,
        vertical_rate=0, on_ground=False, squawk='4521',
        origin='LHR', destination='JFK', airline='Virgin Atlantic', status='Delayed 15m',
        aircraft='Airbus A350', dep_time='11:00', arr_time='14:30', remaining='3h 15m',
    ),
    Flight(
        icao24='4ca012', callsign='EZY101', origin_country='United Kingdom',
        lat=51.5, lng=0.8, altitude=32000, heading=140, speed=420,
        vertical_rate=-500, on_ground=False, squawk='2314',
        origin='MAN', destination='CDG', airline='easyJet', status='On Time',
        aircraft='Airbus A320', dep_time='13:00', arr_time='15:20', remaining='1h 50m',
    ),
    Flight(
        icao24='4ca345', callsign='RYR882', origin_country='Ireland',
        lat=52.8, lng=-3.5, altitude=35000, heading=290, speed=440,
        vertical_rate=0, on_ground=False, squawk='1234',
        origin='STN', destination='DUB', airline='Ryanair', status='On Time',
        aircraft='Boeing 737', dep_time='12:45', arr_time='13:55', remaining='0h 40m',
    ),
    Flight(
        icao24='40f678', callsign='BA123', origin_country='United Kingdom',
        lat=53.2, lng=-4.8, altitude=36000, heading=275, speed=510,
        vertical_rate=0, on_ground=False, squawk='7421',
        origin='LHR', destination='JFK', airline='British Airways', status='On Time',
        aircraft='Boeing 777-300ER', dep_time='11:45', arr_time='14:30', remaining='2h 15m',
    ),
)


def get_fallback_batch(note: Optional[str] = None) -> FlightBatch:
    """Fallback batch stamped with the current time."""
    return FlightBatch(
        flights=FALLBACK_FLIGHTS,
        timestamp=now_ms(),
        source=SOURCE_FALLBACK,
        note=note or DEFAULT_NOTE,
    )
