import math

from flightpulse.reference.airports import UK_AIRPORTS, find_by_iata, find_by_icao, search_airports
from flightpulse.reference.fallback import FALLBACK_FLIGHTS, get_fallback_batch
from flightpulse.reference.flight_details import FLIGHT_DETAILS, get_flight_details


def test_airport_codes_are_unique():
    assert len({a.iata for a in UK_AIRPORTS}) == len(UK_AIRPORTS)
    assert len({a.icao for a in UK_AIRPORTS}) == len(UK_AIRPORTS)


def test_airport_lookups():
    assert find_by_iata('LHR').icao == 'EGLL'
    assert find_by_icao('egkk').iata == 'LGW'
    assert find_by_iata('ZZZ') is None


def test_search_is_case_insensitive_substring():
    expected = [
        a for a in UK_AIRPORTS
        if any('belfast' in s.lower() for s in (a.name, a.city, a.iata, a.icao))
    ]
    assert search_airports('BELFAST') == expected
    assert [a.iata for a in expected] == ['BFS', 'BHD']


def test_blank_search_returns_everything():
    assert search_airports('') == list(UK_AIRPORTS)
    assert search_airports(None) == list(UK_AIRPORTS)


def test_fallback_flights_satisfy_flight_invariants():
    for flight in FALLBACK_FLIGHTS:
        assert flight.callsign
        assert math.isfinite(flight.lat) and math.isfinite(flight.lng)
        assert len(flight.icao24) == 6
        int(flight.icao24, 16)
        assert 0 <= flight.heading < 360


def test_fallback_batch():
    batch = get_fallback_batch()
    assert batch.source == 'fallback'
    assert batch.count == 6
    assert get_fallback_batch('custom note').note == 'custom note'


def test_every_detail_record_has_a_fallback_flight():
    fallback_callsigns = {f.callsign for f in FALLBACK_FLIGHTS}
    assert set(FLIGHT_DETAILS) <= fallback_callsigns
    for callsign, details in FLIGHT_DETAILS.items():
        assert details.callsign == callsign


def test_detail_lookup():
    assert get_flight_details(' ba458 ').destination.iata == 'CDG'
    assert get_flight_details('ZZ000') is None
