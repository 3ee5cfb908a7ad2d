from conftest import make_state
from flightpulse.ingestion.normalizer import normalize


def test_normalizes_airborne_state():
    [flight] = normalize([make_state()])

    assert flight.icao24 == '400a1b'
    assert flight.callsign == 'BAW123'
    assert flight.origin_country == 'United Kingdom'
    assert (flight.lat, flight.lng) == (51.47, -0.45)
    assert flight.altitude == 36089
    assert flight.speed == 509
    assert flight.heading == 275
    assert flight.vertical_rate == 0
    assert flight.on_ground is False
    assert flight.squawk == '7421'
    assert flight.airline == 'British Airways'
    assert flight.origin == 'LHR'
    assert flight.destination == 'TBD'
    assert flight.status == 'In Air'


def test_on_ground_state_defaults():
    [flight] = normalize([
        make_state(callsign='ryr882 ', on_ground=True, baro_altitude=None,
                   velocity=None, vertical_rate=None, squawk=None, country=None),
    ])

    assert flight.callsign == 'RYR882'
    assert flight.status == 'On Ground'
    assert flight.altitude == 0
    assert flight.speed == 0
    assert flight.vertical_rate == 0
    assert flight.squawk == 'N/A'
    assert flight.origin_country == 'Unknown'
    assert flight.origin == 'STN'


def test_drops_states_missing_callsign_or_position():
    rows = [
        make_state(callsign=None),
        make_state(callsign='   '),
        make_state(lat=None),
        make_state(lon=None),
        make_state(icao24='4ca7b3', callsign='EZY45AB'),
    ]

    flights = normalize(rows)

    assert [f.callsign for f in flights] == ['EZY45AB']


def test_zero_longitude_is_a_valid_position():
    # The Greenwich meridian crosses the coverage area
    [flight] = normalize([make_state(lon=0.0)])
    assert flight.lng == 0.0


def test_malformed_rows_are_skipped_not_fatal():
    rows = [None, 'garbage', [1, 2, 3], make_state(lat='north'), make_state()]
    flights = normalize(rows)
    assert len(flights) == 1


def test_caps_output_and_keeps_upstream_order():
    rows = [make_state(icao24=f'{i:06x}', callsign=f'TST{i}') for i in range(150)]
    rows.insert(0, make_state(callsign=None))

    flights = normalize(rows)

    assert len(flights) == 100
    assert flights[0].callsign == 'TST0'
    assert flights[-1].callsign == 'TST99'


def test_output_never_exceeds_valid_inputs():
    rows = [make_state(), make_state(lat=None), make_state(icao24='4ca7b3')]
    assert len(normalize(rows)) == 2


def test_heading_wraps_to_compass_range():
    [flight] = normalize([make_state(true_track=359.7)])
    assert flight.heading == 0


def test_heading_rounds_halves_up():
    flights = normalize([make_state(true_track=0.5), make_state(true_track=2.5), make_state(true_track=359.5)])
    assert [f.heading for f in flights] == [1, 3, 0]


def test_unknown_callsign_enrichment():
    [flight] = normalize([make_state(callsign='ZZZ999')], default_hub='MAN')
    assert flight.airline == 'ZZ'
    assert flight.origin == 'MAN'


def test_non_sequence_input_yields_no_flights():
    assert normalize(None) == []
    assert normalize({'states': []}) == []
    assert normalize(42) == []
