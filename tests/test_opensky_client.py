import math

import pytest
import requests

from conftest import FakeSession, make_response, make_state
from flightpulse.config import OpenSkyConfig
from flightpulse.errors import (
    UpstreamError,
    UpstreamHTTPError,
    UpstreamPayloadError,
    UpstreamTimeoutError,
)
from flightpulse.ingestion.opensky_client import BoundingBox, OpenSkyClient, StateVector

UK = BoundingBox(lat_min=49.5, lat_max=59.0, lon_min=-8.0, lon_max=2.0)


class TestStateVector:

    def test_parses_full_row(self):
        sv = StateVector.from_array(make_state(icao24='400A1B'))
        assert sv.icao24 == '400a1b'
        assert sv.callsign == 'BAW123'
        assert sv.latitude == 51.47
        assert sv.longitude == -0.45
        assert sv.squawk == '7421'
        assert sv.has_position()

    def test_blank_callsign_becomes_none(self):
        sv = StateVector.from_array(make_state(callsign='        '))
        assert sv.callsign is None

    @pytest.mark.parametrize('row', [
        None,
        'not a row',
        ['400a1b', 'BAW123'],
        make_state(icao24=None),
        make_state(icao24='xyz123'),
        make_state(icao24='400a1b7'),
        make_state(callsign=42),
        make_state(lat='51.4'),
        make_state(velocity=True),
        make_state(baro_altitude=math.nan),
    ])
    def test_rejects_rows_of_the_wrong_shape(self, row):
        assert StateVector.from_array(row) is None

    def test_missing_position_is_parsed_but_not_positioned(self):
        sv = StateVector.from_array(make_state(lat=None))
        assert sv is not None
        assert not sv.has_position()


class TestOpenSkyClient:

    def test_queries_bounding_box_with_timeout(self):
        session = FakeSession(make_response(payload={'time': 1700000000, 'states': [make_state()]}))
        client = OpenSkyClient(timeout=5, session=session)

        api_time, states = client.get_states(bbox=UK)

        assert api_time == 1700000000
        assert len(states) == 1
        call = session.calls[0]
        assert call['url'] == 'https://opensky-network.org/api/states/all'
        assert call['params'] == {'lamin': 49.5, 'lamax': 59.0, 'lomin': -8.0, 'lomax': 2.0}
        assert call['timeout'] == 5
        assert session.headers['User-Agent'] == 'FlightpulseUK/1.0'

    @pytest.mark.parametrize('payload', [{'time': 1700000000}, {'time': 1700000000, 'states': None}])
    def test_missing_states_is_empty_result(self, payload):
        client = OpenSkyClient(session=FakeSession(make_response(payload=payload)))
        _, states = client.get_states(bbox=UK)
        assert states == []

    def test_timeout_raises_upstream_timeout(self):
        client = OpenSkyClient(session=FakeSession(requests.exceptions.Timeout('slow')))
        with pytest.raises(UpstreamTimeoutError):
            client.get_states(bbox=UK)

    def test_connection_error_raises_upstream_error(self):
        client = OpenSkyClient(session=FakeSession(requests.exceptions.ConnectionError('refused')))
        with pytest.raises(UpstreamError):
            client.get_states(bbox=UK)

    def test_server_error_raises_http_error(self):
        client = OpenSkyClient(session=FakeSession(make_response(status_code=503, body='down')))
        with pytest.raises(UpstreamHTTPError) as exc_info:
            client.get_states(bbox=UK)
        assert exc_info.value.status_code == 503

    def test_non_json_body_raises_payload_error(self):
        client = OpenSkyClient(session=FakeSession(make_response(body='<html>busy</html>')))
        with pytest.raises(UpstreamPayloadError):
            client.get_states(bbox=UK)

    @pytest.mark.parametrize('body', ['[1, 2, 3]', '{"states": "nope"}'])
    def test_unexpected_json_shape_raises_payload_error(self, body):
        client = OpenSkyClient(session=FakeSession(make_response(body=body)))
        with pytest.raises(UpstreamPayloadError):
            client.get_states(bbox=UK)

    @pytest.mark.parametrize('api_time', [math.nan, math.inf, 'soon', None])
    def test_unusable_time_falls_back_to_local_clock(self, api_time):
        payload = {'time': api_time, 'states': [make_state()]}
        client = OpenSkyClient(session=FakeSession(make_response(payload=payload)))

        api_time, states = client.get_states(bbox=UK)

        assert api_time > 1700000000
        assert len(states) == 1

    def test_from_config(self):
        opensky_config = OpenSkyConfig(base_url='https://example.test/api/', timeout_seconds=3)

        client = OpenSkyClient.from_config(opensky_config)

        assert client.base_url == 'https://example.test/api'
        assert client.timeout == 3
        assert client.session.headers['User-Agent'] == opensky_config.user_agent
