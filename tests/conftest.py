"""Shared fixtures: raw OpenSky rows, a scripted HTTP session and a test app."""

import json

import pytest
import requests

from flightpulse.app import create_app
from flightpulse.cache import FlightBatchCache, InMemoryBackend
from flightpulse.config import UK_BOUNDS
from flightpulse.ingestion import BoundingBox, FlightAggregator, OpenSkyClient


def make_state(
    icao24='400a1b',
    callsign='BAW123  ',
    country='United Kingdom',
    lon=-0.45,
    lat=51.47,
    baro_altitude=11000.0,
    on_ground=False,
    velocity=262.0,
    true_track=275.4,
    vertical_rate=0.0,
    squawk='7421',
):
    """A 17-field OpenSky state vector row."""
    return [
        icao24, callsign, country, 1700000000, 1700000001,
        lon, lat, baro_altitude, on_ground, velocity,
        true_track, vertical_rate, None, baro_altitude + 50 if baro_altitude else None,
        squawk, False, 0,
    ]


def make_response(status_code=200, payload=None, body=None):
    """A real requests.Response with a canned body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = 'https://opensky-network.org/api/states/all'
    if body is None:
        body = json.dumps(payload if payload is not None else {'time': 1700000000, 'states': []})
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    return response


class FakeSession:
    """
    Stand-in for requests.Session.

    Each get() pops the next scripted outcome: a Response to return or
    an exception to raise. The last outcome repeats.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [make_response()]
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'timeout': timeout})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def states_payload():
    return {
        'time': 1700000000,
        'states': [
            make_state(),
            make_state(icao24='4ca7b3', callsign='EZY45AB', lon=0.0, lat=51.15, on_ground=True,
                       baro_altitude=None, velocity=5.0, squawk=None),
            make_state(icao24='3c6444', callsign=None),
        ],
    }


def build_aggregator(session, cache=None, **kwargs):
    client = OpenSkyClient(session=session)
    kwargs.setdefault('background_writes', False)
    return FlightAggregator(
        client=client,
        cache=cache,
        bbox=BoundingBox.from_bounds(UK_BOUNDS),
        **kwargs,
    )


@pytest.fixture
def memory_cache():
    return FlightBatchCache(InMemoryBackend())


@pytest.fixture
def live_session(states_payload):
    return FakeSession(make_response(payload=states_payload))


@pytest.fixture
def app(live_session, memory_cache):
    aggregator = build_aggregator(live_session, cache=memory_cache)
    app = create_app(aggregator=aggregator)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
