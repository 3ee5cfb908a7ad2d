from unittest import mock

import pytest
from valkey.exceptions import ConnectionError as ValkeyConnectionError

from flightpulse.cache import FlightBatchCache, InMemoryBackend, ValkeyBackend, create_backend
from flightpulse.config import CacheConfig
from flightpulse.errors import CacheError
from flightpulse.reference.fallback import get_fallback_batch


class FakeClock:

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestInMemoryBackend:

    def test_get_before_put_is_miss(self):
        assert InMemoryBackend().get('flights-uk') is None

    def test_entry_expires_after_ttl(self):
        clock = FakeClock()
        backend = InMemoryBackend(clock=clock)
        backend.put('flights-uk', 'payload', ttl_seconds=15)

        clock.now += 14.9
        assert backend.get('flights-uk') == 'payload'

        clock.now += 0.1
        assert backend.get('flights-uk') is None

    def test_later_write_overwrites(self):
        backend = InMemoryBackend()
        backend.put('flights-uk', 'first', 15)
        backend.put('flights-uk', 'second', 15)
        assert backend.get('flights-uk') == 'second'


class TestValkeyBackend:

    def test_put_uses_server_side_expiry(self):
        client = mock.Mock()
        ValkeyBackend('valkey://cache:6379/0', client=client).put('flights-uk', '{}', 15)
        client.set.assert_called_once_with('flights-uk', '{}', ex=15)

    def test_get_returns_stored_string(self):
        client = mock.Mock()
        client.get.return_value = '{"flights": []}'
        assert ValkeyBackend('valkey://cache:6379/0', client=client).get('flights-uk') == '{"flights": []}'

    def test_connection_failure_raises_cache_error(self):
        client = mock.Mock()
        client.get.side_effect = ValkeyConnectionError('refused')
        client.set.side_effect = ValkeyConnectionError('refused')
        backend = ValkeyBackend('valkey://cache:6379/0', client=client)

        with pytest.raises(CacheError):
            backend.get('flights-uk')
        with pytest.raises(CacheError):
            backend.put('flights-uk', '{}', 15)


class TestFlightBatchCache:

    def test_round_trips_batch(self):
        cache = FlightBatchCache(InMemoryBackend())
        batch = get_fallback_batch()

        cache.put('flights-uk', batch, 15)
        restored = cache.get('flights-uk')

        assert restored == batch
        assert cache.stats['hits'] == 1

    def test_unreadable_entry_is_a_miss(self):
        backend = InMemoryBackend()
        backend.put('flights-uk', '{"flights": [{"icao24": "abc123"}]}', 15)
        cache = FlightBatchCache(backend)

        assert cache.get('flights-uk') is None
        assert cache.stats['misses'] == 1


def test_create_backend_selects_configured_backend():
    assert isinstance(create_backend(CacheConfig(backend='memory')), InMemoryBackend)
    assert isinstance(create_backend(CacheConfig(backend='valkey')), ValkeyBackend)
