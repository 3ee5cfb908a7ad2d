"""
TTL key/value cache for live flight batches.

The aggregator checks the cache before calling OpenSky and writes the
normalized batch back afterwards, so bursts of requests from many
frontend clients cost at most one upstream call per TTL window.

Two backends share the same get/put contract:
- InMemoryBackend: thread-safe dict, good for a single process
- ValkeyBackend: external Valkey/Redis server shared by all workers

Expired entries read as absent; callers never see the difference
between "never written" and "expired". No locking across processes:
concurrent writers overwrite each other with equivalent data.
"""

import json
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

import valkey
from valkey.exceptions import ValkeyError

from flightpulse.config import CacheConfig, config
from flightpulse.errors import CacheError
from flightpulse.models import FlightBatch

logger = logging.getLogger(__name__)


class CacheBackend:
    """Minimal key/value contract with per-entry TTL."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        raise NotImplementedError


class InMemoryBackend(CacheBackend):
    """
    Thread-safe in-process backend.

    Entries carry an absolute expiry; reads past it behave as misses
    and drop the stale entry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                # Expired
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl_seconds)


class ValkeyBackend(CacheBackend):
    """Backend on a Valkey (or Redis) server; TTL enforced server-side via SET EX."""

    def __init__(self, url: str, client: Optional[valkey.Valkey] = None):
        self.url = url
        self.client = client or valkey.Valkey.from_url(
            url,
            decode_responses=True,
            socket_timeout=2,
            socket_connect_timeout=2,
        )

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except ValkeyError as e:
            raise CacheError(f'Valkey GET {key} failed: {e}') from e

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            self.client.set(key, value, ex=ttl_seconds)
        except ValkeyError as e:
            raise CacheError(f'Valkey SET {key} failed: {e}') from e


class FlightBatchCache:
    """
    FlightBatch cache on top of a CacheBackend.

    Batches are stored as their JSON API form. Backend failures surface
    as CacheError; a corrupt cached payload is logged and read as a miss.
    """

    def __init__(self, backend: CacheBackend):
        self.backend = backend

        # Statistics
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[FlightBatch]:
        """
        Get cached batch by key.

        Returns None if never written, expired, or unreadable.
        """
        raw = self.backend.get(key)

        batch = None
        if raw is not None:
            try:
                batch = FlightBatch.from_dict(json.loads(raw))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f'Discarding unreadable cache entry {key!r}: {e}')

        with self._lock:
            if batch is None:
                self._misses += 1
            else:
                self._hits += 1

        return batch

    def put(self, key: str, batch: FlightBatch, ttl_seconds: int) -> None:
        """Store batch under key for ttl_seconds. Raises CacheError on backend failure."""
        self.backend.put(key, json.dumps(batch.to_dict()), ttl_seconds)
        logger.debug(f'Cached {batch.count} flights under {key!r} for {ttl_seconds}s')

    @property
    def stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            total = self._hits + self._misses
            return {
                'backend': type(self.backend).__name__,
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': self._hits / total if total > 0 else 0,
            }


def create_backend(cache_config: Optional[CacheConfig] = None) -> CacheBackend:
    """Build the configured backend ('memory' or 'valkey')."""
    cache_config = cache_config or config.cache

    if cache_config.uses_valkey:
        logger.info(f'Using Valkey cache backend at {cache_config.valkey_url}')
        return ValkeyBackend(cache_config.valkey_url)

    if cache_config.backend != 'memory':
        logger.warning(f'Unknown CACHE_BACKEND {cache_config.backend!r}, using in-memory cache')

    return InMemoryBackend()
