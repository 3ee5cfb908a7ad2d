"""
Live flight aggregator - orchestrates cache, OpenSky and fallback data.

Pipeline stages per call:
1. Cache: return a fresh cached batch if one exists
2. Fetch: one bounded-timeout OpenSky query for the coverage box
3. Normalize: raw state rows to Flight records
4. Store: write the batch back to the cache (best-effort, background)
5. Fallback: on any failure in 2-4, return the fixed sample batch

get_live_flights() never raises. Availability outranks freshness: the
caller always gets a well-formed FlightBatch and can tell live from
fallback data by its source.
"""

import logging
import threading
from typing import Optional

from flightpulse.cache import FlightBatchCache, create_backend
from flightpulse.config import AppConfig, config
from flightpulse.errors import CacheError, UpstreamError
from flightpulse.ingestion.normalizer import normalize
from flightpulse.ingestion.opensky_client import BoundingBox, OpenSkyClient
from flightpulse.models import SOURCE_LIVE, FlightBatch, now_ms
from flightpulse.reference.fallback import get_fallback_batch

logger = logging.getLogger(__name__)


class FlightAggregator:
    """
    Produces the live flight batch served by /api/flights.

    Holds no mutable state of its own beyond counters; all sharing
    between concurrent requests goes through the cache.
    """

    def __init__(
        self,
        client: OpenSkyClient,
        cache: Optional[FlightBatchCache],
        bbox: BoundingBox,
        cache_key: str = 'flights-uk',
        ttl_seconds: int = 15,
        max_flights: int = 100,
        default_hub: str = 'LHR',
        background_writes: bool = True,
    ):
        """
        Initialize the aggregator.

        Args:
            client: OpenSky API client
            cache: Batch cache, or None to always fetch
            bbox: Coverage region for upstream queries
            cache_key: Cache key for the live batch
            ttl_seconds: Cache entry lifetime
            max_flights: Upper bound on flights per batch
            default_hub: Origin used when a callsign has no known hub
            background_writes: Write the cache on a daemon thread instead of inline
        """
        self.client = client
        self.cache = cache
        self.bbox = bbox
        self.cache_key = cache_key
        self.ttl_seconds = ttl_seconds
        self.max_flights = max_flights
        self.default_hub = default_hub
        self.background_writes = background_writes

        self._fetch_count = 0
        self._fallback_count = 0
        self._counter_lock = threading.Lock()

    @classmethod
    def from_config(cls, app_config: Optional[AppConfig] = None) -> 'FlightAggregator':
        """Create aggregator, client and cache from application configuration."""
        app_config = app_config or config
        return cls(
            client=OpenSkyClient.from_config(app_config.opensky),
            cache=FlightBatchCache(create_backend(app_config.cache)),
            bbox=BoundingBox.from_bounds(app_config.opensky.bbox),
            cache_key=app_config.cache.key,
            ttl_seconds=app_config.cache.ttl_seconds,
            max_flights=app_config.flights.max_flights,
            default_hub=app_config.flights.default_hub,
            background_writes=app_config.cache.background_writes,
        )

    def get_live_flights(self) -> FlightBatch:
        """Return the current flight batch: cached, live, or fallback."""
        cached = self._read_cache()
        if cached is not None:
            logger.debug(f'Serving {cached.count} flights from cache')
            return cached.as_cached()

        try:
            batch = self._fetch_live()
        except UpstreamError as e:
            logger.warning(f'OpenSky unavailable, serving fallback flights: {e}')
            return self._fallback()
        except Exception:
            logger.exception('Unexpected error building live flights, serving fallback')
            return self._fallback()

        self._store(batch)
        return batch

    def _read_cache(self) -> Optional[FlightBatch]:
        if self.cache is None:
            return None
        try:
            return self.cache.get(self.cache_key)
        except CacheError as e:
            logger.warning(f'Cache read error: {e}')
        except Exception:
            logger.exception('Unexpected cache read error')
        return None

    def _fetch_live(self) -> FlightBatch:
        """Stages 2-3: query OpenSky and normalize. Raises UpstreamError on failure."""
        with self._counter_lock:
            self._fetch_count += 1

        _, states = self.client.get_states(bbox=self.bbox)
        flights = normalize(states, limit=self.max_flights, default_hub=self.default_hub)

        logger.info(f'Built live batch of {len(flights)} flights from {len(states)} state vectors')

        return FlightBatch(
            flights=tuple(flights),
            timestamp=now_ms(),
            source=SOURCE_LIVE,
        )

    def _store(self, batch: FlightBatch) -> None:
        """Stage 4: write the batch back to the cache without affecting the response."""
        if self.cache is None:
            return

        if self.background_writes:
            thread = threading.Thread(
                target=self._write_cache,
                args=(batch,),
                name='flight-cache-write',
                daemon=True,
            )
            thread.start()
        else:
            self._write_cache(batch)

    def _write_cache(self, batch: FlightBatch) -> None:
        try:
            self.cache.put(self.cache_key, batch, self.ttl_seconds)
        except CacheError as e:
            logger.warning(f'Cache write error: {e}')
        except Exception:
            logger.exception('Unexpected cache write error')

    def _fallback(self) -> FlightBatch:
        with self._counter_lock:
            self._fallback_count += 1
        return get_fallback_batch()

    @property
    def stats(self) -> dict:
        """Get aggregator statistics."""
        with self._counter_lock:
            stats = {
                'fetch_count': self._fetch_count,
                'fallback_count': self._fallback_count,
            }
        if self.cache is not None:
            stats['cache'] = self.cache.stats
        return stats
