"""
OpenSky Network API client.

Handles communication with the OpenSky REST API, including:
- Bounding box queries for geographic filtering
- A fixed request timeout (no retries)
- Mapping transport/HTTP/payload failures onto UpstreamError types
- Validated parsing of raw state vector rows

OpenSky state vector format (array indices):
0: icao24          - ICAO24 hex address
1: callsign        - Callsign (8 chars max)
2: origin_country  - Country of registration
3: time_position   - Unix timestamp of last position update
4: last_contact    - Unix timestamp of last message
5: longitude       - WGS84 longitude
6: latitude        - WGS84 latitude
7: baro_altitude   - Barometric altitude (meters)
8: on_ground       - Boolean
9: velocity        - Ground speed (m/s)
10: true_track     - Track angle (degrees, 0=north)
11: vertical_rate  - Vertical rate (m/s)
12: sensors        - Sensor IDs (array)
13: geo_altitude   - Geometric altitude (meters)
14: squawk         - Transponder code
15: spi            - Special position indicator
16: position_source - 0=ADS-B, 1=ASTERIX, 2=MLAT, 3=FLARM
"""

import logging
import math
import re
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import requests

from flightpulse.config import OpenSkyConfig, config
from flightpulse.errors import (
    UpstreamError,
    UpstreamHTTPError,
    UpstreamPayloadError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

STATE_VECTOR_FIELDS = 17

_ICAO24_RE = re.compile(r'^[0-9a-f]{6}$')


@dataclass(frozen=True)
class BoundingBox:
    """
    Geographic bounding box for API queries.

    OpenSky expects: lamin, lomin, lamax, lomax
    (latitude min, longitude min, latitude max, longitude max)
    """
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    @classmethod
    def from_bounds(cls, bounds: Tuple[float, float, float, float]) -> 'BoundingBox':
        """Create from a (lamin, lamax, lomin, lomax) tuple."""
        lat_min, lat_max, lon_min, lon_max = bounds
        return cls(lat_min=lat_min, lat_max=lat_max, lon_min=lon_min, lon_max=lon_max)

    def to_params(self) -> dict:
        """Convert to OpenSky API query parameters."""
        return {
            'lamin': self.lat_min,
            'lamax': self.lat_max,
            'lomin': self.lon_min,
            'lomax': self.lon_max,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional_number(value: Any) -> bool:
    # NaN/Infinity are valid JSON for Python's parser but not valid telemetry
    return value is None or (_is_number(value) and math.isfinite(value))


def _optional_str(value: Any) -> bool:
    return value is None or isinstance(value, str)


@dataclass(frozen=True)
class StateVector:
    """
    Parsed state vector from OpenSky API.

    Normalizes the raw array format into a typed dataclass.
    All values may be None if not reported by the aircraft.
    """
    icao24: str
    callsign: Optional[str]
    origin_country: Optional[str]
    time_position: Optional[int]
    last_contact: Optional[int]
    longitude: Optional[float]
    latitude: Optional[float]
    baro_altitude: Optional[float]
    on_ground: bool
    velocity: Optional[float]
    true_track: Optional[float]
    vertical_rate: Optional[float]
    geo_altitude: Optional[float]
    squawk: Optional[str]
    spi: bool
    position_source: Optional[int]

    @classmethod
    def from_array(cls, arr: Any) -> Optional['StateVector']:
        """
        Parse OpenSky state vector array into StateVector object.

        Returns None if the row does not have the expected tuple shape:
        too short, a bad icao24, or a field of the wrong type.
        """
        if not isinstance(arr, (list, tuple)) or len(arr) < STATE_VECTOR_FIELDS:
            return None

        icao24 = arr[0]
        if not isinstance(icao24, str):
            return None
        icao24 = icao24.strip().lower()
        if not _ICAO24_RE.match(icao24):
            return None

        if not (_optional_str(arr[1]) and _optional_str(arr[2]) and _optional_str(arr[14])):
            return None

        for index in (3, 4, 5, 6, 7, 9, 10, 11, 13):
            if not _optional_number(arr[index]):
                return None

        position_source = arr[16]
        if position_source is not None and not (
            isinstance(position_source, int) and not isinstance(position_source, bool)
        ):
            return None

        # Normalize callsign (strip whitespace, handle None)
        callsign = arr[1]
        if callsign:
            callsign = callsign.strip() or None

        return cls(
            icao24=icao24,
            callsign=callsign,
            origin_country=arr[2],
            time_position=arr[3],
            last_contact=arr[4],
            longitude=arr[5],
            latitude=arr[6],
            baro_altitude=arr[7],
            on_ground=bool(arr[8]),
            velocity=arr[9],
            true_track=arr[10],
            vertical_rate=arr[11],
            geo_altitude=arr[13],
            squawk=arr[14] or None,
            spi=bool(arr[15]),
            position_source=position_source,
        )

    def has_position(self) -> bool:
        """Check if this state has a valid, finite position."""
        return (
            self.latitude is not None
            and self.longitude is not None
            and math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
        )


class OpenSkyClient:
    """
    Client for OpenSky Network API.

    Handles:
    - GET requests to /states/all endpoint
    - Bounding box filtering
    - One bounded-timeout attempt per call
    """

    def __init__(
        self,
        base_url: str = 'https://opensky-network.org/api',
        timeout: float = 5.0,
        user_agent: str = 'FlightpulseUK/1.0',
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': user_agent})

    @classmethod
    def from_config(cls, opensky_config: Optional[OpenSkyConfig] = None) -> 'OpenSkyClient':
        """Create client from application configuration."""
        opensky_config = opensky_config or config.opensky
        return cls(
            base_url=opensky_config.base_url,
            timeout=opensky_config.timeout_seconds,
            user_agent=opensky_config.user_agent,
        )

    def get_states(self, bbox: Optional[BoundingBox] = None) -> Tuple[int, List[Any]]:
        """
        Fetch current raw state vectors from OpenSky.

        Args:
            bbox: Optional bounding box to filter by geography

        Returns:
            Tuple of (api_timestamp, list of raw state rows)
            A missing or null 'states' field yields an empty list.

        Raises:
            UpstreamTimeoutError, UpstreamHTTPError, UpstreamPayloadError,
            or UpstreamError for other transport failures.
        """
        url = f'{self.base_url}/states/all'
        params = bbox.to_params() if bbox else {}

        logger.debug(f'Fetching states: {url} params={params}')

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error('OpenSky API timeout')
            raise UpstreamTimeoutError(f'OpenSky request timed out after {self.timeout}s') from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            if status_code == 429:
                logger.warning('OpenSky rate limit exceeded')
            else:
                logger.error(f'OpenSky API error: {status_code}')
            raise UpstreamHTTPError(status_code) from e
        except requests.exceptions.RequestException as e:
            logger.error(f'OpenSky request failed: {e}')
            raise UpstreamError(f'OpenSky request failed: {e}') from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error('OpenSky returned a non-JSON body')
            raise UpstreamPayloadError('OpenSky returned a non-JSON body') from e

        return self._parse_payload(data)

    @staticmethod
    def _parse_payload(data: Any) -> Tuple[int, List[Any]]:
        if not isinstance(data, dict):
            raise UpstreamPayloadError(f'Expected a JSON object, got {type(data).__name__}')

        api_time = data.get('time')
        # OpenSky sends epoch seconds; anything unusable falls back to local time
        if api_time is None or not _optional_number(api_time):
            api_time = int(time.time())

        states_raw = data.get('states')
        if states_raw is None:
            states_raw = []
        elif not isinstance(states_raw, Sequence) or isinstance(states_raw, str):
            raise UpstreamPayloadError('OpenSky "states" field is not an array')

        logger.info(f'Received {len(states_raw)} state vectors from OpenSky')

        return int(api_time), list(states_raw)
