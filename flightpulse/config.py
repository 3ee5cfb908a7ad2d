"""
Configuration management for Flightpulse UK.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from flightpulse import __version__

load_dotenv()

# lamin, lamax, lomin, lomax
UK_BOUNDS: Tuple[float, float, float, float] = (49.5, 59.0, -8.0, 2.0)


def _parse_bounds(value: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse 'lamin,lamax,lomin,lomax' string into tuple, or None if empty/invalid."""
    if not value:
        return None
    try:
        lamin, lamax, lomin, lomax = (float(part.strip()) for part in value.split(','))
    except (ValueError, AttributeError):
        return None
    if lamin >= lamax or lomin >= lomax:
        return None
    return (lamin, lamax, lomin, lomax)


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class OpenSkyConfig:
    """OpenSky API configuration."""
    base_url: str = os.getenv('OPENSKY_BASE_URL', 'https://opensky-network.org/api')
    timeout_seconds: float = float(os.getenv('OPENSKY_TIMEOUT_SECONDS', '5'))
    user_agent: str = f'FlightpulseUK/{__version__}'
    bbox: Tuple[float, float, float, float] = field(
        default_factory=lambda: _parse_bounds(os.getenv('OPENSKY_BBOX', '')) or UK_BOUNDS
    )


@dataclass(frozen=True)
class CacheConfig:
    """Live flight cache settings."""
    backend: str = os.getenv('CACHE_BACKEND', 'memory').lower()
    valkey_url: str = os.getenv('VALKEY_URL', 'valkey://localhost:6379/0')
    key: str = 'flights-uk'
    ttl_seconds: int = int(os.getenv('CACHE_TTL_SECONDS', '15'))
    # Write cache entries off the request thread
    background_writes: bool = _parse_bool(os.getenv('CACHE_BACKGROUND_WRITES'), True)

    @property
    def uses_valkey(self) -> bool:
        return self.backend == 'valkey'


@dataclass(frozen=True)
class FlightsConfig:
    """Normalization settings for live flights."""
    max_flights: int = 100
    default_hub: str = os.getenv('DEFAULT_HUB', 'LHR').upper()


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    opensky: OpenSkyConfig
    cache: CacheConfig
    flights: FlightsConfig

    # Flask settings
    debug: bool
    version: str


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        opensky=OpenSkyConfig(),
        cache=CacheConfig(),
        flights=FlightsConfig(),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
        version=__version__,
    )


# Singleton instance
config = load_config()
