"""
API module for Flightpulse UK.

Provides REST endpoints for:
- Live flights and single-flight details
- UK airport reference data
"""

from flightpulse.api.airports import airports_bp
from flightpulse.api.flights import flights_bp

__all__ = ['airports_bp', 'flights_bp']
