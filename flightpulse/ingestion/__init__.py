"""
Live data ingestion for Flightpulse UK.

Handles polling the OpenSky API, normalizing state vectors into Flight
records, and serving them through a short-lived cache with a static
fallback.
"""

from flightpulse.ingestion.aggregator import FlightAggregator
from flightpulse.ingestion.normalizer import normalize
from flightpulse.ingestion.opensky_client import BoundingBox, OpenSkyClient, StateVector

__all__ = ['FlightAggregator', 'normalize', 'BoundingBox', 'OpenSkyClient', 'StateVector']
