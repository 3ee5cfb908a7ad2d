"""
Flightpulse UK Backend Package.

Read-only flight data API built with Flask and requests.

Modules:
    api/         REST endpoints for live flights, flight details, airports and health
    models/      Typed records (Flight, FlightBatch, Airport, FlightDetails)
    ingestion/   OpenSky Network client, state normalization and live-data aggregation
    reference/   Static airport table, fallback flights and flight detail lookups
    cache.py     TTL key/value cache (in-memory or Valkey) for live flight batches
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
