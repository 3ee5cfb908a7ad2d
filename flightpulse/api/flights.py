"""
Flight data API endpoints.

Provides endpoints for:
- GET /api/flights - Live flights over the coverage area (always 200)
- GET /api/flight?callsign=BA123 - Details for a single known flight
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from flightpulse.errors import InvalidRequestError
from flightpulse.models import now_ms
from flightpulse.reference.flight_details import get_flight_details

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api')

FLIGHTS_CACHE_CONTROL = 'public, max-age=10'
FLIGHT_CACHE_CONTROL = 'public, max-age=30'


@flights_bp.errorhandler(InvalidRequestError)
def invalid_request(e: InvalidRequestError):
    body = {
        'success': False,
        'error': str(e),
    }
    if e.example:
        body['example'] = e.example
    return jsonify(body), 400


@flights_bp.route('/flights', methods=['GET'])
def list_flights():
    """
    List live flights.

    Served from cache when fresh, otherwise fetched from OpenSky.
    Falls back to sample flights when OpenSky is unavailable, so this
    endpoint never fails; 'source' tells the caller which data it got.
    """
    aggregator = current_app.config['FLIGHT_AGGREGATOR']
    batch = aggregator.get_live_flights()

    body = {
        'success': True,
        'flights': [f.to_dict() for f in batch.flights],
        'timestamp': batch.timestamp,
        'source': batch.source,
        'count': batch.count,
    }
    if batch.from_cache:
        body['fromCache'] = True
    if batch.note:
        body['note'] = batch.note

    response = jsonify(body)
    response.headers['Cache-Control'] = FLIGHTS_CACHE_CONTROL
    return response


@flights_bp.route('/flight', methods=['GET'])
def get_flight():
    """Get detailed information for a single flight by callsign."""
    callsign = (request.args.get('callsign') or '').strip()
    if not callsign:
        raise InvalidRequestError(
            'Callsign parameter is required',
            example='/api/flight?callsign=BA123',
        )

    details = get_flight_details(callsign)
    if details is None:
        logger.debug(f'No details for callsign {callsign.upper()}')
        return jsonify({
            'success': False,
            'error': 'Flight not found',
            'callsign': callsign.upper(),
        }), 404

    response = jsonify({
        'success': True,
        'flight': details.to_dict(),
        'timestamp': now_ms(),
    })
    response.headers['Cache-Control'] = FLIGHT_CACHE_CONTROL
    return response
