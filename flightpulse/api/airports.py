"""
Airport reference API endpoints.

GET /api/airports supports one of (in order of precedence):
- iata=LHR     single airport by IATA code
- icao=EGLL    single airport by ICAO code
- search=text  airports whose name, city, IATA or ICAO contains text
- nothing      the full table
"""

from flask import Blueprint, jsonify, request

from flightpulse.models import now_ms
from flightpulse.reference.airports import find_by_iata, find_by_icao, search_airports

airports_bp = Blueprint('airports', __name__, url_prefix='/api/airports')

# Static data, cache for 24 hours
AIRPORTS_CACHE_CONTROL = 'public, max-age=86400'


def _single_airport(field: str, code: str, airport):
    if airport is None:
        return jsonify({
            'success': False,
            'error': 'Airport not found',
            field: code.upper(),
        }), 404

    response = jsonify({
        'success': True,
        'airport': airport.to_dict(),
        'timestamp': now_ms(),
    })
    response.headers['Cache-Control'] = AIRPORTS_CACHE_CONTROL
    return response


@airports_bp.route('', methods=['GET'])
def list_airports():
    """Look up or search UK airports."""
    iata = (request.args.get('iata') or '').strip()
    icao = (request.args.get('icao') or '').strip()
    search = (request.args.get('search') or '').strip()

    if iata:
        return _single_airport('iata', iata, find_by_iata(iata))

    if icao:
        return _single_airport('icao', icao, find_by_icao(icao))

    airports = search_airports(search)

    response = jsonify({
        'success': True,
        'airports': [a.to_dict() for a in airports],
        'count': len(airports),
        'timestamp': now_ms(),
    })
    response.headers['Cache-Control'] = AIRPORTS_CACHE_CONTROL
    return response
