"""
Flightpulse UK Flask Application.

Main entry point for the web application. Initializes:
- Live flight aggregator (OpenSky client + cache)
- API routes
- CORS and JSON error handling

Usage:
    python -m flightpulse.app

Or with gunicorn:
    gunicorn 'flightpulse.app:create_app()'
"""

import logging
import os
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from flightpulse.api import airports_bp, flights_bp
from flightpulse.config import config
from flightpulse.ingestion import FlightAggregator
from flightpulse.models import now_ms

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}

AVAILABLE_ENDPOINTS = [
    '/api/flights',
    '/api/flight?callsign=BA123',
    '/api/airports',
    '/api/airports?search=london',
    '/api/airports?iata=LHR',
    '/api/health',
]


def create_app(aggregator: Optional[FlightAggregator] = None) -> Flask:
    """
    Application factory for Flask.

    Args:
        aggregator: Live flight aggregator to serve /api/flights from.
                    Built from configuration if None; pass a stub for testing.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Permissive CORS: read-only public API
    CORS(
        app,
        origins='*',
        send_wildcard=True,
        methods=['GET', 'OPTIONS'],
        allow_headers=['Content-Type'],
    )

    app.config['FLIGHT_AGGREGATOR'] = aggregator or FlightAggregator.from_config()

    # Register API blueprints
    app.register_blueprint(flights_bp)
    app.register_blueprint(airports_bp)

    # -------------------------------------------------------------------------
    # Preflight
    # -------------------------------------------------------------------------

    @app.before_request
    def handle_options():
        """Answer any OPTIONS request with an empty JSON-typed 200."""
        if request.method == 'OPTIONS':
            return app.response_class(status=200, mimetype='application/json')
        return None

    @app.after_request
    def add_cors_headers(response):
        """Send the full CORS header set on every response, not only on preflights."""
        for header, value in CORS_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.route('/api/health')
    def health():
        """Simple health check endpoint."""
        return jsonify({
            'status': 'ok',
            'timestamp': now_ms(),
            'version': config.version,
        })

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({
            'error': 'Not found',
            'availableEndpoints': AVAILABLE_ENDPOINTS,
        }), 404

    @app.errorhandler(Exception)
    def unexpected_error(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.description}), e.code

        logger.exception(f'Server error: {e}')
        return jsonify({
            'error': str(e),
            'timestamp': now_ms(),
        }), 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    # Get port from environment or default
    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting Flightpulse UK on http://localhost:{port}')
    logger.info(f'Live flights: http://localhost:{port}/api/flights')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
