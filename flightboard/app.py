"""
FlightBoard Flask Application.

Main entry point for the web application. Initializes:
- AeroDataBox client, cache and usage counter
- Flight data service and flight locator
- API routes

Usage:
    python -m flightboard.app

Or with gunicorn:
    gunicorn "flightboard.app:create_app()"
"""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from flightboard.config import config
from flightboard.api import flights_bp, airports_bp, metrics_bp
from flightboard.services import FlightDataService, FlightLocator

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(
    service: Optional[FlightDataService] = None,
    locator: Optional[FlightLocator] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        service: Flight data service to use. Built from configuration
                 when omitted; pass one in for testing.
        locator: Flight locator to use. Built on top of `service` when
                 omitted.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    if service is None:
        if not config.aerodatabox.is_configured:
            logger.warning('AERODATABOX_API_KEY is not set; upstream calls will fail')
        service = FlightDataService.from_config()
    if locator is None:
        locator = FlightLocator.from_config(service)

    app.config['FLIGHT_DATA_SERVICE'] = service
    app.config['FLIGHT_LOCATOR'] = locator

    # Register API blueprints
    app.register_blueprint(flights_bp)
    app.register_blueprint(airports_bp)
    app.register_blueprint(metrics_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = int(os.environ.get('PORT', 5000))
    logger.info(f'Starting FlightBoard on http://localhost:{port}')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
