"""
Airport and route API endpoints.

Provides endpoints for:
- GET /api/airports/search?q=<query> - Free-text airport search
- GET /api/airports/route?origin=<code>&destination=<code> - Direct route estimate
"""

import logging
import time

from flask import Blueprint, current_app, request

from flightboard.api.responses import result_response

logger = logging.getLogger(__name__)

airports_bp = Blueprint('airports', __name__, url_prefix='/api/airports')


@airports_bp.route('/search', methods=['GET'])
def search_airports():
    """Search airports by name, city or code."""
    start_time = time.perf_counter()

    query = request.args.get('q', '')
    service = current_app.config['FLIGHT_DATA_SERVICE']

    return result_response(service.search_airports(query), start_time, query=query)


@airports_bp.route('/route', methods=['GET'])
def estimate_route():
    """
    Estimate a direct route between two airports.

    Query parameters:
    - origin: IATA code
    - destination: IATA code
    """
    start_time = time.perf_counter()

    origin = request.args.get('origin', '')
    destination = request.args.get('destination', '')
    service = current_app.config['FLIGHT_DATA_SERVICE']

    return result_response(service.estimate_route(origin, destination), start_time)
