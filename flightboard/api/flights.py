"""
Flight board API endpoints.

Provides endpoints for:
- GET /api/flights/board/<code>?type=departures|arrivals - Airport board
- GET /api/flights/locate/<flight_number> - Find a flight across hubs
"""

import logging
import time

from flask import Blueprint, current_app, jsonify, request

from flightboard.api.responses import result_response

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api/flights')


@flights_bp.route('/board/<code>', methods=['GET'])
def get_board(code: str):
    """
    Get the departures or arrivals board for an airport.

    Query parameters:
    - type: departures|arrivals (default departures)

    Boards are served from cache for the cache TTL.
    """
    start_time = time.perf_counter()

    board_type = request.args.get('type', 'departures').lower()
    service = current_app.config['FLIGHT_DATA_SERVICE']
    result = service.fetch_board(code, board_type)

    return result_response(result, start_time, airport=code.upper(), type=board_type)


@flights_bp.route('/locate/<flight_number>', methods=['GET'])
def locate_flight(flight_number: str):
    """
    Find a flight by number.

    Walks the departure boards of the configured hub airports in
    order; the first matching flight is returned with its origin and an
    estimated arrival time.
    """
    start_time = time.perf_counter()

    locator = current_app.config['FLIGHT_LOCATOR']
    result = locator.locate(flight_number)

    return result_response(result, start_time)


@flights_bp.route('/airports', methods=['GET'])
def list_locator_airports():
    """List the hub airports searched by the locator, in search order."""
    locator = current_app.config['FLIGHT_LOCATOR']
    return jsonify({
        'airports': [
            {'code': code, 'name': locator.airport_name(code)}
            for code in locator.airports
        ],
    })
