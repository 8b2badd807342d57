"""Shared JSON response helpers for the API blueprints."""

import time

from flask import jsonify

from flightboard.models import Result


def result_response(result: Result, start_time: float, **extra):
    """
    Render a service Result as a JSON response.

    Validation failures map to 400; every other outcome is a 200 with
    `success` telling the caller whether data is present.
    """
    body = result.to_dict()
    body.update(extra)
    body['query_time_ms'] = round((time.perf_counter() - start_time) * 1000, 2)

    status = 400 if result.error_kind == 'validation' else 200
    return jsonify(body), status
