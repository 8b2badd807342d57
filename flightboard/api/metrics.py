"""
Usage and cache API endpoints.

Provides endpoints for:
- GET /api/metrics/usage - API call count against the soft limit, cache stats
- POST /api/metrics/cache/clear - Drop all cached boards and searches
"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

logger = logging.getLogger(__name__)

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api/metrics')


@metrics_bp.route('/usage', methods=['GET'])
def get_usage():
    """
    Get API usage and cache statistics.

    The usage limit is informational; calls are never blocked.
    """
    service = current_app.config['FLIGHT_DATA_SERVICE']
    stats = service.stats

    return jsonify({
        **stats['usage'],
        'cache': stats['cache'],
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@metrics_bp.route('/cache/clear', methods=['POST'])
def clear_cache():
    """Clear both cache namespaces."""
    service = current_app.config['FLIGHT_DATA_SERVICE']
    service.clear_cache()

    logger.info('Cache cleared via API')
    return jsonify({'cleared': True, 'cache': service.cache.stats})
