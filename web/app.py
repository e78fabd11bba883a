"""
Flask Web Application for the Comfort Route Planner.

Provides a REST API for:
- Venue search around a walk
- Direct routes through optional waypoints
- Fastest vs. comfort route plans
"""
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import requests
from flask import Flask, jsonify, request
from dotenv import load_dotenv

load_dotenv()

from config import Config
from routing_engines.errors import ProviderError
from services.planner import ComfortRoutePlanner
from utils.geo import to_point

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = Config.SECRET_KEY

# Planner is built on first use so the app can start without provider keys
_planner: ComfortRoutePlanner | None = None


def _get_planner() -> ComfortRoutePlanner:
    global _planner
    if _planner is None:
        _planner = ComfortRoutePlanner(Config)
    return _planner


class BadRequest(Exception):
    pass


def _read_points(body, *names):
    points = []
    for name in names:
        if name not in body:
            raise BadRequest(f"'{name}' is required")
        try:
            points.append(to_point(body[name]))
        except (TypeError, ValueError):
            raise BadRequest(f"'{name}' must be an object with 'lat' and 'lng'")
    return points


def _read_body():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


@app.errorhandler(BadRequest)
def handle_bad_request(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(ProviderError)
@app.errorhandler(requests.exceptions.RequestException)
def handle_provider_error(e):
    logger.error("Provider request failed: %s", e)
    return jsonify({'error': str(e)}), 502


# =============================================================================
# REST API
# =============================================================================

@app.route('/api/health')
def api_health():
    return jsonify({'status': 'ok'})


@app.route('/api/venues', methods=['POST'])
def api_venues():
    """Get venues around the walk from start to end."""
    start, end = _read_points(_read_body(), 'start', 'end')
    venues = _get_planner().places_client.search_venues(start, end)
    return jsonify([venue.to_dict() for venue in venues])


@app.route('/api/route', methods=['POST'])
def api_route():
    """Get route alternatives, optionally through waypoints."""
    body = _read_body()
    start, end = _read_points(body, 'start', 'end')

    raw_waypoints = body.get('waypoints') or []
    if not isinstance(raw_waypoints, list):
        raise BadRequest("'waypoints' must be a list")
    try:
        waypoints = [to_point(w) for w in raw_waypoints]
    except (TypeError, ValueError):
        raise BadRequest("Each waypoint must be an object with 'lat' and 'lng'")

    routes = _get_planner().router.get_routes(start, end, waypoints, profile=Config.ROUTING_PROFILE)
    return jsonify({'routes': [route.to_dict() for route in routes]})


@app.route('/api/comfort-route', methods=['POST'])
def api_comfort_route():
    """Plan the fastest and the comfort route between two points."""
    body = _read_body()
    start, end = _read_points(body, 'start', 'end')

    num_clusters = body.get('num_clusters', Config.NUM_CLUSTERS)
    if not isinstance(num_clusters, int) or isinstance(num_clusters, bool):
        raise BadRequest("'num_clusters' must be an integer")
    if not 1 <= num_clusters <= Config.MAX_CLUSTERS:
        raise BadRequest(f"'num_clusters' must be between 1 and {Config.MAX_CLUSTERS}")

    plan = _get_planner().plan(start, end, num_clusters=num_clusters)
    return jsonify(plan.to_dict())


if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s │ %(name)s │ %(message)s")
    app.run(host='0.0.0.0', port=Config.PORT, debug=os.getenv('FLASK_DEBUG', 'false').lower() == 'true')
