"""The main endpoints file.

This module provides:
- API: a class of all endpoints
- register_endpoints: a function that registers endpoints onto an app and assigns a generator
"""
import logging
from http import HTTPStatus

from flask import Response, abort, jsonify, request

from ..bulk import generate_monotonic, generate_random
from ..core import Ulys
from ..generator import Generator
from ..serialization import describe
from ..utils.errors import DecodeError
from . import make_api_bp


class API:
    """The API class to store endpoint methods + the shared generator."""
    def __init__(self, generator: Generator, max_count: int = 1000, sleep_ms: int = 1):
        """Populates variables that are used by endpoints.

        Args:
            generator (Generator): The generator shared by monotonic requests
            max_count (int): The most Ulyses a single request may ask for
            sleep_ms (int): How long to wait after a monotonic overflow
        """
        self.generator = generator
        self.max_count = max_count
        self.sleep_ms = sleep_ms
        self.logger = logging.getLogger(__name__)

    def generate(self):
        """Generates a batch of Ulyses.

        Takes an optional ``count`` (default 1) and ``monotonic`` flag from request args.
        """
        count = request.args.get("count", "1")
        monotonic = request.args.get("monotonic", "false").lower() == "true"
        try:
            count = int(count)
        except ValueError:
            abort(HTTPStatus.BAD_REQUEST, description="Count must be an integer")
        if not 1 <= count <= self.max_count:
            abort(
                HTTPStatus.BAD_REQUEST,
                description=f"Count must be between 1 and {self.max_count}",
            )
        if monotonic:
            ulyses = list(generate_monotonic(count, self.generator, self.sleep_ms))
        else:
            ulyses = list(generate_random(count))
        self.logger.debug("Generated %d ulyses (monotonic=%s)", count, monotonic)
        return jsonify({"ulyses": ulyses})

    def inspect(self, text):
        """Breaks down the Ulys under ``text`` into its components."""
        try:
            ulys = Ulys.from_string(text)
        except DecodeError as e:
            abort(HTTPStatus.BAD_REQUEST, description=f"{text} is not a valid ULYS: {e}")
        return jsonify(describe(ulys))

    @staticmethod
    def hello():
        """A root plug to test connections and inform users."""
        return Response(
            """
        <h1>Hello!</h1>
        <p>GET /api/ulys to generate, GET /api/ulys/&lt;ulys&gt; to inspect.</p>
        """,
            200,
        )


def register_endpoints(app, generator):
    """Binds endpoints to a Flask app.

    Args:
        app (Flask): The app to bind endpoints to
        generator (Generator): The generator shared by monotonic requests
    """
    api = API(generator, app.config["MAX_COUNT"], app.config["OVERFLOW_SLEEP_MS"])
    api_bp = make_api_bp()
    api_bp.add_url_rule("/ulys", view_func=api.generate, methods=["GET"])
    api_bp.add_url_rule("/ulys/<text>", view_func=api.inspect, methods=["GET"])
    api_bp.add_url_rule("/", view_func=api.hello, methods=["GET"])
    app.register_blueprint(api_bp, url_prefix="/api")
