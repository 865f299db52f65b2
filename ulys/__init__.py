"""Universally unique lexicographically sortable identifiers.

This module provides:
- Ulys: the 128-bit identifier type
- Generator: a class producing strictly increasing Ulyses
- the error classes raised while encoding, decoding and generating
- create_app: a function to get a Flask app serving generation and inspection
"""

import time

from flask import Flask, g, request

from .api.endpoints import register_endpoints
from .config import config
from .constants import ULYS_LEN
from .core import RandomSource, Ulys
from .generator import Generator
from .serialization import UlysJSONProvider
from .utils.errors import (
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    InvalidCharError,
    InvalidLengthError,
    MonotonicError,
    MonotonicOverflowError,
)
from .utils.logging import setup_logging

__all__ = [
    "ULYS_LEN",
    "BufferTooSmallError",
    "DecodeError",
    "EncodeError",
    "Generator",
    "InvalidCharError",
    "InvalidLengthError",
    "MonotonicError",
    "MonotonicOverflowError",
    "RandomSource",
    "Ulys",
    "create_app",
]


def create_app(config_name="development"):
    """Initializes a Ulys Flask app with one shared monotonic Generator."""
    app = Flask(__name__)
    app.json = UlysJSONProvider(app)
    app.config.from_object(config[config_name])

    setup_logging(app.logger, app.config["DEBUG"], app.config["LOG_DIR"])

    register_endpoints(app, Generator())

    @app.before_request
    def _start_timer():
        g.start_time = time.time()

    @app.after_request
    def _log_request(response):
        if app.config["LOG_REQUESTS"]:
            duration = (time.time() - g.start_time) * 1000
            log_message = (
                f"{request.remote_addr} - {request.method} {request.path} "
                f"{request.environ.get('SERVER_PROTOCOL')} "
                f"{response.status_code} - {duration:.2f}ms"
            )
            app.logger.info(log_message)
        return response

    return app
