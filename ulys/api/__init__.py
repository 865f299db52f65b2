"""HTTP endpoints for generating and inspecting Ulyses."""

from flask import Blueprint


def make_api_bp():
    """A fresh blueprint per app, since rules can't be added once one is registered."""
    return Blueprint("api", __name__)
