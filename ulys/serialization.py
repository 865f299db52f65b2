"""Glue for turning Ulyses into JSON-friendly values and back.

This module provides:
- to_json: a function that renders a Ulys as a string, an integer or a UUID string
- from_json: a function that reads a Ulys back from any of those
- UlysJSONProvider: a Flask JSON provider that knows how to dump Ulyses
- describe: a function that breaks a Ulys down into its components

By default Ulyses travel as their canonical 26-character string.
"""

from uuid import UUID

from flask.json.provider import DefaultJSONProvider

from .core import Ulys

STRING = "string"
INT = "int"
UUID_STRING = "uuid"
MODES = (STRING, INT, UUID_STRING)


def _check_mode(mode: str):
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}, expected one of {', '.join(MODES)}")


def to_json(ulys: Ulys, mode: str = STRING):
    """Renders a Ulys for transport.

    Args:
        ulys (Ulys): The identifier
        mode (str): ``string``, ``int`` or ``uuid``

    Returns:
        str | int: The rendered value
    """
    _check_mode(mode)
    if mode == INT:
        return int(ulys)
    if mode == UUID_STRING:
        return str(ulys.to_uuid())
    return str(ulys)


def from_json(value, mode: str = STRING) -> Ulys:
    """Reads a Ulys rendered by ``to_json``.

    Raises:
        DecodeError: If a string is not a valid canonical Ulys
        ValueError: If the value doesn't fit the mode
    """
    _check_mode(mode)
    if mode == INT:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Expected an integer, got {type(value).__name__}")
        return Ulys(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {type(value).__name__}")
    if mode == UUID_STRING:
        return Ulys.from_uuid(UUID(value))
    return Ulys.from_string(value)


class UlysJSONProvider(DefaultJSONProvider):
    """Dumps Ulyses as canonical strings, everything else as Flask does."""

    @staticmethod
    def default(o):
        if isinstance(o, Ulys):
            return str(o)
        return DefaultJSONProvider.default(o)


def describe(ulys: Ulys) -> dict:
    """Breaks a Ulys down into its representations and components.

    ``time`` is None when the timestamp lies past what ``datetime`` can hold.
    """
    try:
        moment = ulys.datetime.isoformat(timespec="milliseconds")
    except OverflowError:
        moment = None
    return {
        "string": str(ulys),
        "raw": f"{int(ulys):032X}",
        "time": moment,
        "timestamp_ms": ulys.timestamp_ms,
        "random": f"{ulys.random:020X}",
        "uuid": str(ulys.to_uuid()),
    }
