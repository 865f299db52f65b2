import argparse
import logging
import sys

from .bulk import generate_monotonic, generate_random
from .config import Config
from .core import Ulys
from .serialization import describe
from .utils.errors import DecodeError
from .utils.logging import setup_logging

logger = logging.getLogger("ulys")

INSPECT_TEMPLATE = """
REPRESENTATION:

  String: {string}
     Raw: {raw}

COMPONENTS:

       Time: {time}
  Timestamp: {timestamp_ms}
    Payload: {random}
"""


def cmd_generate(args: argparse.Namespace) -> int:
    if args.monotonic:
        ulyses = generate_monotonic(args.count, sleep_ms=Config.OVERFLOW_SLEEP_MS)
    else:
        ulyses = generate_random(args.count)
    for ulys in ulyses:
        sys.stdout.write(f"{ulys}\n")
    sys.stdout.flush()
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    status = 0
    for value in args.ulyses:
        try:
            ulys = Ulys.from_string(value)
        except DecodeError as e:
            print(f"{value} is not a valid ULYS: {e}")
            status = 1
            continue
        parts = describe(ulys)
        if parts["time"] is None:
            parts["time"] = "out of range"
        print(INSPECT_TEMPLATE.format(**parts))
    return status


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ulys", description="Generate or inspect ULYSes")
    p.add_argument("-n", "--count", type=int, default=None, help="Number of ULYSes to generate (default: 1)")
    p.add_argument("-m", "--monotonic", action="store_true", help="Generate strictly increasing ULYSes")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    p.add_argument("ulyses", nargs="*", help="ULYSes to inspect instead of generating")
    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.ulyses and args.count is not None:
        parser.error("argument -n/--count: not allowed with ULYSes to inspect")
    if args.count is None:
        args.count = 1
    if args.count < 0:
        parser.error("argument -n/--count: must not be negative")
    setup_logging(logger, debug=args.verbose)
    if args.ulyses:
        return cmd_inspect(args)
    return cmd_generate(args)


if __name__ == "__main__":
    raise SystemExit(main())
