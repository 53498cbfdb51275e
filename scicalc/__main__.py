"""
Command line entry.

    python -m scicalc                   # open the calculator window
    python -m scicalc --eval "2^3^2"    # print 512 and exit
"""

import argparse
import logging
import sys

from .display import format_result
from .errors import EvalError
from .evaluator import evaluate
from .settings import Settings

logger = logging.getLogger("scicalc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scicalc", description="Scientific calculator")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--deg", dest="angle_mode", action="store_const", const="deg",
                      help="trig functions use degrees")
    mode.add_argument("--rad", dest="angle_mode", action="store_const", const="rad",
                      help="trig functions use radians")
    parser.add_argument("--eval", metavar="EXPR", help="evaluate EXPR, print the result and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        logger.error("bad configuration: %s", exc)
        return 2
    if args.angle_mode:
        settings.angle_mode = args.angle_mode
        settings.validate()

    if args.eval is not None:
        try:
            value = evaluate(args.eval, settings.angle_mode)
        except EvalError as exc:
            logger.debug("%s: %s", type(exc).__name__, exc)
            print("Error")
            return 1
        print(format_result(value))
        return 0

    # imported here so --eval works without a display or Qt installed
    from .app import run
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
