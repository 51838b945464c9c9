"""Entry point for the fib command."""

import sys
import argparse
import logging

from .config import Config, configure_logging
from .core import Fib
from .render import decimal, format_range, format_value

logger = logging.getLogger("fibcalc")

INVALID_RANGE = "Invalid range: end < start"


def index(text: str) -> int:
    """argparse type for a Fibonacci index."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"index must be non-negative: {value}")
    return value


def positive(text: str) -> int:
    value = index(text)
    if value == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fib",
        description="fibcalc - exact Fibonacci numbers, single values and ranges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fib single 100        # F(100) = 354224848179261915075
  fib range 3 10        # F(3) through F(10), one per line
  fib value 1000000     # bare decimal value of F(1000000)
  fib serve --port 8080 # HTTP endpoint: POST /fib {"n": 10}
        """
    )

    parser.add_argument(
        '-w', '--workers',
        type=positive,
        help='Worker processes for range calculations (default: CPU count)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{Config.APP_NAME} {Config.VERSION}'
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_single = subparsers.add_parser("single", help="Compute F(n)")
    p_single.add_argument("n", type=index, help="Index n (non-negative)")

    p_value = subparsers.add_parser("value", help="Print the bare decimal value of F(n)")
    p_value.add_argument("n", type=index, help="Index n (non-negative)")

    p_range = subparsers.add_parser("range", help="Compute F(start) through F(end)")
    p_range.add_argument("start", type=index, help="First index")
    p_range.add_argument("end", type=index, help="Last index (inclusive)")

    p_serve = subparsers.add_parser("serve", help="Run the HTTP endpoint")
    p_serve.add_argument("--host", default=None, help=f"Bind address (default: {Config.HOST})")
    p_serve.add_argument("--port", type=positive, default=None, help=f"Port (default: {Config.PORT})")

    subparsers.add_parser("ui", help="Run the interactive terminal UI")

    p_bench = subparsers.add_parser("bench", help="Time the engine on standard inputs")
    p_bench.add_argument("--max", dest="max_index", type=index, default=Config.BENCH_MAX,
                         help=f"Largest index to time (default: {Config.BENCH_MAX:,})")
    p_bench.add_argument("--repeat", type=positive, default=3, help="Runs per case (default: 3)")

    return parser


def run_command(args) -> int:
    """Dispatch parsed arguments; returns the process exit code."""
    if args.command == "single":
        print(format_value(args.n, Fib.single(args.n)))

    elif args.command == "value":
        print(decimal(Fib.single(args.n)))

    elif args.command == "range":
        values = Fib.range(args.start, args.end, workers=args.workers)
        if not values:
            print(INVALID_RANGE, file=sys.stderr)
            return 0
        print("\n".join(format_range(args.start, values)))

    elif args.command == "serve":
        from .web import serve
        serve(args.host, args.port)

    elif args.command == "ui":
        from .app import run
        run(args.workers)

    elif args.command == "bench":
        from .bench import render, run_benchmarks
        render(run_benchmarks(args.max_index, args.repeat, args.workers))

    return 0


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    try:
        Config.validate()
        code = run_command(args)
    except KeyboardInterrupt:
        print("\nGoodbye!")
        sys.exit(0)
    except Exception as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
