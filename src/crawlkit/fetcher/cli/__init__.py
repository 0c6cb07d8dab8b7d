"""``crawlkit-ua``: print User-Agent header values for crawlers."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from crawlkit.fetcher.cli import format_agent, show_agent

LOGGER_NAME = "crawlkit.fetcher"
_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crawlkit-ua",
        description="Build User-Agent header values for crawlers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more details to stderr (-v for info, -vv for debug)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    format_agent.register_parser(subparsers)
    show_agent.register_parser(subparsers)
    return parser


_handler: logging.Handler | None = None


def _configure_logging(verbosity: int = 0) -> None:
    """Send package logs to stderr, keeping stdout for the header value."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(_handler)
    logger.setLevel(_LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)])


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)
    _configure_logging(parsed.verbose)

    run = getattr(parsed, "run", None)
    if run is None:
        parser.print_help()
        return 0

    try:
        user_agent = run(parsed)
    except json.JSONDecodeError as e:
        return _error(f"Invalid agent config file: {e}")
    except KeyError as e:
        return _error(f"Missing key {e} in agent config file")
    except (ValueError, OSError) as e:
        return _error(str(e))

    logging.getLogger(__name__).debug(f"Agent name: {user_agent.agent_name!r}")
    print(user_agent.user_agent_string)
    return 0


if __name__ == "__main__":
    sys.exit(main())
