from __future__ import annotations

import argparse

from crawlkit.fetcher import DEFAULT_AGENT_CONFIG_PATH
from crawlkit.fetcher.config import load_agent_config, resolve_agent
from crawlkit.fetcher.user_agent import UserAgent

COMMAND = "show"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    show_parser = subparsers.add_parser(
        COMMAND,
        help="Print the User-Agent header value of a configured agent profile",
    )
    show_parser.add_argument(
        "--agent",
        dest="agent_name",
        help="Use a specific agent profile from the config file",
    )
    show_parser.add_argument(
        "--config-file",
        default=str(DEFAULT_AGENT_CONFIG_PATH),
        help=f"Agent config file path (default: {DEFAULT_AGENT_CONFIG_PATH})",
    )
    show_parser.set_defaults(run=run)


def run(parsed: argparse.Namespace) -> UserAgent:
    """Resolve the profile; config errors propagate to the CLI entry point."""
    config = load_agent_config(parsed.config_file)
    return resolve_agent(config, parsed.agent_name)
