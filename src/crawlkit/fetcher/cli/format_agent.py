from __future__ import annotations

import argparse

from crawlkit.fetcher.user_agent import DEFAULT_BROWSER_VERSION, DEFAULT_CRAWLER_VERSION, UserAgent

COMMAND = "format"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    format_parser = subparsers.add_parser(
        COMMAND,
        help="Print the User-Agent header value for the given crawler identity",
    )
    format_parser.add_argument("--agent-name", required=True, help="Primary agent name")
    format_parser.add_argument("--email", dest="email_address", help="Email address of the agent owner")
    format_parser.add_argument("--web-address", help="Web page describing the agent")
    format_parser.add_argument(
        "--browser-version",
        default=DEFAULT_BROWSER_VERSION,
        help=f"Browser compatibility token (default: {DEFAULT_BROWSER_VERSION})",
    )
    version_group = format_parser.add_mutually_exclusive_group()
    version_group.add_argument(
        "--crawler-version",
        default=DEFAULT_CRAWLER_VERSION,
        help=f"Version of the crawler (default: {DEFAULT_CRAWLER_VERSION})",
    )
    version_group.add_argument(
        "--no-crawler-version",
        dest="crawler_version",
        action="store_const",
        const=None,
        default=DEFAULT_CRAWLER_VERSION,
        help="Leave the crawler version out",
    )
    format_parser.add_argument(
        "--user-agent-string",
        help="Print this string instead of building one",
    )
    format_parser.set_defaults(run=run)


def run(parsed: argparse.Namespace) -> UserAgent:
    return UserAgent(
        agent_name=parsed.agent_name,
        email_address=parsed.email_address,
        web_address=parsed.web_address,
        browser_version=parsed.browser_version,
        crawler_version=parsed.crawler_version,
        user_agent_string=parsed.user_agent_string,
    )
