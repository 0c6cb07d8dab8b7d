"""User-Agent string handling for crawlers.

A :class:`UserAgent` describes the identity a crawler presents to the sites it
fetches from. The header value is derived once, when the object is created::

    ua = UserAgent("mycrawler", "bot@mydomain.com", "http://www.mydomain.com", crawler_version="1.0")
    ua.user_agent_string
    # 'Mozilla/5.0 (compatible; mycrawler/1.0; +http://www.mydomain.com; bot@mydomain.com)'

The same object can be assembled fluently::

    ua = UserAgent.builder().agent_name("MyCrawler").crawler_version("1.0").build()
"""

from dataclasses import dataclass, replace
from typing import Optional

from crawlkit.fetcher import __version__

DEFAULT_BROWSER_VERSION = "Mozilla/5.0"
DEFAULT_CRAWLER_VERSION = __version__


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value != ""


def format_user_agent(
    agent_name: str,
    email_address: Optional[str] = None,
    web_address: Optional[str] = None,
    browser_version: str = DEFAULT_BROWSER_VERSION,
    crawler_version: Optional[str] = DEFAULT_CRAWLER_VERSION,
) -> str:
    """Build a User-Agent string from the crawler's identity.

    Absent (``None`` or empty) addresses are left out together with their separators.
    agent_name is not checked: an empty name stays empty and ``None`` is written as "None".

    Returns:
        User-Agent string like
        "Mozilla/5.0 (compatible; mycrawler/1.0; +http://www.mydomain.com; mycrawler@mydomain.com)"
    """
    parts = [f"{browser_version} (compatible; {agent_name}"]
    if crawler_version is not None:
        parts.append(f"/{crawler_version}")

    contacts = []
    if _is_set(web_address):
        contacts.append(f"+{web_address}")
    if _is_set(email_address):
        contacts.append(email_address)
    if contacts:
        parts.append("; " + "; ".join(contacts))

    parts.append(")")
    return "".join(parts)


@dataclass(frozen=True)
class UserAgent:
    """Identity of an HTTP crawler and the User-Agent header value derived from it.

    Args:
        agent_name: Primary agent name
        email_address: Email address of the agent owner
        web_address: Web page describing the agent or its owner
        browser_version: Browser token to stay compatible with, e.g. "Mozilla/5.0"
        crawler_version: Version of the crawler, defaults to this library's version. None omits it.
        user_agent_string: Use this exact string instead of deriving one from the fields above
    """

    agent_name: str
    email_address: Optional[str] = None
    web_address: Optional[str] = None
    browser_version: str = DEFAULT_BROWSER_VERSION
    crawler_version: Optional[str] = DEFAULT_CRAWLER_VERSION
    user_agent_string: Optional[str] = None

    def __post_init__(self):
        if self.user_agent_string is None:
            derived = format_user_agent(
                self.agent_name,
                self.email_address,
                self.web_address,
                self.browser_version,
                self.crawler_version,
            )
            object.__setattr__(self, "user_agent_string", derived)

    def __str__(self) -> str:
        return self.user_agent_string

    @staticmethod
    def builder() -> "UserAgentBuilder":
        return UserAgentBuilder()


@dataclass(frozen=True)
class UserAgentBuilder:
    """Fluent construction of a :class:`UserAgent`.

    Every setter returns a new builder, so a partially configured builder can be
    shared and extended without affecting other users of it.
    """

    _agent_name: Optional[str] = None
    _email_address: Optional[str] = None
    _web_address: Optional[str] = None
    _browser_version: str = DEFAULT_BROWSER_VERSION
    _crawler_version: Optional[str] = DEFAULT_CRAWLER_VERSION
    _user_agent_string: Optional[str] = None

    def agent_name(self, agent_name: str) -> "UserAgentBuilder":
        return replace(self, _agent_name=agent_name)

    def email_address(self, email_address: Optional[str]) -> "UserAgentBuilder":
        return replace(self, _email_address=email_address)

    def web_address(self, web_address: Optional[str]) -> "UserAgentBuilder":
        return replace(self, _web_address=web_address)

    def browser_version(self, browser_version: str) -> "UserAgentBuilder":
        return replace(self, _browser_version=browser_version)

    def crawler_version(self, crawler_version: Optional[str]) -> "UserAgentBuilder":
        return replace(self, _crawler_version=crawler_version)

    def user_agent_string(self, user_agent_string: Optional[str]) -> "UserAgentBuilder":
        return replace(self, _user_agent_string=user_agent_string)

    def build(self) -> UserAgent:
        return UserAgent(
            agent_name=self._agent_name,
            email_address=self._email_address,
            web_address=self._web_address,
            browser_version=self._browser_version,
            crawler_version=self._crawler_version,
            user_agent_string=self._user_agent_string,
        )
