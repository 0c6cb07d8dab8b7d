"""requests sessions that identify themselves with a crawler User-Agent."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from requests import Session
from requests.adapters import HTTPAdapter, Retry

from crawlkit.fetcher.headers import Headers
from crawlkit.fetcher.user_agent import UserAgent

logger = logging.getLogger(__name__)

USER_AGENT_HEADER = "User-Agent"

DEFAULT_RETRY = Retry(total=3, connect=3, read=3, backoff_factor=0.5, status_forcelist=[502, 503, 504])


def set_session_user_agent(session: Session, user_agent: UserAgent) -> None:
    """Set the User-Agent header for all requests made through the session."""
    session.headers[USER_AGENT_HEADER] = user_agent.user_agent_string


def create_session(
    user_agent: UserAgent,
    *,
    retry: Optional[Retry] = DEFAULT_RETRY,
    headers: Optional[Headers] = None,
) -> Session:
    """Create a requests session for crawling.

    - User-Agent header taken from the given UserAgent
    - Extra default headers (first value of each header name)
    - Default retry logic for transient errors

    Args:
        user_agent: Identity presented in the User-Agent header
        retry: Retry policy mounted for http:// and https://. None disables retries.
        headers: Additional headers sent with every request

    Returns:
        Configured requests Session
    """
    session = requests.Session()
    if headers is not None:
        for name in headers.names():
            session.headers[name] = headers.get(name)
    set_session_user_agent(session, user_agent)

    if retry is not None:
        session.mount("http://", HTTPAdapter(max_retries=retry))
        session.mount("https://", HTTPAdapter(max_retries=retry))

    logger.debug(f"Created requests session with User-Agent: {user_agent.user_agent_string}")
    return session


def response_headers(response: requests.Response) -> Headers:
    """Collect the headers of a response.

    requests folds repeated header lines into one comma separated value. When the raw
    urllib3 response is still attached its header lines are read instead, so that
    every line becomes a separate value.
    """
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is None or not hasattr(raw_headers, "getlist"):
        return Headers.from_response(response)

    headers = Headers()
    for name in raw_headers:
        for value in raw_headers.getlist(name):
            headers.add(name, value)
    return headers
