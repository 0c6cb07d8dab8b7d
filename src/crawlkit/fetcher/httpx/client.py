"""httpx clients that identify themselves with a crawler User-Agent."""

import logging

import httpx

from crawlkit.fetcher.headers import Headers
from crawlkit.fetcher.user_agent import UserAgent

logger = logging.getLogger(__name__)

USER_AGENT_HEADER = "User-Agent"
DEFAULT_RETRIES = 3


def _with_user_agent(user_agent: UserAgent, kwargs: dict) -> dict:
    headers = httpx.Headers(kwargs.pop("headers", None))
    headers.setdefault(USER_AGENT_HEADER, user_agent.user_agent_string)
    kwargs["headers"] = headers
    return kwargs


def create_client(user_agent: UserAgent, **kwargs) -> httpx.Client:
    """Create a httpx client for crawling.

    Args:
        user_agent: Identity presented in the User-Agent header. A User-Agent passed in
            ``headers`` takes precedence.
        **kwargs: Additional arguments passed to httpx.Client (e.g. timeout, verify).

    Returns:
        Configured httpx Client
    """
    # Use a custom transport to set the number of retries for connection errors
    kwargs.setdefault("transport", httpx.HTTPTransport(retries=DEFAULT_RETRIES))
    client = httpx.Client(**_with_user_agent(user_agent, kwargs))
    logger.debug(f"Created httpx client with User-Agent: {client.headers[USER_AGENT_HEADER]}")
    return client


def create_async_client(user_agent: UserAgent, **kwargs) -> httpx.AsyncClient:
    """Create a httpx async client for crawling.

    Example:
        async with create_async_client(ua) as client:
            response = await client.get("https://example.com/")
            headers = response_headers(response)
    """
    kwargs.setdefault("transport", httpx.AsyncHTTPTransport(retries=DEFAULT_RETRIES))
    client = httpx.AsyncClient(**_with_user_agent(user_agent, kwargs))
    logger.debug(f"Created httpx async client with User-Agent: {client.headers[USER_AGENT_HEADER]}")
    return client


def response_headers(response: httpx.Response) -> Headers:
    """Collect the headers of a response, one value per header line.

    Header names keep the case they were sent with.
    """
    encoding = response.headers.encoding
    headers = Headers()
    for name, value in response.headers.raw:
        headers.add(name.decode(encoding), value.decode(encoding))
    return headers
