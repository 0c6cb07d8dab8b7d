from crawlkit.fetcher.requests.session import DEFAULT_RETRY, create_session, response_headers, set_session_user_agent

__all__ = ["DEFAULT_RETRY", "create_session", "response_headers", "set_session_user_agent"]
