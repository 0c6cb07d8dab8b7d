from crawlkit.fetcher.httpx.client import create_async_client, create_client, response_headers

__all__ = ["create_async_client", "create_client", "response_headers"]
