"""Protocol definitions for the response objects headers are collected from."""

from typing import Iterable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class HeaderItems(Protocol):
    """Protocol for response header objects (requests CaseInsensitiveDict, httpx Headers)."""

    def items(self) -> Iterable[Tuple[str, str]]:
        raise NotImplementedError


@runtime_checkable
class Response(Protocol):
    """Protocol for HTTP response objects."""

    headers: HeaderItems
