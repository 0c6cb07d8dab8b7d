"""A container for HTTP headers where a name can carry several values."""

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Mapping, Optional, Union

if TYPE_CHECKING:
    from ._protocols import Response

CONTENT_ENCODING = "Content-Encoding"
CONTENT_LANGUAGE = "Content-Language"
CONTENT_LENGTH = "Content-Length"
CONTENT_LOCATION = "Content-Location"
CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_MD5 = "Content-MD5"
CONTENT_TYPE = "Content-Type"
LAST_MODIFIED = "Last-Modified"
LOCATION = "Location"


class Headers:
    """Header names mapped to their values, in the order the values were added.

    Names are stored exactly as given, so "Content-Type" and "content-type" are two
    different headers. A name is never kept without at least one value.

    Example:
        headers = Headers()
        headers.add("Set-Cookie", "a=1")
        headers.add("Set-Cookie", "b=2")
        headers.get("Set-Cookie")  # "a=1"
        headers.get_values("Set-Cookie")  # ["a=1", "b=2"]
    """

    CONTENT_ENCODING = CONTENT_ENCODING
    CONTENT_LANGUAGE = CONTENT_LANGUAGE
    CONTENT_LENGTH = CONTENT_LENGTH
    CONTENT_LOCATION = CONTENT_LOCATION
    CONTENT_DISPOSITION = CONTENT_DISPOSITION
    CONTENT_MD5 = CONTENT_MD5
    CONTENT_TYPE = CONTENT_TYPE
    LAST_MODIFIED = LAST_MODIFIED
    LOCATION = LOCATION

    def __init__(self, headers: Union["Headers", Mapping[str, Union[str, Iterable[str], None]], None] = None):
        """Create a container, optionally copying the values of an existing mapping.

        Args:
            headers: Another Headers, or header names mapped to a value or a list of
                values. Names with no values (None or an empty list) are skipped.
        """
        self._headers: Dict[str, List[str]] = {}
        if headers is None:
            return
        if isinstance(headers, Headers):
            headers = headers.to_dict()
        for name, values in headers.items():
            if values is None:
                continue
            if isinstance(values, str):
                values = [values]
            for value in values:
                if value is not None:
                    self.add(name, value)

    @classmethod
    def from_response(cls, response: "Response") -> "Headers":
        """Collect the headers of a requests or httpx response.

        Repeated header lines are kept as separate values when the response's header
        object exposes them through ``multi_items()``. httpx lowercases the names it
        returns there; use :func:`crawlkit.fetcher.httpx.response_headers` to keep the
        names as the server sent them.
        """
        response_headers = response.headers
        if hasattr(response_headers, "multi_items"):
            items = response_headers.multi_items()
        else:
            items = response_headers.items()

        headers = cls()
        for name, value in items:
            headers.add(name, value)
        return headers

    def is_multi_valued(self, name: str) -> bool:
        values = self._headers.get(name)
        return values is not None and len(values) > 1

    def names(self) -> List[str]:
        return list(self._headers.keys())

    def get(self, name: str) -> Optional[str]:
        """Get the first value of a header, or None if the header is not present."""
        values = self._headers.get(name)
        return values[0] if values else None

    def get_values(self, name: str) -> List[str]:
        """Get all values of a header. Returns an empty list if the header is not present."""
        return list(self._headers.get(name, ()))

    def add(self, name: str, value: str) -> None:
        """Append a value to a header, creating the header if needed."""
        values = self._headers.get(name)
        if values is None:
            self.set(name, value)
        else:
            values.append(value)

    def set(self, name: str, value: Optional[str]) -> None:
        """Replace all values of a header with a single value.

        If value is None the header is removed.
        """
        if value is None:
            self._headers.pop(name, None)
        else:
            self._headers[name] = [value]

    def size(self) -> int:
        return len(self._headers)

    def to_dict(self) -> Dict[str, List[str]]:
        """Return the headers as a plain dict of name to list of values."""
        return {name: list(values) for name, values in self._headers.items()}

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: object) -> bool:
        return name in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._headers == other._headers

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._headers!r})"

    def __str__(self) -> str:
        return "".join(f"{name}={value} " for name, values in self._headers.items() for value in values)
