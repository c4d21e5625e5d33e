"""Exceptions raised by the Solr client."""
from typing import Any


class SolrError(Exception):
    """Base class for every failure reported by the client."""

    pass


class SolrTransportError(SolrError):
    """Raised when the request never produced a usable HTTP response."""

    pass


class SolrHTTPError(SolrError):
    """Raised when Solr answers with a status outside 200-299."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SolrDecodeError(SolrError):
    """Raised when a 2xx response body is not a Solr JSON envelope."""

    def __init__(self, message: str, content_type: str | None = None) -> None:
        super().__init__(message)
        self.content_type = content_type


class SolrServiceError(SolrError):
    """Raised when Solr reports an error inside a well-formed envelope."""

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class AmbiguousResultError(SolrError):
    """Raised when a lookup query matches more than one document."""

    def __init__(self, q: str, num_found: int) -> None:
        super().__init__(f"More than one document was found (Q={q}, numFound={num_found})")
        self.q = q
        self.num_found = num_found
