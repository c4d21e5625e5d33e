"""Shared fixtures: a Solr client wired to an httpx.MockTransport."""
from typing import Any, Callable

import httpx
import pytest

from solr_client import Solr

CORE_URL = "http://solr.test/solr/books"


def envelope(
    docs: list[dict[str, Any]] | None = None,
    num_found: int | None = None,
    start: int = 0,
    facet_fields: dict[str, Any] | None = None,
    error: dict[str, Any] | None = None,
    header_params: dict[str, Any] | None = None,
) -> dict[str, Any]:
    docs = docs or []
    body: dict[str, Any] = {
        "responseHeader": {"status": 0, "QTime": 3, "params": header_params or {}},
        "response": {
            "numFound": len(docs) if num_found is None else num_found,
            "start": start,
            "docs": docs,
        },
    }
    if facet_fields is not None:
        body["facet_counts"] = {"facet_queries": {}, "facet_fields": facet_fields}
    if error is not None:
        body["error"] = error
    return body


class Recorder:
    """Records every request the mock transport receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def make_solr() -> Callable[..., tuple[Solr, Recorder]]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response], verbose: bool = False
    ) -> tuple[Solr, Recorder]:
        recorder = Recorder(handler)
        solr = Solr(CORE_URL, verbose=verbose, transport=httpx.MockTransport(recorder))
        return solr, recorder

    return _make


@pytest.fixture
def json_solr(make_solr: Callable[..., tuple[Solr, Recorder]]) -> Callable[..., tuple[Solr, Recorder]]:
    """Client whose every request is answered with the given JSON body."""

    def _make(body: dict[str, Any], verbose: bool = False) -> tuple[Solr, Recorder]:
        return make_solr(lambda request: httpx.Response(200, json=body), verbose=verbose)

    return _make
