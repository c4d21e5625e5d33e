"""HTTP client for a Solr core."""
import httpx
import structlog
from pydantic import ValidationError

from solr_client.config import SolrSettings
from solr_client.errors import (
    AmbiguousResultError,
    SolrDecodeError,
    SolrHTTPError,
    SolrServiceError,
    SolrTransportError,
)
from solr_client.params import GetParams, SearchParams
from solr_client.response import Document, ResponseRaw, SearchResponse

logger = structlog.get_logger(__name__)

BODY_SNIPPET_CHARS = 500


class Solr:
    """Issues /select requests against one core.

    Holds configuration only. Every call opens its own connection, reads the
    whole body and closes it before returning, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        core_url: str,
        verbose: bool = False,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._core_url = core_url.rstrip("/")
        self._verbose = verbose
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: SolrSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "Solr":
        settings = settings or SolrSettings()
        return cls(
            settings.core_url,
            verbose=settings.verbose,
            timeout=settings.timeout,
            transport=transport,
        )

    @property
    def core_url(self) -> str:
        return self._core_url

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def timeout(self) -> float:
        return self._timeout

    def select_url(self, query_string: str) -> str:
        return f"{self._core_url}/select?{query_string}"

    def get(self, params: GetParams) -> Document:
        """Fetch the single document matching ``params.q``.

        Returns an empty Document when nothing matches and raises
        AmbiguousResultError when more than one document comes back.
        """
        raw = self._http_get(self.select_url(params.to_query_string()))
        docs = raw.data.documents
        if not docs:
            return Document()
        if len(docs) > 1:
            raise AmbiguousResultError(params.q, max(raw.data.num_found, len(docs)))
        return Document(docs[0])

    def search(self, params: SearchParams) -> SearchResponse:
        """Issue a search with the values indicated in params."""
        raw = self._http_get(self.select_url(params.to_query_string()))
        return SearchResponse.from_raw(params, raw)

    def search_text(self, text: str) -> SearchResponse:
        """Search for text using only Solr's default values."""
        return self.search(SearchParams(q=text, options={}, facets={}))

    def _http_get(self, url: str) -> ResponseRaw:
        if self._verbose:
            logger.info("solr_request", url=url)
        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                resp = client.get(url)
        except httpx.RequestError as e:
            raise SolrTransportError(
                f"Solr request failed ({type(e).__name__}): {e}"
            ) from e

        if not resp.is_success:
            msg = f"HTTP Status: {resp.status_code} {resp.reason_phrase}."
            body = resp.text
            if body:
                msg += f" Body: {body}"
            raise SolrHTTPError(msg, status_code=resp.status_code, body=body)

        content_type = resp.headers.get("content-type")
        try:
            raw = ResponseRaw.model_validate_json(resp.content)
        except ValidationError as e:
            # Usually Solr answered with its HTML or XML writer instead of JSON.
            msg = f"Invalid Solr response: {e.errors()[0]['msg']}"
            if content_type:
                msg += f". Solr's response Content-Type: {content_type}"
            snippet = resp.text[:BODY_SNIPPET_CHARS]
            if snippet:
                msg += f". Body: {snippet}"
            raise SolrDecodeError(msg, content_type=content_type) from e

        if not raw.error.is_empty:
            detail = raw.error.model_dump(exclude_none=True)
            raise SolrServiceError(f"Solr Error. {detail}", detail=detail)

        if self._verbose:
            logger.info(
                "solr_response",
                status=resp.status_code,
                num_found=raw.data.num_found,
                qtime=raw.header.qtime,
            )
        return raw
