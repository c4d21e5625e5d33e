from solr_client.client import Solr
from solr_client.config import SolrSettings
from solr_client.errors import (
    AmbiguousResultError,
    SolrDecodeError,
    SolrError,
    SolrHTTPError,
    SolrServiceError,
    SolrTransportError,
)
from solr_client.params import GetParams, SearchParams
from solr_client.response import Document, FacetValue, ResponseRaw, SearchResponse

__all__ = [
    "AmbiguousResultError",
    "Document",
    "FacetValue",
    "GetParams",
    "ResponseRaw",
    "SearchParams",
    "SearchResponse",
    "Solr",
    "SolrDecodeError",
    "SolrError",
    "SolrHTTPError",
    "SolrServiceError",
    "SolrSettings",
    "SolrTransportError",
]
