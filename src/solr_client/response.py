"""Solr JSON envelope and the results handed back to callers."""
from dataclasses import dataclass, field
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from solr_client.params import SearchParams

DEFAULT_ROWS = 10


class HeaderRaw(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    status: int = 0
    qtime: int = Field(default=0, validation_alias=AliasChoices("QTime", "qtime"))
    params: dict[str, Any] = Field(default_factory=dict)


class DataRaw(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    num_found: int = Field(default=0, validation_alias=AliasChoices("numFound", "num_found"))
    start: int = 0
    documents: list[dict[str, Any]] = Field(
        default_factory=list, validation_alias=AliasChoices("docs", "documents")
    )


class FacetCountsRaw(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Flat [value, count, ...] by default. json.nl=map gives an object,
    # arrarr gives [[value, count], ...] and arrmap gives [{value: count}, ...].
    facet_fields: dict[str, list[Any] | dict[str, int]] = Field(default_factory=dict)


class ErrorRaw(BaseModel):
    model_config = ConfigDict(extra="allow")

    msg: str = ""
    trace: str = ""
    code: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.trace and not self.msg


class ResponseRaw(BaseModel):
    """Top-level envelope returned by /select."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    header: HeaderRaw = Field(
        default_factory=HeaderRaw, validation_alias=AliasChoices("responseHeader", "header")
    )
    data: DataRaw = Field(default_factory=DataRaw, validation_alias=AliasChoices("response", "data"))
    facet_counts: FacetCountsRaw = Field(default_factory=FacetCountsRaw)
    error: ErrorRaw = Field(default_factory=ErrorRaw)

    @field_validator("facet_counts", "error", mode="before")
    @classmethod
    def _null_section_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class Document(dict):
    """One indexed record as returned by Solr. No schema is enforced."""

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def first(self, name: str, default: Any = None) -> Any:
        """First value of a field, multi-valued or not."""
        value = self.get(name, default)
        if isinstance(value, list):
            return value[0] if value else default
        return value

    def get_all(self, name: str) -> list[Any]:
        """All values of a field as a list."""
        value = self.get(name)
        if value is None:
            return []
        if isinstance(value, list):
            return list(value)
        return [value]


@dataclass
class FacetValue:
    # None is the facet.missing bucket.
    value: str | None
    count: int


def _facet_value(value: Any, count: Any) -> FacetValue:
    return FacetValue(value=None if value is None else str(value), count=int(count))


def _facet_values(raw: list[Any] | dict[str, int]) -> list[FacetValue]:
    if isinstance(raw, dict):
        return [_facet_value(k, v) for k, v in raw.items()]
    if raw and isinstance(raw[0], list):
        return [_facet_value(pair[0], pair[1]) for pair in raw]
    if raw and isinstance(raw[0], dict):
        return [_facet_value(k, v) for entry in raw for k, v in entry.items()]
    return [_facet_value(raw[i], raw[i + 1]) for i in range(0, len(raw) - 1, 2)]


def _as_int(value: Any) -> int | None:
    if isinstance(value, list):
        value = value[0] if value else None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _rows(params: SearchParams, header: HeaderRaw) -> int:
    rows = _as_int(params.options.get("rows"))
    if rows is None:
        rows = _as_int(header.params.get("rows"))
    return DEFAULT_ROWS if rows is None else rows


@dataclass
class SearchResponse:
    """Search results paired with the parameters that produced them."""

    params: SearchParams
    documents: list[Document] = field(default_factory=list)
    num_found: int = 0
    start: int = 0
    rows: int = DEFAULT_ROWS
    qtime: int = 0
    facets: dict[str, list[FacetValue]] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, params: SearchParams, raw: ResponseRaw) -> "SearchResponse":
        return cls(
            params=params,
            documents=[Document(d) for d in raw.data.documents],
            num_found=raw.data.num_found,
            start=raw.data.start,
            rows=_rows(params, raw.header),
            qtime=raw.header.qtime,
            facets={
                name: _facet_values(values)
                for name, values in raw.facet_counts.facet_fields.items()
            },
        )

    @property
    def q(self) -> str:
        return self.params.q

    @property
    def page(self) -> int:
        """1-based page number of this response."""
        if self.rows <= 0:
            return 1
        return self.start // self.rows + 1

    @property
    def num_pages(self) -> int:
        if self.rows <= 0:
            return 1 if self.num_found else 0
        return -(-self.num_found // self.rows)

    @property
    def next_start(self) -> int | None:
        nxt = self.start + self.rows
        if self.rows <= 0 or nxt >= self.num_found:
            return None
        return nxt

    @property
    def previous_start(self) -> int | None:
        if self.start <= 0:
            return None
        return max(self.start - self.rows, 0)
