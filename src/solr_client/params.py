"""Request parameters and their encoding into Solr's query-string dialect."""
from dataclasses import dataclass, field

import httpx


def _facet_params(facets: dict[str, dict[str, str]]) -> list[tuple[str, str]]:
    """facet=on, one facet.field per name, per-field options under f.<name>.facet.*"""
    if not facets:
        return []
    items: list[tuple[str, str]] = [("facet", "on")]
    for name, options in facets.items():
        items.append(("facet.field", name))
        for key, value in (options or {}).items():
            if not key.startswith("facet."):
                key = f"facet.{key}"
            items.append((f"f.{name}.{key}", str(value)))
    return items


def _encode(items: list[tuple[str, str]]) -> str:
    return str(httpx.QueryParams(items))


@dataclass
class GetParams:
    """Lookup of a single document.

    ``q`` is expected to match at most one document, e.g. ``id:123``.
    """

    q: str
    fl: list[str] = field(default_factory=list)
    fq: list[str] = field(default_factory=list)
    options: dict[str, str] = field(default_factory=dict)

    def to_query_string(self) -> str:
        items: list[tuple[str, str]] = [("q", self.q)]
        if self.fl:
            items.append(("fl", ",".join(self.fl)))
        items.extend(("fq", f) for f in self.fq)
        items.extend((k, str(v)) for k, v in self.options.items())
        return _encode(items)


@dataclass
class SearchParams:
    """Free-text search.

    ``options`` is passed through verbatim (sort, start, rows, fl, defType...).
    ``facets`` maps a field name to its facet options, e.g.
    ``{"category": {"limit": "20"}}``.
    """

    q: str
    options: dict[str, str] = field(default_factory=dict)
    facets: dict[str, dict[str, str]] = field(default_factory=dict)
    fq: list[str] = field(default_factory=list)

    def to_query_string(self) -> str:
        items: list[tuple[str, str]] = [("q", self.q)]
        items.extend((k, str(v)) for k, v in self.options.items())
        items.extend(("fq", f) for f in self.fq)
        items.extend(_facet_params(self.facets))
        return _encode(items)
