# solrexpr/models.py
from dataclasses import dataclass, replace
from typing import Any

from solrexpr.query.expressions import Expression
from solrexpr.query.render import render


@dataclass(frozen=True)
class SolrQuery:
    """Wire-level request for a Solr select handler."""

    q: Expression | str
    filters: tuple[Expression | str, ...] = ()
    fields: tuple[str, ...] = ()
    sort: str | None = None
    start: int = 0
    rows: int = 10

    # Any other request parameter, e.g. (("defType", "edismax"),)
    extra: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if self.q is None:
            raise ValueError("The query is required.")
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got: {self.start}")
        if self.rows < 0:
            raise ValueError(f"rows must be >= 0, got: {self.rows}")

    @property
    def query_string(self) -> str:
        """The rendered q parameter. An empty expression matches everything."""
        text = self.q if isinstance(self.q, str) else render(self.q)
        return text or "*:*"

    def page(self, start: int, rows: int | None = None) -> "SolrQuery":
        """Copy of this query for another window of results."""
        return replace(self, start=start, rows=self.rows if rows is None else rows)

    def to_params(self) -> list[tuple[str, str]]:
        """Ordered request parameters, fq repeated once per filter."""
        params: list[tuple[str, str]] = [("q", self.query_string)]
        for fq in self.filters:
            text = fq if isinstance(fq, str) else render(fq)
            if text:
                params.append(("fq", text))
        if self.fields:
            params.append(("fl", ",".join(self.fields)))
        if self.sort:
            params.append(("sort", self.sort))
        params.append(("start", str(self.start)))
        params.append(("rows", str(self.rows)))
        params.extend(self.extra)
        params.append(("wt", "json"))
        return params


@dataclass
class SolrResponse:
    """Parsed response of a select request."""

    docs: list[dict[str, Any]]
    num_found: int = 0
    start: int = 0
    qtime: int | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "SolrResponse":
        body = data.get("response", {})
        header = data.get("responseHeader", {})
        return cls(
            docs=list(body.get("docs", [])),
            num_found=body.get("numFound", 0),
            start=body.get("start", 0),
            qtime=header.get("QTime"),
        )

