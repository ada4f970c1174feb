# solrexpr/cli.py
import asyncio
import json
import sys
from typing import Annotated

import cyclopts

from solrexpr.client import SolrClient
from solrexpr.models import SolrQuery
from solrexpr.query import (
    UNBOUNDED,
    Expression,
    and_,
    any_,
    eq,
    or_,
    prohibited,
    range_,
    term,
    wildcard,
)

app = cyclopts.App(
    name="solrexpr",
    help="Build escaped Solr query strings and run them against a Solr core.",
)

OPERATORS = {
    "and": and_,
    "or": or_,
}


def _split_clause(clause: str) -> tuple[str, str]:
    """Split 'field:value' on the first colon."""
    name, sep, value = clause.partition(":")
    if not sep or not name:
        raise ValueError(f"Expected field:value, got: {clause!r}")
    return name, value


def _value(value: str) -> Expression:
    """Plain values become terms, values with '*' or '?' become wildcards."""
    if "*" in value or "?" in value:
        return wildcard(value)
    return term(value)


def _range_clause(clause: str) -> Expression:
    """Parse 'field:from..to' into a field range. Either side may be '*'."""
    name, bounds = _split_clause(clause)
    start, sep, end = bounds.partition("..")
    if not sep:
        raise ValueError(f"Expected field:from..to, got: {clause!r}")
    return eq(name, range_(start or UNBOUNDED, end or UNBOUNDED))


def build_expression(
    terms: list[str],
    equals: list[str],
    ranges: list[str],
    prohibit: list[str],
    op: str = "and",
) -> Expression:
    """Combine command-line clauses into one expression.

    Without any clause the result matches every document ('*:*').
    """
    if op not in OPERATORS:
        raise ValueError(f"Unknown operator: {op!r}. Available: {list(OPERATORS)}")

    clauses: list[Expression] = [term(t) for t in terms]
    clauses.extend(eq(name, _value(v)) for name, v in map(_split_clause, equals))
    clauses.extend(_range_clause(r) for r in ranges)
    clauses.extend(prohibited(eq(name, _value(v))) for name, v in map(_split_clause, prohibit))

    if not clauses:
        return eq("*", any_())
    if len(clauses) == 1:
        return clauses[0]
    return OPERATORS[op](clauses)


TermsArg = Annotated[list[str] | None, cyclopts.Parameter(help="Free-text terms")]
EqOpt = Annotated[
    list[str] | None,
    cyclopts.Parameter(name=["--eq", "-e"], help="Field match as field:value"),
]
RangeOpt = Annotated[
    list[str] | None,
    cyclopts.Parameter(name=["--range", "-r"], help="Field range as field:from..to"),
]
ProhibitOpt = Annotated[
    list[str] | None,
    cyclopts.Parameter(name=["--prohibit", "-x"], help="Excluded field match as field:value"),
]
OpOpt = Annotated[
    str,
    cyclopts.Parameter(name=["--op"], help="Operator joining the clauses: and, or"),
]


def _build_or_exit(
    terms: list[str] | None,
    equals: list[str] | None,
    ranges: list[str] | None,
    prohibit: list[str] | None,
    op: str,
) -> Expression:
    try:
        return build_expression(terms or [], equals or [], ranges or [], prohibit or [], op)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


@app.command(name="render")
def render(
    terms: TermsArg = None,
    equals: EqOpt = None,
    ranges: RangeOpt = None,
    prohibit: ProhibitOpt = None,
    op: OpOpt = "and",
) -> None:
    """Print the query string built from the given clauses."""
    expression = _build_or_exit(terms, equals, ranges, prohibit, op)
    print(str(expression))


@app.command(name="select")
def select(
    terms: TermsArg = None,
    equals: EqOpt = None,
    ranges: RangeOpt = None,
    prohibit: ProhibitOpt = None,
    op: OpOpt = "and",
    url: Annotated[
        str | None,
        cyclopts.Parameter(name=["--url", "-u"], help="Solr base URL (default: $SOLR_URL)"),
    ] = None,
    core: Annotated[
        str | None,
        cyclopts.Parameter(name=["--core", "-c"], help="Solr core (default: $SOLR_CORE)"),
    ] = None,
    rows: Annotated[
        int,
        cyclopts.Parameter(name=["--rows", "-n"], help="Number of documents to fetch"),
    ] = 10,
    fields: Annotated[
        list[str] | None,
        cyclopts.Parameter(name=["--field", "-f"], help="Stored fields to return"),
    ] = None,
) -> None:
    """Run the query against a Solr core and print the JSON response."""
    expression = _build_or_exit(terms, equals, ranges, prohibit, op)
    try:
        query = SolrQuery(q=expression, rows=rows, fields=tuple(fields or ()))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    async def run() -> dict:
        async with SolrClient(base_url=url, core=core) as client:
            result = await client.select(query)
        return {
            "q": query.query_string,
            "numFound": result.num_found,
            "start": result.start,
            "docs": result.docs,
        }

    print(json.dumps(asyncio.run(run()), indent=2, ensure_ascii=False, default=str))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
