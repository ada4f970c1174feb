# solrexpr/__init__.py
"""solrexpr - Composable, escaped Solr/Lucene query expressions."""

from solrexpr.client import SolrClient
from solrexpr.models import SolrQuery, SolrResponse
from solrexpr.query import (
    ANY,
    NONE,
    UNBOUNDED,
    Combinator,
    Expression,
    Field,
    Kind,
    Range,
    Text,
    and_,
    any_,
    conditional,
    eq,
    first_of,
    none,
    not_,
    or_,
    phrase,
    prohibited,
    range_,
    render,
    required,
    term,
    wildcard,
)
from solrexpr.search import batched_filters, search_in

__all__ = [
    # Expressions
    "Expression",
    "Text",
    "Range",
    "Field",
    "Combinator",
    "Kind",
    "ANY",
    "NONE",
    "UNBOUNDED",
    "render",
    "term",
    "wildcard",
    "phrase",
    "range_",
    "eq",
    "and_",
    "or_",
    "first_of",
    "not_",
    "required",
    "prohibited",
    "conditional",
    "any_",
    "none",
    # Models
    "SolrQuery",
    "SolrResponse",
    # Transport
    "SolrClient",
    "search_in",
    "batched_filters",
]
