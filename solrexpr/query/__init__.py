from solrexpr.query.builder import (
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
    required,
    term,
    wildcard,
)
from solrexpr.query.escape import UNBOUNDED, escape, format_date
from solrexpr.query.expressions import (
    ANY,
    NONE,
    Combinator,
    Expression,
    Field,
    Kind,
    Range,
    Text,
)
from solrexpr.query.render import render

__all__ = [
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
    "escape",
    "format_date",
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
]
