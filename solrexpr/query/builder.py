# solrexpr/query/builder.py
"""Factory functions for building query expressions.

Raw values passed where an expression is expected are converted with
``to_string`` (``str`` by default) and lifted through :func:`term`.

Example:
    >>> str(and_(eq("type", or_(["t1", "t2"])), required("solr")))
    '(type:((t1 OR t2)) AND +solr)'
"""

from collections.abc import Callable, Iterable
from typing import Any

from solrexpr.query.escape import Bound, escape, escape_wildcard, format_bound
from solrexpr.query.expressions import ANY, NONE, Combinator, Expression, Field, Kind, Range, Text


def any_() -> Text:
    """The '*' expression."""
    return ANY


def none() -> Text:
    """The empty expression. Renders as '' and vanishes from combinators."""
    return NONE


def term(value: str) -> Text:
    """Build a term, quoted when it has several tokens and escaped otherwise."""
    if value is None:
        raise ValueError("The value is required.")
    if value == "*":
        return ANY
    if not value:
        return NONE
    if len(value.split()) > 1:
        return Text(f'"{value}"')
    return Text(escape(value))


def wildcard(value: str) -> Text:
    """Build a wildcard term. '*' and '?' are kept, everything else is escaped."""
    if value is None:
        raise ValueError("The value is required.")
    if value == "*":
        return ANY
    if not value:
        return NONE
    return Text(escape_wildcard(value))


def phrase(value: str) -> Text:
    """Build a phrase: the value surrounded by quotes.

    Embedded quotes are not escaped.
    """
    if value is None:
        raise ValueError("The value is required.")
    return Text(f'"{value}"')


def range_(start: Bound, end: Bound) -> Range:
    """Build a [start TO end] expression.

    Dates are formatted as UTC, numbers with str() and strings such as '*'
    or 'NOW' pass through unchanged.
    """
    return Range(format_bound(start, "from"), format_bound(end, "to"))


def eq(field: str, value: Any) -> Field:
    """Build a field:value expression."""
    return Field(field, lift(value))


def and_(*values: Any, to_string: Callable[[Any], str] = str) -> Combinator:
    """Build an AND expression from expressions or raw values.

    A single operand is accepted too and renders as '(x)'; only an empty
    operand list is rejected.
    """
    return Combinator(Kind.AND, _convert(values, to_string))


def or_(*values: Any, to_string: Callable[[Any], str] = str) -> Combinator:
    """Build an OR expression from expressions or raw values."""
    return Combinator(Kind.OR, _convert(values, to_string))


def first_of(*values: Any, to_string: Callable[[Any], str] = str) -> Combinator:
    """Juxtapose expressions separated by a space, without an operator.

    Useful with prefixed clauses: first_of("lucene", prohibited("solr")).
    """
    return Combinator(Kind.SEQUENCE, _convert(values, to_string))


def not_(value: Any) -> Combinator:
    return Combinator(Kind.NOT, (lift(value),))


def required(value: Any) -> Combinator:
    return Combinator(Kind.REQUIRED, (lift(value),))


def prohibited(value: Any) -> Combinator:
    return Combinator(Kind.PROHIBITED, (lift(value),))


def conditional(predicate: bool, then: Any, otherwise: Any = NONE) -> Combinator:
    """Select then if predicate is true, otherwise the else branch."""
    return Combinator(Kind.CONDITIONAL, (lift(then), lift(otherwise)), bool(predicate))


def lift(value: Any, to_string: Callable[[Any], str] = str) -> Expression:
    """Return expressions unchanged and turn any other value into a term."""
    if value is None:
        raise ValueError("The expression is required.")
    if isinstance(value, Expression):
        return value
    return term(to_string(value))


def _convert(values: tuple[Any, ...], to_string: Callable[[Any], str]) -> tuple[Expression, ...]:
    # or_(["a", "b"]) and or_("a", "b") are equivalent
    if len(values) == 1 and _is_collection(values[0]):
        values = tuple(values[0])
    if not values:
        raise ValueError("At least one expression is required.")
    return tuple(lift(v, to_string) for v in values)


def _is_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, str | bytes | Expression)
