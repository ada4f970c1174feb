# solrexpr/query/expressions.py
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solrexpr.models import SolrQuery


@dataclass(frozen=True)
class Expression:
    """Base AST node for Solr query expressions."""

    def __and__(self, other: Any) -> "Combinator":
        return Combinator(Kind.AND, (self, _lift(other)))

    def __rand__(self, other: Any) -> "Combinator":
        return Combinator(Kind.AND, (_lift(other), self))

    def __or__(self, other: Any) -> "Combinator":
        return Combinator(Kind.OR, (self, _lift(other)))

    def __ror__(self, other: Any) -> "Combinator":
        return Combinator(Kind.OR, (_lift(other), self))

    def __invert__(self) -> "Combinator":
        return Combinator(Kind.NOT, (self,))

    def __pos__(self) -> "Combinator":
        return Combinator(Kind.REQUIRED, (self,))

    def __neg__(self) -> "Combinator":
        return Combinator(Kind.PROHIBITED, (self,))

    def __str__(self) -> str:
        from solrexpr.query.render import render

        return render(self)

    def build(self, **params: Any) -> "SolrQuery":
        """Wrap the rendered expression into a SolrQuery."""
        from solrexpr.models import SolrQuery

        return SolrQuery(q=self, **params)


@dataclass(frozen=True)
class Text(Expression):
    """Escaped term, wildcard pattern or quoted phrase."""

    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise ValueError("The text is required.")


@dataclass(frozen=True)
class Range(Expression):
    """Inclusive range: [start TO end]."""

    start: str
    end: str

    def __post_init__(self) -> None:
        if not self.start:
            raise ValueError("The from is required.")
        if not self.end:
            raise ValueError("The to is required.")


@dataclass(frozen=True)
class Field(Expression):
    """Field match: name:child."""

    name: str
    child: Expression

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("The field is required.")
        if not isinstance(self.child, Expression):
            raise ValueError("The expression is required.")


class Kind(StrEnum):
    AND = "and"
    OR = "or"
    SEQUENCE = "sequence"
    NOT = "not"
    REQUIRED = "required"
    PROHIBITED = "prohibited"
    CONDITIONAL = "conditional"


UNARY = frozenset({Kind.NOT, Kind.REQUIRED, Kind.PROHIBITED})


@dataclass(frozen=True)
class Combinator(Expression):
    """Logical operator over one or more operands.

    CONDITIONAL holds (then, otherwise) and selects one of them with predicate.
    """

    kind: Kind
    operands: tuple[Expression, ...]
    predicate: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise ValueError(f"Unknown operator: {self.kind!r}")
        if not self.operands:
            raise ValueError("At least one expression is required.")
        if not all(isinstance(op, Expression) for op in self.operands):
            raise ValueError("The expression is required.")
        if self.kind in UNARY and len(self.operands) != 1:
            raise ValueError(f"{self.kind} takes exactly one expression.")
        if self.kind is Kind.CONDITIONAL and len(self.operands) != 2:
            raise ValueError("conditional takes a then and an else expression.")

    @property
    def selected(self) -> Expression:
        """Branch chosen by a CONDITIONAL node."""
        return self.operands[0] if self.predicate else self.operands[1]


ANY = Text("*")
NONE = Text("")


def _lift(value: Any) -> Expression:
    """Raw operands of &, | become terms."""
    from solrexpr.query.builder import lift

    return lift(value)
