# solrexpr/query/render.py
from solrexpr.query.expressions import Combinator, Expression, Field, Kind, Range, Text

SEPARATORS = {
    Kind.AND: " AND ",
    Kind.OR: " OR ",
    Kind.SEQUENCE: " ",
}

PREFIXES = {
    Kind.NOT: "NOT ",
    Kind.REQUIRED: "+",
    Kind.PROHIBITED: "-",
}


def render(expression: Expression) -> str:
    """Convert an Expression tree to Solr query syntax."""
    match expression:
        case Text(content=c):
            return c
        case Range(start=s, end=e):
            return f"[{s} TO {e}]"
        case Field(name=n, child=c):
            return _prefix(c, f"{n}:")
        case Combinator(kind=Kind.CONDITIONAL):
            return render(expression.selected)
        case Combinator(kind=k, operands=ops) if k in SEPARATORS:
            parts = [text for text in map(render, ops) if text]
            if not parts:
                return ""
            return f"({SEPARATORS[k].join(parts)})"
        case Combinator(kind=k, operands=(o,)):
            return _prefix(o, PREFIXES[k])
        case _:
            raise ValueError(f"Unsupported query node: {expression!r}")


def _operand(expression: Expression) -> str:
    """Render an operand of a field or prefix operator.

    Leaves stay bare, everything else gets wrapped in one more pair of parens.
    """
    while isinstance(expression, Combinator) and expression.kind is Kind.CONDITIONAL:
        expression = expression.selected
    text = render(expression)
    if not text or isinstance(expression, Text | Range):
        return text
    return f"({text})"


def _prefix(expression: Expression, prefix: str) -> str:
    text = _operand(expression)
    return f"{prefix}{text}" if text else ""
