import pytest

from solrexpr.query.builder import and_, eq, not_, or_, prohibited, required, term
from solrexpr.query.expressions import (
    ANY,
    NONE,
    Combinator,
    Field,
    Kind,
    Range,
    Text,
)


def test_eq_creates_field():
    q = eq("title", "transformer")
    assert isinstance(q, Field)
    assert q.name == "title"
    assert q.child == Text("transformer")


def test_and_operator():
    q = eq("title", "transformer") & eq("author", "Vaswani")
    assert isinstance(q, Combinator)
    assert q.kind is Kind.AND
    assert q.operands == (eq("title", "transformer"), eq("author", "Vaswani"))


def test_or_operator():
    q = term("bert") | term("gpt")
    assert q == or_("bert", "gpt")


def test_not_operator():
    q = ~eq("author", "Google")
    assert q == not_(eq("author", "Google"))


def test_operators_lift_raw_operands():
    assert eq("a", "b") & "c" == and_(eq("a", "b"), "c")
    assert "c" | eq("a", "b") == or_("c", eq("a", "b"))
    assert str(eq("a", "b") & "hello world") == '(a:b AND "hello world")'


def test_operators_reject_none():
    with pytest.raises(ValueError, match="The expression is required"):
        eq("a", "b") & None


def test_unary_plus_and_minus():
    assert +term("solr") == required("solr")
    assert -term("solr") == prohibited("solr")


def test_operator_expressions_render():
    q = (term("bert") | term("gpt")) & ~eq("type", "draft")
    assert str(q) == "((bert OR gpt) AND NOT (type:draft))"


def test_expression_is_hashable():
    q1 = and_(eq("f", "v"), "x")
    q2 = and_(eq("f", "v"), "x")
    assert hash(q1) == hash(q2)
    assert q1 == q2


def test_expression_is_frozen():
    q = term("hello")
    with pytest.raises(AttributeError):
        q.content = "other"  # type: ignore[misc]


def test_singletons():
    assert term("*") is ANY
    assert term("") is NONE


def test_field_requires_name():
    with pytest.raises(ValueError, match="The field is required"):
        Field("", ANY)


def test_field_requires_child():
    with pytest.raises(ValueError, match="The expression is required"):
        Field("f", None)  # type: ignore[arg-type]


def test_field_rejects_raw_child():
    with pytest.raises(ValueError, match="The expression is required"):
        Field("f", "raw")  # type: ignore[arg-type]


def test_text_requires_string():
    with pytest.raises(ValueError, match="The text is required"):
        Text(42)  # type: ignore[arg-type]


def test_range_requires_bounds():
    with pytest.raises(ValueError, match="The from is required"):
        Range("", "*")
    with pytest.raises(ValueError, match="The to is required"):
        Range("*", "")


def test_combinator_requires_operands():
    with pytest.raises(ValueError, match="At least one expression is required"):
        Combinator(Kind.AND, ())


def test_combinator_rejects_raw_operands():
    with pytest.raises(ValueError, match="The expression is required"):
        Combinator(Kind.OR, (ANY, "raw"))  # type: ignore[arg-type]


def test_combinator_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown operator"):
        Combinator("xor", (ANY,))  # type: ignore[arg-type]


def test_unary_combinator_takes_one_operand():
    with pytest.raises(ValueError, match="exactly one expression"):
        Combinator(Kind.NOT, (ANY, NONE))


def test_conditional_takes_two_operands():
    with pytest.raises(ValueError, match="then and an else"):
        Combinator(Kind.CONDITIONAL, (ANY,))


def test_build_wraps_into_solr_query():
    q = eq("type", "book").build(rows=5)
    assert q.query_string == "type:book"
    assert q.rows == 5
