import pytest

from solrexpr.query import (
    Expression,
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
    wildcard,
)


def complex_expression() -> Expression:
    return and_(
        eq("type", or_(["t1", "t2", "t3"])),
        or_(
            eq("f1", "v1"),
            eq("f2", "v2"),
            # true? expr : none
            conditional(
                True,
                and_(eq("c3", "v3"), prohibited(eq("c4", any_()))),
                none(),
            ),
        ),
    )


def test_complex_expression():
    assert render(complex_expression()) == (
        "(type:((t1 OR t2 OR t3)) AND (f1:v1 OR f2:v2 OR (c3:v3 AND -(c4:*))))"
    )


def test_complex_expression_with_false_branch():
    q = or_(eq("f1", "v1"), conditional(False, eq("c3", "v3"), none()))
    assert render(q) == "(f1:v1)"


def test_nested_field_gets_double_parens():
    assert render(eq("a", eq("b", "c"))) == "a:(b:c)"
    assert render(not_(eq("b", "c"))) == "NOT (b:c)"
    assert render(required(and_("x", "y"))) == "+((x AND y))"


def test_str_renders():
    q = complex_expression()
    assert str(q) == render(q)


def test_render_is_idempotent():
    q = complex_expression()
    assert render(q) == render(q)


@pytest.mark.parametrize(
    "expression",
    [
        complex_expression(),
        eq("f", first_of(range_("B", "C"), prohibited("C"))),
        not_(or_(eq("a", wildcard("x*")), required(phrase("p q")))),
        and_(eq("a", or_(eq("b", and_("c", "d")), "e")), none()),
    ],
)
def test_parentheses_are_balanced(expression):
    text = render(expression)
    depth = 0
    for c in text:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        assert depth >= 0
    assert depth == 0


def test_render_rejects_raw_strings():
    with pytest.raises(ValueError, match="Unsupported query node: 'title:solr'"):
        render("title:solr")  # type: ignore[arg-type]
