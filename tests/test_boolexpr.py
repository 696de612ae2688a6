import pytest

from uscriptkit.boolexpr import BoolExprError, BoolExprParser, string_to_bool


@pytest.fixture
def parser():
    return BoolExprParser()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("TRUE", True),
        ("FALSE", False),
        ("!TRUE", False),
        ("!!TRUE", True),
        ("TRUE && FALSE", False),
        ("TRUE || FALSE", True),
        ("FALSE || FALSE", False),
        ("TRUE && TRUE", True),
        ("FALSE || TRUE && FALSE", False),
        ("(FALSE || TRUE) && TRUE", True),
        ("!(TRUE && FALSE)", True),
        ("  TRUE  ", True),
        ("\t( TRUE )\n", True),
    ],
)
def test_evaluate(parser, text, expected):
    assert parser.evaluate(text) is expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "true", "TRUE FALSE", "TRUEX", "(TRUE", "TRUE ||", "&& TRUE", "TRUE & FALSE", ")"],
)
def test_invalid_expressions(parser, text):
    with pytest.raises(BoolExprError):
        parser.evaluate(text)


def test_error_is_value_error(parser):
    with pytest.raises(ValueError):
        parser.evaluate("MAYBE")


def test_deep_nesting_reports_error(parser):
    with pytest.raises(BoolExprError):
        parser.evaluate("!" * 100000 + "TRUE")


def test_de_morgan_invariant(parser):
    for a in ("TRUE", "FALSE"):
        for b in ("TRUE", "FALSE"):
            left = parser.evaluate(f"!({a} && {b})")
            right = parser.evaluate(f"!{a} || !{b}")
            assert left == right


@pytest.mark.parametrize(
    "text, expected",
    [("TRUE", True), ("!FALSE", True), ("FALSE", False), ("!TRUE", False), ("yes", False), ("", False)],
)
def test_string_to_bool(text, expected):
    assert string_to_bool(text) is expected