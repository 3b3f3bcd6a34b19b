import pytest
from hypothesis import given, strategies as st

from ok.reader.balance import INDETERMINATE, analyze_balance


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(a (b", 2),
        ("(a) )", INDETERMINATE),
        ("(a b)", 0),
        ("", 0),
        ("x y z", 0),
        (")(", INDETERMINATE),
        ("(a (b c) (d", 2),
        ('(print "(((")', 0),
        ('(print "unterminated', INDETERMINATE),
        ("(a $", INDETERMINATE),
        ("(let x\n  (list 1\n", 2),
    ],
)
def test_analyze_balance(source, expected):
    assert analyze_balance(source) == expected


def test_balanced_but_invalid_is_zero():
    # balance only counts delimiters, not grammar
    assert analyze_balance("(1 2)") == 0
    assert analyze_balance("()") == 0


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=50))
def test_opens_then_closes(opens, closes):
    source = "(f " * opens + ")" * closes
    expected = opens - closes if closes <= opens else INDETERMINATE
    assert analyze_balance(source) == expected
