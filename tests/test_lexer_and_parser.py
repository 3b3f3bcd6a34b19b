import pytest
from hypothesis import given, strategies as st

from ok.errors import OkSyntaxError
from ok.reader.parser import MAX_NESTING, Token, lex, parse
from ok.types.nil import Nil
from ok.types.nodes import Block, Call, Const, NIL_CONST, Ref
from ok.types.value import INT64_MAX, Number, String


def _types(source):
    return [(t.type, t.value) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("ident", "a")]),
        ("(a b)", [("open", "("), ("ident", "a"), ("ident", "b"), ("close", ")")]),
        ('"hello world"', [("string", '"hello world"')]),
        ("123", [("number", "123")]),
        ("12ab", [("number", "12"), ("ident", "ab")]),
        ("(+ 1 2)", [("open", "("), ("op", "+"), ("number", "1"), ("number", "2"), ("close", ")")]),
        ("<= != &&", [("op", "<="), ("op", "!="), ("op", "&&")]),
        ("a; b", [("ident", "a"), ("semi", ";"), ("ident", "b")]),
        ("  \n\t ", []),
        ("", []),
    ],
)
def test_lexer_basic(source, expected):
    assert _types(source) == expected


def test_lexer_positions():
    tokens = list(lex("(a\n  bb)"))
    assert tokens[0] == Token("open", "(", 0, 1, 1)
    assert tokens[1] == Token("ident", "a", 1, 1, 2)
    assert tokens[2] == Token("ident", "bb", 5, 2, 3)
    assert tokens[3] == Token("close", ")", 7, 2, 5)


@pytest.mark.parametrize("source,line,column", [("a $", 1, 3), ('(a\n "open', 2, 2), ("@", 1, 1)])
def test_lexer_errors_carry_position(source, line, column):
    with pytest.raises(OkSyntaxError) as exc:
        list(lex(source, "file.ok"))
    assert (exc.value.line, exc.value.column) == (line, column)
    assert str(exc.value).startswith(f"file.ok:{line}:{column}:")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", NIL_CONST),
        ("   ", NIL_CONST),
        ("x", Ref("x")),
        ("+", Ref("+")),
        ("42", Const(Number(42))),
        ('"hi"', Const(String("hi"))),
        ('"a\\nb"', Const(String("a\\nb"))),
        ("(f)", Call(Ref("f"))),
        ("(f 1 x)", Call(Ref("f"), (Const(Number(1)), Ref("x")))),
        ("(= (f) 1)", Call(Ref("="), (Call(Ref("f")), Const(Number(1))))),
        ("a b", Block((Ref("a"), Ref("b")))),
        ("a; b;", Block((Ref("a"), Ref("b")))),
        ("(f);", Call(Ref("f"))),
    ],
)
def test_parser(source, expected):
    assert parse("<test>", source) == expected


def test_empty_program_is_nil_const():
    node = parse("<test>", "")
    assert node.value is Nil


@pytest.mark.parametrize(
    "source",
    [
        "(",
        "(a",
        ")",
        "(a))",
        "()",
        "((f) 1)",
        '("f" 1)',
        "(1 2)",
        ";",
        "a;;",
        "(a ; b)",
        '"unterminated',
    ],
)
def test_parser_rejects(source):
    with pytest.raises(OkSyntaxError):
        parse("<test>", source)


def test_number_out_of_range():
    assert parse("<test>", str(INT64_MAX)) == Const(Number(INT64_MAX))
    with pytest.raises(OkSyntaxError, match="out of range"):
        parse("<test>", str(INT64_MAX + 1))


def test_unexpected_eof_position():
    with pytest.raises(OkSyntaxError) as exc:
        parse("src", "(a\n  b")
    assert exc.value.line == 2
    assert exc.value.column == 4
    assert "expected ')'" in exc.value.message


def _nested(depth):
    return "(id " * depth + "1" + ")" * depth


def test_nesting_up_to_limit_parses(env, run):
    node = parse("<test>", _nested(MAX_NESTING))
    assert isinstance(node, Call)
    assert run(env, _nested(200)) == Number(1)


@pytest.mark.parametrize("depth", [MAX_NESTING + 1, 400, 5000])
def test_nesting_too_deep(depth):
    source = "\n" + _nested(depth)
    with pytest.raises(OkSyntaxError, match="nesting too deep") as exc:
        parse("deep", source)
    assert exc.value.line == 2
    assert exc.value.column == MAX_NESTING * 4 + 1


# Convert nested lists of tags/numbers into source text
def _to_source(expr):
    if isinstance(expr, list):
        return "(" + " ".join(_to_source(e) for e in expr) + ")"
    return str(expr)


def _to_node(expr):
    if isinstance(expr, list):
        return Call(Ref(expr[0]), tuple(_to_node(e) for e in expr[1:]))
    if isinstance(expr, int):
        return Const(Number(expr))
    return Ref(expr)


tags = st.from_regex(r"(?:[a-zA-Z_][a-zA-Z0-9_]{0,8}|[-+*/%<>=!&|^]{1,3})", fullmatch=True)
atoms = st.one_of(tags, st.integers(min_value=0, max_value=INT64_MAX))
forms = st.recursive(
    atoms,
    lambda children: st.builds(lambda head, rest: [head, *rest], tags, st.lists(children, max_size=4)),
    max_leaves=20,
)


@given(forms)
def test_parse_matches_structure(expr):
    assert parse("<prop>", _to_source(expr)) == _to_node(expr)
