import logging

import pytest

from ok.config import get_log_level, get_max_depth
from ok.errors import OkStackExhausted
from ok.types.environment import Env
from ok.types.nil import Nil
from ok.types.value import Number, String


@pytest.fixture
def stack():
    return Env([{"x": Number(1)}, {"y": Number(2)}], max_depth=10)


def test_get_walks_innermost_to_outermost(stack):
    assert stack.get("x") == Number(1)
    assert stack.get("y") == Number(2)
    stack.push({"x": Number(3)})
    assert stack.get("x") == Number(3)
    stack.pop()
    assert stack.get("x") == Number(1)


def test_get_distinguishes_unbound_from_nil(stack):
    assert stack.get("missing") is None
    stack.set("n", Nil)
    assert stack.get("n") is Nil
    assert "n" in stack
    assert "missing" not in stack


def test_set_and_delete_act_on_innermost_scope(stack):
    stack.push()
    stack.set("x", String("inner"))
    assert stack.scopes[-1] == {"x": String("inner")}
    assert stack.scopes[0]["x"] == Number(1)

    stack.delete("x")
    assert stack.get("x") == Number(1)
    # deleting a name bound only in an outer scope leaves it alone
    stack.delete("y")
    assert stack.get("y") == Number(2)


def test_delete_absent_key_is_noop(stack):
    stack.delete("nothing")
    assert stack.get("nothing") is None


def test_pop_last_scope_is_a_programming_error():
    env = Env()
    with pytest.raises(RuntimeError):
        env.pop()


def test_scope_context_pops_on_error(stack):
    depth = len(stack.scopes)
    with pytest.raises(ValueError):
        with stack.scope({"tmp": Number(9)}):
            assert stack.get("tmp") == Number(9)
            raise ValueError("boom")
    assert len(stack.scopes) == depth
    assert stack.get("tmp") is None


def test_depth_guard():
    env = Env(max_depth=2)
    env.push()
    env.push()
    assert env.depth == 2
    with pytest.raises(OkStackExhausted):
        env.push()
    assert env.depth == 2


def test_max_depth_from_config(monkeypatch):
    monkeypatch.setenv("OK_MAX_DEPTH", "7")
    assert Env().max_depth == 7


@pytest.mark.parametrize("raw", ["seven", "-3", "0", "1.5"])
def test_malformed_max_depth_falls_back(monkeypatch, caplog, raw):
    monkeypatch.setenv("OK_MAX_DEPTH", raw)
    with caplog.at_level(logging.WARNING, logger="ok.config"):
        assert get_max_depth() == 100
    assert "OK_MAX_DEPTH" in caplog.text


@pytest.mark.parametrize("raw,expected", [("debug", "DEBUG"), (" info ", "INFO"), ("", "WARNING"), ("loud", "WARNING")])
def test_log_level_from_config(monkeypatch, raw, expected):
    monkeypatch.setenv("OK_LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_str_and_repr(stack):
    assert str(stack) == "{y: 2@number} -> ..."
    assert repr(stack) == "<Env stack: {x: 1@number} -> {y: 2@number}>"
