import logging

import pytest

from mankai.errors import MankaiSyntaxError, MankaiUnboundSymbol
from mankai.interpreter import Interpreter
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol


def test_eval_returns_last_value():
    interp = Interpreter()
    assert interp.eval("(set! a 2) (set! b 3) (* a b)") == 6


def test_eval_empty_input_is_empty_list():
    assert Interpreter().eval("  ; only a comment\n") == []


def test_interpreter_uses_supplied_environment(env):
    interp = Interpreter(env)
    interp.eval("(set! shared 1)")
    assert env.lookup(Symbol("shared")) == 1


def test_default_environment_is_global():
    env = Interpreter().env
    assert isinstance(env, Environment)
    assert env.outer is None
    assert Symbol("lambda!") in env


def test_eval_logs_each_expression(caplog):
    with caplog.at_level(logging.DEBUG, logger="mankai.interpreter"):
        Interpreter().eval("(+ 1 2) 3")
    assert len([r for r in caplog.records if r.name == "mankai.interpreter"]) == 2


@pytest.mark.parametrize("source", ['(set! x 1) "unterminated', "(set! x 1) (car"])
def test_syntax_error_anywhere_leaves_session_untouched(source):
    interp = Interpreter()
    with pytest.raises(MankaiSyntaxError):
        interp.eval(source)
    with pytest.raises(MankaiUnboundSymbol):
        interp.eval("x")
