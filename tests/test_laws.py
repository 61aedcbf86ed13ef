# tests/test_laws.py
import pytest
from hypothesis import given, strategies as st

from conftest import assert_result_eq
from tinyparsec.Char import integer, removing_literal
from tinyparsec.Parsec import Cursor
from tinyparsec.Prim import always, never

# Inputs that make the parsers below succeed, fail, and fail half-way
inputs = st.text(alphabet="0123456789,x-", max_size=12)
vals = st.integers(min_value=0, max_value=1000)


def run_p(p, input_str=""):
    """Helper to run a parser on a fresh cursor"""
    return p(Cursor(input_str))


def then_comma(n):
    return removing_literal(",").map(lambda _: n)


def plus_int(n):
    return integer().map(lambda k: n + k)


# Parsers that consume, that fail without consuming, and that never succeed
monads = [integer(), removing_literal("-").map(lambda _: 0), never()]


# 1. Left Identity: return a >>= f  === f a
@given(vals, inputs)
def test_monad_left_identity(v, text):
    for f in (then_comma, plus_int):
        assert_result_eq(run_p(always(v).flat_map(f), text), run_p(f(v), text))


# 2. Right Identity: m >>= return === m
@pytest.mark.parametrize("m", monads)
@given(text=inputs)
def test_monad_right_identity(m, text):
    assert_result_eq(run_p(m.flat_map(always), text), run_p(m, text))


# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@pytest.mark.parametrize("m", monads)
@given(text=inputs)
def test_monad_associativity(m, text):
    lhs = m.flat_map(then_comma).flat_map(plus_int)
    rhs = m.flat_map(lambda x: then_comma(x).flat_map(plus_int))

    res_lhs = run_p(lhs, text)
    assert_result_eq(res_lhs, run_p(rhs, text))
    if not res_lhs.is_ok:
        # a failed chain never leaks partial consumption
        assert res_lhs.cursor.offset == 0


# Functor identity: fmap id === id
@pytest.mark.parametrize("m", monads)
@given(text=inputs)
def test_functor_identity(m, text):
    assert_result_eq(run_p(m.map(lambda x: x), text), run_p(m, text))


# Functor composition: fmap (g . f) === fmap g . fmap f
@pytest.mark.parametrize("m", monads)
@given(text=inputs)
def test_functor_composition(m, text):
    f = lambda x: x + 1
    g = lambda y: y * 2
    assert_result_eq(run_p(m.map(lambda x: g(f(x))), text), run_p(m.map(f).map(g), text))
