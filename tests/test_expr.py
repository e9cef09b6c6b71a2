import pytest

from basic_expr import Cursor, Evaluator, evaluate, int_div, wrap32
from basic_vars import VariableStore


@pytest.fixture
def store():
    return VariableStore()


@pytest.mark.parametrize("text,value", [
    ("2+3*4", 14),
    ("(2+3)*4", 20),
    ("10/3", 3),
    ("10/0", 0),
    ("8-3-2", 3),
    ("100/10/5", 2),
    ("-2*3", -6),
    ("-(2+3)", -5),
    ("--4", 4),
    ("-7/2", -3),
    ("7/-2", -3),
    (" 2 \t+  3 ", 5),
])
def test_arithmetic(store, text, value):
    assert evaluate(text, store) == value


def test_int_div_truncates_toward_zero():
    assert int_div(-9, 4) == -2
    assert int_div(9, -4) == -2
    assert int_div(-9, -4) == 2
    assert int_div(5, 0) == 0


def test_variables(store):
    store.set(0, 5)
    store.set(25, -2)
    assert evaluate("A*Z", store) == -10
    assert evaluate("Q", store) == 0


def test_lowercase_is_not_a_variable(store):
    store.set(0, 5)
    assert evaluate("a", store) == 0


def test_array_reads_are_range_checked(store):
    store.dim(1, 3)
    store.write(1, 1, 7)
    assert evaluate("B(1)", store) == 7
    assert evaluate("B(0+1)*2", store) == 14
    assert evaluate("B(5)", store) == 0
    assert evaluate("B(-1)", store) == 0
    assert evaluate("C(0)", store) == 0


def test_missing_close_paren_is_tolerated(store):
    assert evaluate("(1+2", store) == 3
    store.dim(1, 2)
    store.write(1, 0, 4)
    assert evaluate("B(0", store) == 4


def test_malformed_operands_are_zero(store):
    assert evaluate("", store) == 0
    assert evaluate("+", store) == 0
    assert evaluate("3*", store) == 0
    assert evaluate("#", store) == 0


def test_cursor_stops_at_first_unconsumed_char(store):
    cur = Cursor("5 ) + 1")
    assert Evaluator(store).expr(cur) == 5
    assert cur.peek() == ')'

    cur = Cursor("12 THEN 40")
    assert Evaluator(store).expr(cur) == 12
    assert cur.startswith("THEN")


def cond(text, store):
    return Evaluator(store).condition(Cursor(text))


@pytest.mark.parametrize("text,expected", [
    ("1=1", True), ("1=2", False),
    ("1<>2", True), ("3<>3", False),
    ("1<2", True), ("2<1", False),
    ("2>1", True), ("1>2", False),
    ("2<=2", True), ("3<=2", False),
    ("2>=2", True), ("1>=2", False),
    ("1 + 1 = 2", True),
])
def test_relational_operators(store, text, expected):
    assert cond(text, store) is expected


def test_not_equal_is_not_less_than(store):
    # read as '<' then '>1' it would be 2 < 0
    assert cond("2<>1", store) is True


def test_double_equals_is_not_an_operator(store):
    assert cond("1==1", store) is False


def test_missing_operator_is_false(store):
    cur = Cursor("5 THEN 10")
    assert Evaluator(store).condition(cur) is False
    assert cur.startswith("THEN")


def test_condition_uses_variables(store):
    store.set(0, 5)
    assert cond("A>3", store) is True
    assert cond("A*2<10", store) is False


def test_wrap32():
    assert wrap32(2147483647) == 2147483647
    assert wrap32(2147483648) == -2147483648
    assert wrap32(-2147483649) == 2147483647
    assert wrap32(2 ** 32) == 0


def test_arithmetic_wraps_to_32_bits(store):
    assert evaluate("2147483647+1", store) == -2147483648
    assert evaluate("0-2147483647-2", store) == 2147483647
    assert evaluate("46341*46341", store) == -2147479015
    assert evaluate("65536*65536", store) == 0
    assert evaluate("4294967296", store) == 0
    store.set(0, -2147483648)
    assert evaluate("-A", store) == -2147483648
    assert evaluate("A/-1", store) == -2147483648
