import pytest

from structlab.memo import (
    child_steps,
    child_steps_naive,
    counting_sort_string,
    fib,
    fib_naive,
    parse_steps,
)


def test_parse_steps_plain():
    assert parse_steps("12") == 12


def test_parse_steps_leading_prefix():
    assert parse_steps("  7abc") == 7


def test_parse_steps_not_integer():
    with pytest.raises(ValueError, match="Not a valid integer"):
        parse_steps("steps")


@pytest.mark.parametrize("text", ["0", "-3"])
def test_parse_steps_too_small(text):
    with pytest.raises(ValueError, match="must be 1 or more"):
        parse_steps(text)


def test_child_steps_bases():
    assert [child_steps(n) for n in (1, 2, 3)] == [1, 2, 4]


@pytest.mark.parametrize("n", range(1, 20))
def test_child_steps_matches_naive(n):
    assert child_steps(n) == child_steps_naive(n)


@pytest.mark.parametrize("n", range(4, 60))
def test_child_steps_recurrence(n):
    assert child_steps(n) == child_steps(n - 1) + child_steps(n - 2) + child_steps(n - 3)


@pytest.mark.parametrize("func", [child_steps, child_steps_naive])
def test_child_steps_rejects_zero(func):
    with pytest.raises(ValueError):
        func(0)


def test_fib_bases():
    assert fib(0) == 1
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(0, 22))
def test_fib_matches_naive(n):
    assert fib(n) == fib_naive(n)


@pytest.mark.parametrize("n", range(2, 100))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


@pytest.mark.parametrize("func", [fib, fib_naive])
def test_fib_negative(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("text", ["", "a", "morrison", "Hello, World!", "zzyyxx", "a1B2c3"])
def test_counting_sort_matches_sorted(text):
    assert counting_sort_string(text) == "".join(sorted(text))


def test_counting_sort_keeps_length():
    text = "structures and algorithms"
    assert len(counting_sort_string(text)) == len(text)


def test_counting_sort_rejects_non_ascii():
    with pytest.raises(ValueError):
        counting_sort_string("café")