import math

import pytest

from structlab.recursion import factorial, main, merge_sort_string, sine, swap_pairs


def test_swap_pairs_even_length():
    assert swap_pairs([0, 2, 4, 6, 8, 10]) == [2, 0, 6, 4, 10, 8]


def test_swap_pairs_odd_length_keeps_last():
    assert swap_pairs(["a", "b", "c"]) == ["b", "a", "c"]


@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(9)), list("abcdef")])
def test_swap_pairs_twice_is_identity(values):
    assert swap_pairs(swap_pairs(values)) == values


def test_swap_pairs_does_not_mutate_input():
    data = [1, 2, 3, 4]
    swap_pairs(data)
    assert data == [1, 2, 3, 4]


def test_factorial_base_case():
    assert factorial(0) == 1.0


@pytest.mark.parametrize("n", range(1, 25))
def test_factorial_recurrence(n):
    assert factorial(n) == pytest.approx(n * factorial(n - 1))


def test_factorial_matches_math():
    assert factorial(15) == float(math.factorial(15))


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("x", [0.0, 0.5, -1.2, 2.0, 3.14159])
def test_sine_matches_math(x):
    assert sine(x, 20) == pytest.approx(math.sin(x), abs=1e-12)


@pytest.mark.parametrize("x", [0.3, -2.5, 7.0])
def test_sine_zero_terms_is_x(x):
    assert sine(x, 0) == x


@pytest.mark.parametrize("x", [0.4, 1.1, -0.9])
def test_sine_is_odd(x):
    assert sine(-x, 10) == pytest.approx(-sine(x, 10))


def test_sine_negative_terms():
    with pytest.raises(ValueError):
        sine(1.0, -1)


@pytest.mark.parametrize("text", ["ba", "zyxw", "structures", "mergesort"])
def test_merge_sort_is_permutation(text):
    assert sorted(merge_sort_string(text)) == sorted(text)


def test_merge_sort_leaves_leading_pair():
    assert merge_sort_string("ba") == "ba"


def test_merge_sort_empty():
    with pytest.raises(ValueError):
        merge_sort_string("")


def test_main_swap(capsys):
    assert main(["swap"]) == 0
    assert capsys.readouterr().out == "0 2 4 6 8 10 \n2 0 6 4 10 8 \n"


def test_main_sine_zero(capsys):
    assert main(["sine", "0"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_main_sine_invalid(capsys):
    assert main(["sine", "abc"]) == 1
    assert "Not a valid double" in capsys.readouterr().out


def test_main_sort(capsys):
    assert main(["sort", "adcb"]) == 0
    assert capsys.readouterr().out == "abcd\n"


def test_main_missing_argument():
    with pytest.raises(SystemExit):
        main(["sine"])