import pytest

from structlab.primes import is_prime, next_prime


@pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 21, 25, 49, 91, 100])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97, 7919])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("a", [3, 5, 7, 11])
@pytest.mark.parametrize("b", [3, 13, 17])
def test_products_are_composite(a, b):
    assert is_prime(a * b) is False


def test_next_prime_of_prime_odd_is_itself():
    assert next_prime(7) == 7
    assert next_prime(13) == 13


def test_next_prime_of_two_skips_to_odd():
    assert next_prime(2) == 3


@pytest.mark.parametrize("n", range(0, 200))
def test_next_prime_is_prime_and_not_smaller(n):
    result = next_prime(n)
    assert result >= n
    assert is_prime(result)


@pytest.mark.parametrize("n", range(3, 200, 2))
def test_no_prime_skipped_for_odd_start(n):
    result = next_prime(n)
    assert not any(is_prime(k) for k in range(n, result))


def test_negative_rejected():
    with pytest.raises(ValueError):
        is_prime(-5)
    with pytest.raises(ValueError):
        next_prime(-1)