import pytest

from practicum.primes import primes_between, print_primes


def test_print_rejects_negative_parameters():
    with pytest.raises(ValueError):
        print_primes(-2, -5)


def test_print_rejects_reversed_range():
    with pytest.raises(ValueError):
        print_primes(10, 5)


def test_print_output(capsys):
    print_primes(4, 10)
    assert capsys.readouterr().out == "Prime numbers from: 4  to: 10\n[ 5 7  ]\n"


def test_get_rejects_negative_parameters():
    with pytest.raises(ValueError, match="Enter the correct parameters!"):
        primes_between(-2, -5)


def test_get_rejects_reversed_range():
    with pytest.raises(ValueError):
        primes_between(10, 5)


def test_get_rejects_stop_below_two():
    with pytest.raises(ValueError):
        primes_between(0, 1)


def test_get_in_range():
    assert primes_between(4, 10) == [5, 7]


def test_get_returns_correct_result():
    assert primes_between(0, 11) == [2, 3, 5, 7, 11]


def test_every_result_is_prime_and_in_range():
    result = primes_between(50, 200)
    assert all(50 <= p <= 200 for p in result)
    assert all(all(p % d for d in range(2, p)) for p in result)
    assert result == sorted(result)