import pytest

from modcrypt.modexp import (
    a_x_mod_p,
    a_x_mod_p_log_variant,
    a_x_mod_p_via_log,
    dec_to_bin,
    mod_pow,
)

PRIMES = [5, 7, 11, 13, 23, 593]


def test_a_x_mod_p_source_case():
    assert a_x_mod_p(3, 100, 7) == 4


@pytest.mark.parametrize("p", PRIMES)
@pytest.mark.parametrize("a", [2, 3, 4, 10, 123])
@pytest.mark.parametrize("x", [0, 1, 2, 7, 100, 1000])
def test_a_x_mod_p_matches_pow_for_primes(p, a, x):
    if a % p == 0:
        a += 1
    assert a_x_mod_p(a, x, p) == pow(a, x, p)


def test_a_x_mod_p_modulus_one_is_error():
    with pytest.raises(ZeroDivisionError):
        a_x_mod_p(3, 4, 1)


def test_log_variant_zero_exponent_gives_base():
    assert a_x_mod_p_log_variant(5, 0, 7) == 5


@pytest.mark.parametrize("x", [1, 5, 13, 100])
def test_log_variant_agrees_with_classic_for_nonzero(x):
    assert a_x_mod_p_log_variant(3, x, 7) == a_x_mod_p(3, x, 7)


def test_dec_to_bin_pinned():
    assert dec_to_bin(13) == [1, 0, 1, 1]


def test_dec_to_bin_zero_is_empty():
    assert dec_to_bin(0) == []


@pytest.mark.parametrize("n", [1, 2, 3, 255, 256, 1000, 123456])
def test_dec_to_bin_round_trip(n):
    bits = dec_to_bin(n)
    assert sum(bit << i for i, bit in enumerate(bits)) == n
    assert bits[-1] == 1


def test_dec_to_bin_negative_rejected():
    with pytest.raises(ValueError):
        dec_to_bin(-3)


def test_mod_pow_modulus_one():
    assert mod_pow(17, 5, 1) == 0


def test_mod_pow_zero_exponent():
    assert mod_pow(17, 0, 5) == 1


@pytest.mark.parametrize("a,e,p", [(3, 13, 7), (2, 100, 1000), (10, 3, 9), (7, 1, 4)])
def test_mod_pow_matches_pow(a, e, p):
    assert mod_pow(a, e, p) == pow(a, e, p)


@pytest.mark.parametrize(
    "a,x,p,expected",
    [(3, 13, 7, 3), (5, 13, 7, 5), (5, 0, 7, 1), (3, 100, 7, 4), (3, 1, 7, 3)],
)
def test_via_log_source_cases(a, x, p, expected):
    assert a_x_mod_p_via_log(a, x, p) == expected


@pytest.mark.parametrize("a", [0, 1, 2, 9, 50])
@pytest.mark.parametrize("x", [1, 2, 3, 8, 31, 64, 999])
@pytest.mark.parametrize("p", [2, 6, 7, 100])
def test_via_log_matches_pow(a, x, p):
    assert a_x_mod_p_via_log(a, x, p) == pow(a, x, p)


def test_via_log_zero_exponent_modulus_one():
    assert a_x_mod_p_via_log(4, 0, 1) == 0


def test_via_log_negative_exponent_rejected():
    with pytest.raises(ValueError):
        a_x_mod_p_via_log(2, -1, 7)