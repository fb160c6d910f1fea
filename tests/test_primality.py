import math

import pytest

from modcrypt.primality import (
    ModulusError,
    fermats_condition,
    gcd,
    is_prime,
    validate_modulus,
)


def test_gcd_source_case():
    assert gcd(1234, 54) == 2


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (100, 75), (1, 1), (0, 9), (81, 27)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero_second():
    assert gcd(42, 0) == 42


def test_is_prime_source_case():
    assert is_prime(23)


@pytest.mark.parametrize("n", [-7, 0, 1, 2, 3, 4, 6, 9, 12, 15])
def test_is_prime_rejects_small_and_multiples_of_two_or_three(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", [185, 1001])
def test_is_prime_rejects_composites_with_small_factors(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", [5, 7, 97, 1009, 7919])
def test_is_prime_accepts_primes(n):
    assert is_prime(n)


def test_fermats_condition_rejects_even_and_small():
    assert not fermats_condition(4, 3)
    assert not fermats_condition(1, 3)


def test_fermats_condition_two_is_accepted():
    assert fermats_condition(2, 9)


def test_fermats_condition_detects_common_factor():
    assert fermats_condition(561, 1)
    assert not fermats_condition(561, 2)


def test_fermats_condition_clamps_large_k():
    assert fermats_condition(29, 100) == fermats_condition(29, 9)


def test_fermats_condition_skips_bases_not_below_p():
    assert fermats_condition(23, 100)


def test_fermats_condition_non_positive_k_checks_nothing():
    assert fermats_condition(15, 0)
    assert fermats_condition(15, -1)


def test_validate_modulus_accepts_prime():
    assert validate_modulus(23, 5) is True


def test_validate_modulus_rejects_non_prime():
    with pytest.raises(ModulusError, match="not a prime"):
        validate_modulus(24, 3)


def test_validate_modulus_rejects_fermat_failure():
    with pytest.raises(ModulusError, match="Fermat"):
        validate_modulus(25, 3)


def test_modulus_error_is_value_error():
    with pytest.raises(ValueError):
        validate_modulus(0, 1)