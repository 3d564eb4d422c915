import pytest
from gmpy2 import mpz

from primegen.primes import SMALL_PRIMES, TrialDivisionFilter

# Primes above the table, so they have no factor in it
LARGE_PRIMES = [211, 7919, 2147483647, 4294967291, 2**61 - 1]


@pytest.mark.parametrize("value", [2, 3])
def test_trivial_primes_pass(value):
    """Test that 2 and 3 pass without consulting the table."""
    assert TrialDivisionFilter.passes(mpz(value))

@pytest.mark.parametrize("value", LARGE_PRIMES)
def test_large_primes_pass(value):
    """Test that primes with no small factor pass the pre-check."""
    assert TrialDivisionFilter.passes(mpz(value))

def test_multiples_of_small_primes_rejected():
    """Test that any multiple of a table prime is rejected."""
    for prime in SMALL_PRIMES:
        for cofactor in (2, 3, 211, 4294967291):
            assert not TrialDivisionFilter.passes(mpz(prime * cofactor))

def test_small_primes_above_three_rejected():
    """Test that table primes other than 2 and 3 are rejected as divisible by themselves."""
    for prime in SMALL_PRIMES[2:]:
        assert not TrialDivisionFilter.passes(mpz(prime))

def test_even_values_rejected():
    """Test that even values are rejected because 2 is in the table."""
    for value in (0, 4, 2**32, 2**64 - 2):
        assert not TrialDivisionFilter.passes(mpz(value))

def test_composites_with_large_factors_pass():
    """Test that the pre-check only catches small factors, leaving the rest to Miller-Rabin."""
    assert TrialDivisionFilter.passes(mpz(211 * 223))

def test_fermat_pseudoprime_rejected():
    """Test that 341 = 11 * 31 is rejected by trial division."""
    assert not TrialDivisionFilter.passes(mpz(341))

def test_accepts_plain_int():
    """Test that plain Python integers are accepted as well as mpz."""
    assert TrialDivisionFilter.passes(4294967291)
    assert not TrialDivisionFilter.passes(4294967295)
