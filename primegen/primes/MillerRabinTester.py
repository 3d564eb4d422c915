from typing import Tuple

from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..protocol_constants import DEFAULT_ROUNDS
from ..random import Random
from .abstract.IMillerRabinTester import IMillerRabinTester
from .constants import TRIVIAL_PRIMES


class MillerRabinTester(IMillerRabinTester):
    """Implementation of the Miller-Rabin probabilistic primality test.

    A "composite" verdict is always correct. A "probably prime" verdict is
    wrong with probability at most 4^-rounds, since each random witness
    exposes a composite with probability at least 3/4.
    """

    @staticmethod
    def is_probably_prime(value: T, rounds: int = DEFAULT_ROUNDS) -> bool:
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")

        n = MPC.mpz(value)
        if n < 2:
            return False
        if n in TRIVIAL_PRIMES:
            return True
        if MPC.is_even(n):
            return False

        r, d = MillerRabinTester.decompose(n)
        for _ in range(rounds):
            witness = Random.get_in_range(2, n - 2)
            if MillerRabinTester._is_composite_witness(witness, n, r, d):
                return False

        return True

    @staticmethod
    def decompose(n: T) -> Tuple[int, MPZ]:
        """Write n - 1 as 2^r * d with d odd.

        Args:
            n (MPZ): Odd value greater than 2.

        Returns:
            Tuple[int, MPZ]: The pair (r, d)
        """
        r = 0
        d = MPC.mpz(n - 1)
        while MPC.is_even(d):
            r += 1
            d >>= 1
        return r, d

    # Private Methods
    # --------------

    @staticmethod
    def _is_composite_witness(witness: int, n: MPZ, r: int, d: MPZ) -> bool:
        """Run one round with the given witness; True means n is certainly composite."""
        n_minus_one = n - 1

        x = MPC.powmod(witness, d, n)
        if x == 1 or x == n_minus_one:
            return False

        for _ in range(r - 1):
            x = MPC.powmod(x, 2, n)
            if x == n_minus_one:
                return False
            if x == 1:
                # Nontrivial square root of 1
                return True

        return True
