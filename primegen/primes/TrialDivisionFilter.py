from ..mpc import MPC
from ..mpc.types import T
from .abstract.ITrialDivisionFilter import ITrialDivisionFilter
from .constants import SMALL_PRIMES, TRIVIAL_PRIMES


class TrialDivisionFilter(ITrialDivisionFilter):
    """Implementation of trial division by every prime in SMALL_PRIMES."""

    @staticmethod
    def passes(value: T) -> bool:
        if value in TRIVIAL_PRIMES:
            return True

        for prime in SMALL_PRIMES:
            if MPC.is_divisible(value, prime):
                return False

        return True
