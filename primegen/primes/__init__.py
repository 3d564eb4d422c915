"""Prime candidate generation and primality testing module."""

from .constants import SMALL_PRIMES
from .CandidateGenerator import CandidateGenerator
from .TrialDivisionFilter import TrialDivisionFilter
from .MillerRabinTester import MillerRabinTester
from .abstract.ICandidateGenerator import ICandidateGenerator
from .abstract.ITrialDivisionFilter import ITrialDivisionFilter
from .abstract.IMillerRabinTester import IMillerRabinTester

__all__ = [
    "SMALL_PRIMES",
    "CandidateGenerator",
    "TrialDivisionFilter",
    "MillerRabinTester",
    "ICandidateGenerator",
    "ITrialDivisionFilter",
    "IMillerRabinTester",
]
