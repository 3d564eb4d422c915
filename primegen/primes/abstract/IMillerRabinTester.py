from abc import ABC, abstractmethod
from ...mpc.types import T


class IMillerRabinTester(ABC):
    """Abstract base class defining the interface for the Miller-Rabin primality test."""

    @staticmethod
    @abstractmethod
    def is_probably_prime(value: T, rounds: int) -> bool:
        """Run the Miller-Rabin test.

        Args:
            value (MPZ): Candidate to test.
            rounds (int): Number of random witnesses to try.

        Returns:
            bool: False if value is certainly composite, True if it is prime
                  with error probability at most 4^-rounds
        """
