from abc import ABC, abstractmethod
from typing import Iterator, List


class IPrimeSequenceGenerator(ABC):
    """Abstract base class defining the interface for generating several primes."""

    @abstractmethod
    def generate(self, count: int) -> Iterator[int]:
        """Yield count independently found primes in the order they are found.

        Args:
            count (int): Number of primes to produce, at least 1.

        Returns:
            Iterator[int]: The primes, one per completed search
        """

    @abstractmethod
    def generate_list(self, count: int) -> List[int]:
        """Collect generate(count) into a list.

        Args:
            count (int): Number of primes to produce, at least 1.

        Returns:
            List[int]: The primes in the order they were found
        """
