from abc import ABC, abstractmethod


class ISearchCoordinator(ABC):
    """Abstract base class defining the interface for a concurrent prime search."""

    @abstractmethod
    def find_prime(self) -> int:
        """Race parallel workers until one of them accepts a probable prime.

        Returns:
            int: The first prime accepted by any worker
        """

    @abstractmethod
    def get_bit_length(self) -> int:
        """Get the size of the primes searched for.

        Returns:
            int: Bit length of every candidate
        """

    @abstractmethod
    def get_rounds(self) -> int:
        """Get the Miller-Rabin round count.

        Returns:
            int: Rounds run per candidate
        """

    @abstractmethod
    def get_workers(self) -> int:
        """Get the number of parallel workers.

        Returns:
            int: Workers started per search
        """
