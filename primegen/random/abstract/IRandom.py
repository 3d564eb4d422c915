from abc import ABC, abstractmethod


class IRandom(ABC):
    """Abstract base class defining the interface for secure random number generation."""

    @staticmethod
    @abstractmethod
    def get_bytes(byte_count: int) -> bytes:
        """Get bytes from a cryptographically secure source.

        Args:
            byte_count (int): Number of bytes to draw.

        Returns:
            bytes: Secure random bytes

        Raises:
            RandomnessUnavailableError: If the secure source cannot be read.
        """

    @staticmethod
    @abstractmethod
    def get_bits(bit_count: int) -> int:
        """Get a secure random integer in [0, 2^bit_count - 1].

        Args:
            bit_count (int): Number of random bits.

        Returns:
            int: Secure random integer
        """

    @staticmethod
    @abstractmethod
    def get_in_range(low: int, high: int) -> int:
        """Get a secure random integer uniformly distributed in [low, high].

        Args:
            low (int): Inclusive lower bound.
            high (int): Inclusive upper bound.

        Returns:
            int: Secure random integer
        """
