from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class ICandidateGenerator(ABC):
    """Abstract base class defining the interface for prime candidate generation."""

    @staticmethod
    @abstractmethod
    def generate(bit_length: int) -> MPZ:
        """Draw a random candidate of the requested size.

        Args:
            bit_length (int): Number of bits in the candidate.

        Returns:
            MPZ: A random integer with exactly bit_length bits
        """
