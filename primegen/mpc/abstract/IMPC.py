from abc import ABC, abstractmethod
from ..types import MPZ, T


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Interpret bytes as an unsigned big-endian magnitude.

        Args:
            data (bytes): Raw bytes

        Returns:
            MPZ: Non-negative integer with at most 8 * len(data) bits
        """

    @staticmethod
    @abstractmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def is_divisible(value: T, divisor: int) -> bool:
        """Check whether divisor divides value exactly.

        Args:
            value (MPZ): Value to test
            divisor (int): Candidate divisor

        Returns:
            bool: True if value % divisor == 0
        """

    @staticmethod
    @abstractmethod
    def is_even(value: T) -> bool:
        """Check whether value is even.

        Args:
            value (MPZ): Value to test

        Returns:
            bool: True if value is divisible by two
        """
