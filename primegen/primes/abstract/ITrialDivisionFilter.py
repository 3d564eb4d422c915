from abc import ABC, abstractmethod
from ...mpc.types import T


class ITrialDivisionFilter(ABC):
    """Abstract base class defining the interface for the small-prime pre-check."""

    @staticmethod
    @abstractmethod
    def passes(value: T) -> bool:
        """Cheaply reject values with a small prime factor.

        Args:
            value (MPZ): Candidate to check.

        Returns:
            bool: False if value is definitely composite, True if it passes the pre-check
        """
