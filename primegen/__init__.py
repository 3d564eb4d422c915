"""Concurrent probable-prime generation."""

from .search import SearchCoordinator
from .sequence import PrimeSequenceGenerator

__all__ = ["SearchCoordinator", "PrimeSequenceGenerator"]
