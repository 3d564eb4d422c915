"""Prime sequence generation module."""

from .PrimeSequenceGenerator import PrimeSequenceGenerator
from .abstract.IPrimeSequenceGenerator import IPrimeSequenceGenerator

__all__ = ["PrimeSequenceGenerator", "IPrimeSequenceGenerator"]
