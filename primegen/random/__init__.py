"""Random number generation module."""

from .Random import Random
from .abstract.IRandom import IRandom
from .errors import RandomnessUnavailableError

__all__ = ["Random", "IRandom", "RandomnessUnavailableError"]
