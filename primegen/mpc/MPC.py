import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, T


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "big"))

    @staticmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def is_divisible(value: T, divisor: int) -> bool:
        return gmpy2.is_divisible(value, divisor)

    @staticmethod
    def is_even(value: T) -> bool:
        return gmpy2.is_even(value)
