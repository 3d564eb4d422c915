import secrets
from .abstract.IRandom import IRandom
from .errors import RandomnessUnavailableError


class Random(IRandom):
    """Implementation of secure random number generation.

    Every draw goes to the operating system CSPRNG through ``secrets``,
    which is safe to share between threads and processes.
    """

    @staticmethod
    def get_bytes(byte_count: int) -> bytes:
        try:
            return secrets.token_bytes(byte_count)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError("Secure random source is unavailable") from e

    @staticmethod
    def get_bits(bit_count: int) -> int:
        try:
            return secrets.randbits(bit_count)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError("Secure random source is unavailable") from e

    @staticmethod
    def get_in_range(low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")

        span = high - low + 1
        bit_count = (span - 1).bit_length()

        # Rejection sampling keeps the draw uniform over the span
        while True:
            value = Random.get_bits(bit_count)
            if value < span:
                return low + value
