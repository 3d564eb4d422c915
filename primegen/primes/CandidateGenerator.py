from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from .abstract.ICandidateGenerator import ICandidateGenerator


class CandidateGenerator(ICandidateGenerator):
    """Implementation of random candidate generation from the secure random source."""

    @staticmethod
    def generate(bit_length: int) -> MPZ:
        byte_count = (bit_length + 7) // 8
        value = MPC.from_bytes(Random.get_bytes(byte_count))

        # Drop surplus bits when bit_length is not a whole number of bytes
        value >>= byte_count * 8 - bit_length

        # Force the top bit so every candidate has exactly bit_length bits
        return value | (1 << (bit_length - 1))
