import pytest
from unittest.mock import patch

from primegen.primes import CandidateGenerator
from primegen.random import Random


@pytest.mark.parametrize("bit_length", [32, 40, 64, 256, 1024])
def test_candidate_has_exact_bit_length(bit_length):
    """Test that every candidate has exactly bit_length bits."""
    for _ in range(50):
        candidate = CandidateGenerator.generate(bit_length)
        assert 2 ** (bit_length - 1) <= candidate < 2**bit_length
        assert int(candidate).bit_length() == bit_length

def test_candidate_reads_one_byte_per_eight_bits():
    """Test that bytes from the secure source become the candidate's magnitude."""
    with patch.object(Random, "get_bytes", return_value=b"\x12\x34\x56\x78") as mock_bytes:
        candidate = CandidateGenerator.generate(32)
    mock_bytes.assert_called_once_with(4)
    assert candidate == 0x92345678  # Top bit forced on

def test_candidate_bounds_from_extreme_bytes():
    """Test the smallest and largest candidates the generator can emit."""
    with patch.object(Random, "get_bytes", return_value=b"\x00" * 4):
        assert CandidateGenerator.generate(32) == 2**31
    with patch.object(Random, "get_bytes", return_value=b"\xff" * 4):
        assert CandidateGenerator.generate(32) == 2**32 - 1

def test_candidate_partial_byte_bit_length():
    """Test that surplus bits are dropped when bit_length is not a multiple of 8."""
    with patch.object(Random, "get_bytes", return_value=b"\xff" * 5):
        candidate = CandidateGenerator.generate(33)
    assert candidate == 2**33 - 1

def test_candidates_vary():
    """Test that the generator is not stuck on one value."""
    candidates = {int(CandidateGenerator.generate(64)) for _ in range(20)}
    assert len(candidates) > 1
