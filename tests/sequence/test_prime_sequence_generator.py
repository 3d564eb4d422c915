import gmpy2
import pytest
from unittest.mock import patch

from primegen.search import SearchCoordinator, WorkerMode
from primegen.sequence import PrimeSequenceGenerator


@pytest.fixture
def create_generator():
    """Factory fixture to create thread-mode PrimeSequenceGenerator instances."""
    def _create_instance(bit_length, workers=2):
        return PrimeSequenceGenerator(bit_length, workers=workers, worker_mode=WorkerMode.THREAD)
    return _create_instance

def test_single_prime_32_bits(create_generator):
    """Test that bitLength=32, count=1 produces one odd prime in [2^31, 2^32 - 1]."""
    primes = create_generator(32).generate_list(1)
    assert len(primes) == 1
    prime = primes[0]
    assert 2**31 <= prime <= 2**32 - 1
    assert prime % 2 == 1
    assert gmpy2.is_prime(prime, 50)

def test_three_primes_64_bits(create_generator):
    """Test that bitLength=64, count=3 produces three primes in [2^63, 2^64 - 1]."""
    primes = create_generator(64).generate_list(3)
    assert len(primes) == 3
    for prime in primes:
        assert 2**63 <= prime <= 2**64 - 1
        assert gmpy2.is_prime(prime, 50)

@pytest.mark.parametrize("count", [1, 2, 5])
def test_count_matches_request(create_generator, count):
    """Test that exactly count primes are produced."""
    assert len(list(create_generator(32).generate(count))) == count

def test_one_search_per_prime_in_completion_order(create_generator):
    """Test that each prime comes from its own search and order is preserved."""
    found = [4294967291, 2147483659, 4294967279]
    with patch.object(SearchCoordinator, "find_prime", side_effect=found) as mock_find:
        primes = create_generator(32).generate_list(3)
    assert primes == found
    assert mock_find.call_count == 3

def test_duplicates_are_kept(create_generator):
    """Test that repeated primes are passed through rather than filtered."""
    with patch.object(SearchCoordinator, "find_prime", return_value=4294967291):
        assert create_generator(32).generate_list(2) == [4294967291, 4294967291]

def test_generate_is_lazy(create_generator):
    """Test that searches run one at a time as the caller consumes primes."""
    with patch.object(SearchCoordinator, "find_prime", return_value=4294967291) as mock_find:
        primes = create_generator(32).generate(3)
        assert mock_find.call_count == 0
        next(primes)
        assert mock_find.call_count == 1

def test_default_count_is_one(create_generator):
    """Test that generate defaults to a single prime."""
    with patch.object(SearchCoordinator, "find_prime", return_value=4294967291):
        assert create_generator(32).generate_list() == [4294967291]

@pytest.mark.parametrize("count", [0, -3])
def test_invalid_count_error(create_generator, count):
    """Test that a count below one raises ValueError before any search runs."""
    generator = create_generator(32)
    with patch.object(SearchCoordinator, "find_prime") as mock_find:
        with pytest.raises(ValueError):
            generator.generate(count)
    mock_find.assert_not_called()

def test_coordinator_settings_forwarded():
    """Test that search settings reach the coordinator."""
    generator = PrimeSequenceGenerator(128, rounds=25, workers=3, worker_mode="thread")
    coordinator = generator.get_coordinator()
    assert coordinator.get_bit_length() == 128
    assert coordinator.get_rounds() == 25
    assert coordinator.get_workers() == 3
    assert coordinator.get_worker_mode() is WorkerMode.THREAD
