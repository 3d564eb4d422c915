import logging
from typing import Iterator, List, Optional, Union

from ..protocol_constants import DEFAULT_COUNT, DEFAULT_ROUNDS
from ..search import SearchCoordinator, WorkerMode
from .abstract.IPrimeSequenceGenerator import IPrimeSequenceGenerator

logger = logging.getLogger(__name__)


class PrimeSequenceGenerator(IPrimeSequenceGenerator):
    """Produces primes by running one independent search per requested prime.

    Primes come out in completion order. Repeated values are possible in
    principle and are not filtered.
    """

    def __init__(
        self,
        bit_length: int,
        rounds: int = DEFAULT_ROUNDS,
        workers: Optional[int] = None,
        worker_mode: Union[WorkerMode, str, None] = None,
    ) -> None:
        self._coordinator = SearchCoordinator(
            bit_length, rounds=rounds, workers=workers, worker_mode=worker_mode
        )

    def get_coordinator(self) -> SearchCoordinator:
        return self._coordinator

    def generate(self, count: int = DEFAULT_COUNT) -> Iterator[int]:
        # Validate before handing back the lazy iterator
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        return self._generate(count)

    def generate_list(self, count: int = DEFAULT_COUNT) -> List[int]:
        return list(self.generate(count))

    # Private Methods
    # --------------

    def _generate(self, count: int) -> Iterator[int]:
        for index in range(1, count + 1):
            prime = self._coordinator.find_prime()
            logger.debug("Found prime %d of %d", index, count)
            yield prime
