import logging
import math
import multiprocessing
import multiprocessing.dummy
import queue
from typing import Any, List, Optional, Union

from ..protocol_constants import DEFAULT_ROUNDS
from ..random import RandomnessUnavailableError
from ..utils import EnvironmentManager, EnvironmentVariables, SystemSpecs
from .abstract.ISearchCoordinator import ISearchCoordinator
from .errors import SearchError, SearchExhaustedError
from .types import OutcomeKind, SearchOutcome, WorkerMode
from .worker import search_worker

logger = logging.getLogger(__name__)

# Seconds between liveness checks while waiting on workers
POLL_INTERVAL = 0.5


class SearchCoordinator(ISearchCoordinator):
    """Implementation of a parallel prime search with first-result-wins cancellation."""

    def __init__(
        self,
        bit_length: int,
        rounds: int = DEFAULT_ROUNDS,
        workers: Optional[int] = None,
        worker_mode: Union[WorkerMode, str, None] = None,
        max_attempts: Optional[int] = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            bit_length (int): Size of the primes to search for.
            rounds (int): Miller-Rabin rounds per candidate.
            workers (int, optional): Parallel workers, defaults to SystemSpecs.
            worker_mode (WorkerMode | str, optional): "process" or "thread",
                defaults to the PRIMEGEN_WORKER_MODE environment variable.
            max_attempts (int, optional): Total candidate budget shared by all
                workers. None searches until a prime is found.
        """
        if bit_length < 2:
            raise ValueError(f"bit_length must be at least 2, got {bit_length}")
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")
        if workers is None:
            workers = SystemSpecs.get_num_parallel_processes()
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        if worker_mode is None:
            worker_mode = EnvironmentManager.get_string(EnvironmentVariables.WORKER_MODE)

        self._bit_length = bit_length
        self._rounds = rounds
        self._workers = workers
        self._worker_mode = WorkerMode(worker_mode)
        self._max_attempts = max_attempts

    def get_bit_length(self) -> int:
        return self._bit_length

    def get_rounds(self) -> int:
        return self._rounds

    def get_workers(self) -> int:
        return self._workers

    def get_worker_mode(self) -> WorkerMode:
        return self._worker_mode

    def find_prime(self) -> int:
        context = self._get_context()
        stop_event = context.Event()
        claim_lock = context.Lock()
        results = context.Queue()

        budget = None
        if self._max_attempts is not None:
            budget = math.ceil(self._max_attempts / self._workers)

        workers = []
        for worker_id in range(self._workers):
            worker = context.Process(
                target=search_worker,
                args=(
                    worker_id,
                    self._bit_length,
                    self._rounds,
                    budget,
                    stop_event,
                    claim_lock,
                    results,
                ),
            )
            worker.daemon = True
            workers.append(worker)

        logger.debug(
            "Starting %d %s workers for a %d-bit prime",
            self._workers,
            self._worker_mode.value,
            self._bit_length,
        )
        try:
            for worker in workers:
                worker.start()
            return self._await_result(workers, results)
        finally:
            stop_event.set()
            for worker in workers:
                if worker.is_alive():
                    worker.join()
            logger.debug("All %d workers stopped", len(workers))

    # Private Methods
    # --------------

    def _get_context(self) -> Any:
        """Module exposing Process, Event, Lock and Queue for the configured mode."""
        if self._worker_mode is WorkerMode.THREAD:
            return multiprocessing.dummy
        return multiprocessing.get_context()

    def _await_result(self, workers: List[Any], results: Any) -> int:
        """Block until a worker posts a prime, fails, or every budget is spent."""
        exhausted = 0
        while True:
            outcome = self._next_outcome(workers, results)

            if outcome.kind is OutcomeKind.FOUND:
                return outcome.value

            if outcome.kind is OutcomeKind.FAILED:
                if isinstance(outcome.error, RandomnessUnavailableError):
                    raise outcome.error
                raise SearchError(
                    f"Search worker {outcome.worker_id} failed: {outcome.error}"
                ) from outcome.error

            exhausted += 1
            if exhausted == len(workers):
                raise SearchExhaustedError(
                    f"No {self._bit_length}-bit prime found within {self._max_attempts} attempts"
                )

    @staticmethod
    def _next_outcome(workers: List[Any], results: Any) -> SearchOutcome:
        """Get the next outcome, failing if every worker died without posting one."""
        while True:
            try:
                return results.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                if any(worker.is_alive() for worker in workers):
                    continue

            # A worker may have posted just before exiting
            try:
                return results.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                raise SearchError("All search workers stopped without reporting a result")
