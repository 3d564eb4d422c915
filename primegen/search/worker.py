"""Search loop run by every worker the coordinator starts."""

import logging
import pickle
from typing import Any, Optional

from ..primes.CandidateGenerator import CandidateGenerator
from ..primes.MillerRabinTester import MillerRabinTester
from ..primes.TrialDivisionFilter import TrialDivisionFilter
from .errors import SearchError
from .types import OutcomeKind, SearchOutcome

logger = logging.getLogger(__name__)


def search_worker(
    worker_id: int,
    bit_length: int,
    rounds: int,
    budget: Optional[int],
    stop_event: Any,
    claim_lock: Any,
    results: Any,
) -> None:
    """
    Generate and test candidates until a prime is accepted or the search is stopped.

    Only the first worker to take claim_lock while stop_event is clear may post
    a FOUND outcome, so the coordinator receives at most one accepted prime.

    Args:
        worker_id: Index of this worker, echoed in every outcome
        bit_length: Size of the candidates in bits
        rounds: Miller-Rabin rounds per candidate
        budget: Maximum candidates to draw, or None for no limit
        stop_event: Shared event set once the search is over
        claim_lock: Shared lock guarding the single published result
        results: Shared queue receiving SearchOutcome messages
    """
    attempts = 0
    try:
        while not stop_event.is_set():
            if budget is not None and attempts >= budget:
                logger.debug("Worker %d exhausted after %d attempts", worker_id, attempts)
                results.put(SearchOutcome(worker_id, OutcomeKind.EXHAUSTED))
                return
            attempts += 1

            candidate = CandidateGenerator.generate(bit_length)
            if not TrialDivisionFilter.passes(candidate):
                continue
            if not MillerRabinTester.is_probably_prime(candidate, rounds):
                continue

            with claim_lock:
                if stop_event.is_set():
                    return
                stop_event.set()
                results.put(SearchOutcome(worker_id, OutcomeKind.FOUND, value=int(candidate)))
            logger.debug("Worker %d accepted a candidate after %d attempts", worker_id, attempts)
            return
    except Exception as e:
        stop_event.set()
        results.put(SearchOutcome(worker_id, OutcomeKind.FAILED, error=_portable_error(e)))


def _portable_error(error: Exception) -> Exception:
    """Return error itself if it survives pickling, else a SearchError describing it."""
    try:
        pickle.loads(pickle.dumps(error))
    except Exception:
        return SearchError(f"{type(error).__name__}: {error}")
    return error
