"""Types shared between the search coordinator and its workers."""

from enum import Enum
from typing import NamedTuple, Optional


class WorkerMode(Enum):
    """How search workers are run."""
    PROCESS = "process"
    THREAD = "thread"


class OutcomeKind(Enum):
    """What a worker reports back to the coordinator."""
    FOUND = "found"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class SearchOutcome(NamedTuple):
    """A single message posted by a worker on the shared result queue."""
    worker_id: int
    kind: OutcomeKind
    value: Optional[int] = None
    error: Optional[BaseException] = None
