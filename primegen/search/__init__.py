"""Concurrent prime search module."""

from .SearchCoordinator import SearchCoordinator
from .abstract.ISearchCoordinator import ISearchCoordinator
from .errors import SearchError, SearchExhaustedError
from .types import OutcomeKind, SearchOutcome, WorkerMode
from .worker import search_worker

__all__ = [
    "SearchCoordinator",
    "ISearchCoordinator",
    "SearchError",
    "SearchExhaustedError",
    "OutcomeKind",
    "SearchOutcome",
    "WorkerMode",
    "search_worker",
]
