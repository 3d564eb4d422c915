class SearchError(RuntimeError):
    """Raised when a search worker fails before any prime is found."""


class SearchExhaustedError(SearchError):
    """Raised when every worker spends its attempt budget without finding a prime."""
