class RandomnessUnavailableError(RuntimeError):
    """Raised when the operating system's secure random source cannot be read."""
