"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of search workers to run in parallel.

        Returns the number of CPU cores divided by the parallelization divisor,
        with a minimum of 1. The divisor is read from the PARALLELISM_DIVISOR
        environment variable and defaults to 2.

        Returns:
            int: Number of parallel workers to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor < 1:
            parallelism_divisor = 1
        return multiprocessing.cpu_count() // parallelism_divisor or 1 # default to 1 if only 1 core available
