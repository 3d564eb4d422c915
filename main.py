"""Script for generating probable primes of a given bit length."""

import argparse
import logging
import sys
import time
from datetime import timedelta
from typing import List, Optional

from primegen.protocol_constants import BIT_LENGTH_MULTIPLE, DEFAULT_COUNT, MIN_BIT_LENGTH
from primegen.search import WorkerMode
from primegen.sequence import PrimeSequenceGenerator
from primegen.utils import EnvironmentManager, EnvironmentVariables


def bit_length_arg(value: str) -> int:
    """Parse a bit length, which must be a multiple of 8 and at least 32."""
    try:
        bits = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bit length: {value!r}")
    if bits < MIN_BIT_LENGTH or bits % BIT_LENGTH_MULTIPLE != 0:
        raise argparse.ArgumentTypeError(
            f"bit length must be a multiple of {BIT_LENGTH_MULTIPLE} and at least {MIN_BIT_LENGTH}, got {bits}"
        )
    return bits


def positive_int_arg(value: str) -> int:
    """Parse an integer that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate random probable primes using parallel Miller-Rabin search."
    )
    parser.add_argument(
        "bits",
        type=bit_length_arg,
        help="The number of bits of each prime, a multiple of 8 and at least 32",
    )
    parser.add_argument(
        "count",
        type=positive_int_arg,
        nargs="?",
        default=DEFAULT_COUNT,
        help="The number of primes to generate (default: 1)",
    )
    parser.add_argument(
        "-k",
        "--rounds",
        type=positive_int_arg,
        default=None,
        help="Miller-Rabin rounds per candidate (default: PRIMEGEN_ROUNDS or 10)",
    )
    parser.add_argument(
        "--workers",
        type=positive_int_arg,
        default=None,
        help="Number of parallel search workers (default: CPU count / PARALLELISM_DIVISOR)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in WorkerMode],
        default=None,
        help="Run workers as processes or threads (default: PRIMEGEN_WORKER_MODE or process)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log search progress to stderr",
    )
    args = parser.parse_args(argv)

    # Defaults taken from the environment bypass the type check above
    if args.rounds is None:
        args.rounds = EnvironmentManager.get_int(EnvironmentVariables.ROUNDS)
        if args.rounds < 1:
            parser.error(f"PRIMEGEN_ROUNDS must be at least 1, got {args.rounds}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Generate the requested primes and print them with the elapsed time."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    generator = PrimeSequenceGenerator(
        args.bits, rounds=args.rounds, workers=args.workers, worker_mode=args.mode
    )

    print(f"BitLength: {args.bits} bits")
    start_time = time.perf_counter()

    for index, prime in enumerate(generator.generate(args.count), start=1):
        print(f"{index}: {prime}")
        if index != args.count:
            print()

    elapsed = time.perf_counter() - start_time
    print(f"Time to Generate: {timedelta(seconds=elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
