# protocol_constants.py

DEFAULT_ROUNDS = 10        # Miller-Rabin rounds, error bound 4^-k
DEFAULT_COUNT = 1          # Primes generated when no count is given
MIN_BIT_LENGTH = 32        # Smallest supported prime size
BIT_LENGTH_MULTIPLE = 8    # Prime sizes are whole bytes
SMALL_PRIME_LIMIT = 200    # Trial division uses every prime below this
