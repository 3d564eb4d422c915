# Every prime below SMALL_PRIME_LIMIT, used for trial division before Miller-Rabin
SMALL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
)

# Values accepted by trial division without consulting the table
TRIVIAL_PRIMES = (2, 3)
