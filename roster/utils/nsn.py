"""National Student Number helpers.

An NSN is nine digits: an eight digit body followed by a mod-11 check digit.
"""
import random

WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 10)
BODY_LENGTH = 8


def check_digit(prefix: str) -> int:
    if len(prefix) != BODY_LENGTH or not prefix.isdigit():
        raise ValueError(f'NSN prefix must be {BODY_LENGTH} digits: {prefix!r}')

    total = sum(int(digit) * weight for digit, weight in zip(prefix, WEIGHTS))
    return (11 - total % 11) % 10


def make_nsn(prefix: str, valid: bool = True) -> str:
    """Append the check digit, or a deliberately wrong one when ``valid`` is False"""
    digit = check_digit(prefix)
    if not valid:
        digit = (digit + 1) % 10
    return f'{prefix}{digit}'


def is_valid_nsn(nsn) -> bool:
    if not isinstance(nsn, str) or len(nsn) != BODY_LENGTH + 1 or not (nsn.isascii() and nsn.isdigit()):
        return False
    return int(nsn[-1]) == check_digit(nsn[:BODY_LENGTH])


def random_nsn(rng=None, valid: bool = True) -> str:
    rng = rng or random
    prefix = ''.join(rng.choice('0123456789') for _ in range(BODY_LENGTH))
    return make_nsn(prefix, valid=valid)
