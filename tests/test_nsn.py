import random

import pytest

from roster.utils.nsn import WEIGHTS, check_digit, is_valid_nsn, make_nsn, random_nsn


def expected_check(prefix):
    total = sum(int(d) * w for d, w in zip(prefix, WEIGHTS[:8]))
    return (11 - total % 11) % 10


def test_known_check_digits():
    assert make_nsn('12345678') == '123456782'
    assert make_nsn('00000000') == '000000001'
    # remainder 1 gives check digit 0
    assert make_nsn('60000000') == '600000000'


def test_invalid_nsn_uses_next_digit():
    assert make_nsn('12345678', valid=False) == '123456783'
    assert make_nsn('60000000', valid=False) == '600000001'


def test_check_digit_matches_formula_for_random_prefixes():
    rng = random.Random(1234)
    for _ in range(2000):
        prefix = ''.join(rng.choice('0123456789') for _ in range(8))
        good = make_nsn(prefix)
        bad = make_nsn(prefix, valid=False)

        assert int(good[-1]) == expected_check(prefix)
        assert int(bad[-1]) == (expected_check(prefix) + 1) % 10
        assert good[-1] != bad[-1]
        assert is_valid_nsn(good)
        assert not is_valid_nsn(bad)


def test_random_nsn_shape():
    for _ in range(100):
        nsn = random_nsn()
        assert len(nsn) == 9 and nsn.isdigit()
        assert is_valid_nsn(nsn)
        assert not is_valid_nsn(random_nsn(valid=False))


@pytest.mark.parametrize('value', ['', '12345678', '1234567890', 'abcdefghi', None, 123456782])
def test_is_valid_nsn_rejects_malformed(value):
    assert not is_valid_nsn(value)


def test_check_digit_rejects_bad_prefix():
    with pytest.raises(ValueError):
        check_digit('1234')
