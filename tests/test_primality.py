import pytest


def test_small_prime_table():
    from primes.trial_division import SMALL_PRIME_SET, SMALL_PRIMES

    assert len(SMALL_PRIMES) == 53
    assert SMALL_PRIMES[0] == 3 and SMALL_PRIMES[-1] == 251
    assert list(SMALL_PRIMES) == sorted(SMALL_PRIMES)
    assert all(all(p % d for d in range(2, p)) for p in SMALL_PRIMES)
    assert SMALL_PRIME_SET == frozenset(SMALL_PRIMES)


def test_trial_division_flags_multiples_only():
    from primes import is_obviously_composite

    assert is_obviously_composite(21)
    assert is_obviously_composite(251 * 241)
    assert is_obviously_composite(3 * ((1 << 61) - 1))
    assert not is_obviously_composite(3)
    assert not is_obviously_composite(251)
    assert not is_obviously_composite(257)
    assert not is_obviously_composite(1)
    # 257 * 263 has no factor in the table
    assert not is_obviously_composite(257 * 263)


def test_table_primes_are_never_flagged():
    from primes.trial_division import SMALL_PRIMES, is_obviously_composite

    assert not any(is_obviously_composite(p) for p in SMALL_PRIMES)
    assert all(is_obviously_composite(3 * p) for p in SMALL_PRIMES)


def test_factor_powers_of_two():
    from primes.miller_rabin import factor_powers_of_two

    assert factor_powers_of_two(96) == (5, 3)
    assert factor_powers_of_two(2) == (1, 1)
    assert factor_powers_of_two(16) == (4, 1)
    with pytest.raises(ValueError):
        factor_powers_of_two(15)


def test_known_small_values():
    from primes import is_probable_prime

    assert is_probable_prime(17, 1)
    assert not is_probable_prime(18, 1)
    assert is_probable_prime(2, 1)
    assert is_probable_prime(3, 1)
    assert is_probable_prime(5, 1)
    for security in (1, 5, 40):
        assert not is_probable_prime(1, security)
        assert not is_probable_prime(0, security)
        assert is_probable_prime(2, security)


@pytest.mark.parametrize("n", [4, 6, 100, 2 ** 64, (1 << 127) - 1 + 1])
@pytest.mark.parametrize("security", [1, 3, 40])
def test_even_numbers_are_composite(n, security):
    from primes import is_probable_prime

    assert not is_probable_prime(n, security)


def test_large_primes_pass(seeded):
    from primes import is_probable_prime

    for p in [(1 << 61) - 1, (1 << 89) - 1, (1 << 127) - 1, 1000000007]:
        assert is_probable_prime(p, 32, random_source=seeded)


def test_composites_fail(seeded):
    from primes import is_probable_prime

    # Carmichael numbers, a strong pseudoprime to bases 2..7, and a semiprime
    for n in [561, 1105, 41041, 3215031751, ((1 << 61) - 1) * ((1 << 31) - 1)]:
        assert not is_probable_prime(n, 20, random_source=seeded)


def test_runs_exactly_security_rounds(recording_source):
    from primes import is_probable_prime

    assert is_probable_prime(1000003, 7, random_source=recording_source)
    assert len(recording_source.ranges) == 7


def test_witnesses_drawn_from_two_to_n_minus_two(recording_source):
    from primes import is_probable_prime

    n = 1000003
    is_probable_prime(n, 3, random_source=recording_source)
    assert set(recording_source.ranges) == {(2, n - 1)}


def test_security_must_be_positive():
    from primes import InvalidParameterError, is_probable_prime

    with pytest.raises(InvalidParameterError):
        is_probable_prime(17, 0)


def test_false_positive_bound():
    from primes import false_positive_bound

    assert false_positive_bound(1) == 0.25
    assert false_positive_bound(40) == 4.0 ** -40


def test_pipeline_counts_rejections(seeded):
    from primes import SearchStats, passes_primality_pipeline

    stats = SearchStats()
    assert not passes_primality_pipeline(3 * 1000003, 10, random_source=seeded, stats=stats)
    assert not passes_primality_pipeline(257 * 263, 10, random_source=seeded, stats=stats)
    assert passes_primality_pipeline(1000003, 10, random_source=seeded, stats=stats)
    assert stats.sieved == 1
    assert stats.rejected == 1


def test_pipeline_agrees_with_pycryptodome(seeded):
    from Crypto.Util.number import isPrime

    from primes import passes_primality_pipeline

    for n in range(3, 3000, 2):
        assert passes_primality_pipeline(n, 20, random_source=seeded) == bool(isPrime(n)), n
