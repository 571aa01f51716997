import pytest


def test_known_values():
    from primes import modular_exponent

    assert modular_exponent(4, 13, 497) == 445
    assert modular_exponent(0, 25871, 14932) == 0
    assert modular_exponent(962, 0, 29008) == 1
    assert modular_exponent(6826, 25871, 14932) == 2632
    assert modular_exponent(962, 6431, 29008) == 10064
    assert modular_exponent(26614, 480, 18928) == 15120


def test_zero_and_one_exponent():
    from primes import modular_exponent

    for a, m in [(5, 7), (123456789, 1000003), (2, 1), (0, 9), (10, 3)]:
        assert modular_exponent(a, 0, m) == 1 % m
        assert modular_exponent(a, 1, m) == a % m


def test_modulus_one_is_zero():
    from primes import modular_exponent

    assert modular_exponent(962, 0, 1) == 0
    assert modular_exponent(17, 99, 1) == 0


def test_matches_builtin_pow_for_large_operands():
    from primes import modular_exponent

    m = (1 << 127) - 1
    base = 0xDEADBEEFCAFEBABE1234567890
    exponent = (1 << 200) + 12345
    assert modular_exponent(base, exponent, m) == pow(base, exponent, m)


@pytest.mark.parametrize("base, exponent", [(26614, 480), (0, 0), (1, 1)])
def test_zero_modulus_is_rejected(base, exponent):
    from primes import InvalidModulusError, modular_exponent

    with pytest.raises(InvalidModulusError):
        modular_exponent(base, exponent, 0)


def test_zero_modulus_is_a_value_error():
    from primes import modular_exponent

    with pytest.raises(ValueError):
        modular_exponent(2, 3, 0)


def test_negative_exponent_is_rejected():
    from primes import InvalidParameterError, modular_exponent

    with pytest.raises(InvalidParameterError):
        modular_exponent(2, -1, 7)
