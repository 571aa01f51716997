import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SECURITY", "MAX_ATTEMPTS", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(f"PRIMEGEN_{name}", raising=False)


def test_modexp(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "modexp", "--plain"]) == 0
    assert "4^13 mod 497: 445" in capsys.readouterr().out


def test_zero_modulus_is_a_usage_error(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "modexp", "--modulus", "0", "--plain"]) == 2
    assert "modulus must be positive" in capsys.readouterr().out


def test_primality(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "test", "--number", "561", "--seed", "1", "--plain"]) == 0
    assert "composite" in capsys.readouterr().out
    assert primegen_cli.main(["--run", "test", "--number", "0x1fffffffffffffff", "--plain"]) == 0
    assert "probably prime" in capsys.readouterr().out


def test_primality_requires_number():
    import primegen_cli

    assert primegen_cli.main(["--run", "test", "--plain"]) == 2


def test_weak_and_strong(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "weak", "--bits", "64", "--security", "8", "--seed", "3", "--plain"]) == 0
    assert "p (64 bits)" in capsys.readouterr().out
    assert primegen_cli.main(["--run", "strong", "--bits", "64", "--security", "8", "--seed", "3", "--plain"]) == 0
    assert "Divisibility relations hold" in capsys.readouterr().out


def test_seeded_runs_are_reproducible(capsys):
    import primegen_cli

    argv = ["--run", "weak", "--bits", "96", "--security", "8", "--seed", "21", "--plain"]
    primegen_cli.main(argv)
    first = [l for l in capsys.readouterr().out.splitlines() if l.startswith("p (")]
    primegen_cli.main(argv)
    second = [l for l in capsys.readouterr().out.splitlines() if l.startswith("p (")]
    assert first and first == second


def test_bad_bits_is_a_usage_error(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "strong", "--bits", "4", "--plain"]) == 2
    assert "at least 8 bits" in capsys.readouterr().out


def test_zero_bits_is_not_replaced_by_default(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "weak", "--bits", "0", "--plain"]) == 2
    assert "at least 2 bits" in capsys.readouterr().out


def test_generation_exhausted_exit_code(monkeypatch, capsys):
    import primegen_cli
    from primes import GenerationExhausted

    def give_up(*args, **kwargs):
        raise GenerationExhausted("64-bit prime", 3)

    monkeypatch.setattr(primegen_cli, "generate_weak_prime", give_up)
    assert primegen_cli.main(["--run", "weak", "--bits", "64", "--max-attempts", "3", "--plain"]) == 1
    assert "no 64-bit prime found after 3 attempt(s)" in capsys.readouterr().out


def test_invalid_environment(monkeypatch, capsys):
    import primegen_cli

    monkeypatch.setenv("PRIMEGEN_SECURITY", "lots")
    assert primegen_cli.main(["--run", "modexp", "--plain"]) == 2
    assert "PRIMEGEN_SECURITY" in capsys.readouterr().out


def test_rsa_and_entropy(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "rsa", "--bits", "256", "--security", "8", "--seed", "4", "--plain"]) == 0
    assert "decrypt(encrypt(m)) == m" in capsys.readouterr().out
    assert primegen_cli.main(["--run", "entropy", "--seed", "4", "--plain"]) == 0
    assert "No low-entropy samples" in capsys.readouterr().out


def test_run_all(capsys):
    import primegen_cli

    assert primegen_cli.main(["--run", "all", "--security", "8", "--seed", "9", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "[6/6] RSA round-trip" in out
    assert "All steps completed." in out


def test_interactive_menu(monkeypatch, capsys):
    import primegen_cli

    answers = iter(["4", "2", "10", "1000", "9", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert primegen_cli.main(["--plain"]) == 0
    out = capsys.readouterr().out
    assert "2^10 mod 1000: 24" in out
    assert "Invalid choice" in out
    assert "Goodbye!" in out
