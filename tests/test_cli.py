import logging
import warnings

import pytest
from click.testing import CliRunner

from snowcard.cli import main

ALL_FIELDS = [
    "--recipient", "Alex",
    "--sender", "Sam",
    "--message", "Hi!",
    "--year", "2030",
]  # fmt: skip
PROMPTS = ("Recipient name: ", "Sender name: ", "Custom message: ", "Year [2025]: ")


@pytest.fixture(autouse=True)
def _clean_env_and_logging(monkeypatch):
    for name in ("SNOWCARD_FLAKES", "SNOWCARD_SEED", "SNOWCARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def _scene(stdout):
    return stdout.splitlines()[-18:]


def test_options_only_skip_prompts():
    result = CliRunner().invoke(main, ALL_FIELDS + ["--seed", "7"])
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "+" + "-" * 62 + "+"
    assert "MERRY CHRISTMAS 2030" in lines[1]
    assert lines[3].strip("| ").strip() == "To: Alex"
    assert lines[5].strip("| ").strip() == "From: Sam"
    assert len(lines) == 8 + 18
    assert "Recipient name:" not in result.stderr


def test_fields_read_from_stdin_in_order():
    result = CliRunner().invoke(main, ["--seed", "1"], input="Alex\nSam\nHi!\n\n")
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert "MERRY CHRISTMAS 2025" in lines[1]
    assert "To: Alex" in lines[3]
    assert "Hi!" in lines[4]
    assert "From: Sam" in lines[5]
    for prompt in PROMPTS:
        assert prompt in result.stderr
        assert prompt not in result.stdout


def test_only_missing_fields_are_prompted():
    result = CliRunner().invoke(
        main, ["--recipient", "Alex", "--year", "2031"], input="Sam\n\n"
    )
    assert result.exit_code == 0, result.output
    assert "Recipient name:" not in result.stderr
    assert "Sender name: " in result.stderr
    assert "From: Sam" in result.stdout
    assert "MERRY CHRISTMAS 2031" in result.stdout
    assert "Wishing you a warm, cozy Christmas." in result.stdout


def test_eof_reads_as_empty_fields():
    result = CliRunner().invoke(main, [], input="")
    assert result.exit_code == 0, result.output
    assert "MERRY CHRISTMAS 2025" in result.stdout
    assert "To:" not in result.stdout
    assert "From:" not in result.stdout


def test_same_seed_same_card():
    runner = CliRunner()
    first = runner.invoke(main, ALL_FIELDS + ["--seed", "42"])
    second = runner.invoke(main, ALL_FIELDS + ["--seed", "42"])
    assert first.stdout == second.stdout


def test_zero_flakes_gives_bare_scene():
    result = CliRunner().invoke(main, ALL_FIELDS + ["--flakes", "0"])
    assert result.exit_code == 0, result.output
    assert not any("." in row for row in _scene(result.stdout))


def test_flakes_and_seed_from_environment(monkeypatch):
    monkeypatch.setenv("SNOWCARD_FLAKES", "0")
    monkeypatch.setenv("SNOWCARD_SEED", "5")
    result = CliRunner().invoke(main, ALL_FIELDS)
    assert result.exit_code == 0, result.output
    assert not any("." in row for row in _scene(result.stdout))


def test_option_overrides_environment(monkeypatch):
    monkeypatch.setenv("SNOWCARD_FLAKES", "0")
    result = CliRunner().invoke(main, ALL_FIELDS + ["--flakes", "3000", "--seed", "2"])
    assert result.exit_code == 0, result.output
    assert any("." in row for row in _scene(result.stdout))


def test_negative_flakes_rejected():
    result = CliRunner().invoke(main, ALL_FIELDS + ["--flakes", "-1"])
    assert result.exit_code == 2


def test_bad_environment_is_usage_error(monkeypatch):
    monkeypatch.setenv("SNOWCARD_FLAKES", "lots")
    result = CliRunner().invoke(main, ALL_FIELDS)
    assert result.exit_code == 2
    assert "SNOWCARD_FLAKES must be an integer" in result.stderr
    assert result.stdout == ""


def test_verbose_logs_to_stderr_only():
    result = CliRunner().invoke(main, ALL_FIELDS + ["--seed", "8", "--verbose"])
    assert result.exit_code == 0, result.output
    assert "DEBUG: Generating 85 snowflakes with seed 8" in result.stderr
    assert "DEBUG" not in result.stdout


def test_negative_seed_rejected():
    result = CliRunner().invoke(main, ALL_FIELDS + ["--seed", "-5"])
    assert result.exit_code == 2
    assert result.stdout == ""


def test_negative_seed_in_environment_is_usage_error(monkeypatch):
    monkeypatch.setenv("SNOWCARD_SEED", "-1")
    result = CliRunner().invoke(main, ALL_FIELDS)
    assert result.exit_code == 2
    assert "SNOWCARD_SEED must be >= 0" in result.stderr


def test_reading_stdin_emits_no_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = CliRunner().invoke(main, ["--seed", "4"], input="Alex\nSam\nHi!\n\n")
    assert result.exit_code == 0, result.output
    assert "To: Alex" in result.stdout
