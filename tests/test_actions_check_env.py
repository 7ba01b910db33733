"""
Tests for the check_env action.

**Purpose**: Verify exit codes and report output of the pre-flight CLI,
calling main(argv) directly instead of spawning a subprocess.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.check_env import main, mask_value, parse_type_checks
from env_validator.utils.parsing import U16


@pytest.fixture
def service_env(workdir, monkeypatch):
    """Environment of a service that is fully configured."""
    monkeypatch.setenv("ENV_VALIDATOR_TEST_DB", "postgres://x")
    monkeypatch.setenv("ENV_VALIDATOR_TEST_PORT", "8080")
    monkeypatch.setenv("ENV_VALIDATOR_TEST_BAD_PORT", "abc")
    return workdir


def test_all_present_exits_zero(service_env, capsys):
    code = main(["ENV_VALIDATOR_TEST_DB", "ENV_VALIDATOR_TEST_PORT", "--no-dotenv"])

    out = capsys.readouterr().out
    assert code == 0
    assert "✓ ENV_VALIDATOR_TEST_DB=po" in out
    assert "postgres://x" not in out
    assert "2 variable(s) OK" in out


def test_show_values(service_env, capsys):
    main(["ENV_VALIDATOR_TEST_DB", "--no-dotenv", "--show-values"])

    assert "ENV_VALIDATOR_TEST_DB=postgres://x" in capsys.readouterr().out


def test_missing_exits_one_with_report(service_env, monkeypatch, capsys):
    """The report is the only stderr output at the default log level."""
    monkeypatch.delenv("ENV_VALIDATOR_LOG_LEVEL", raising=False)

    code = main(["ENV_VALIDATOR_TEST_DB", "ENV_VALIDATOR_TEST_API_KEY", "--no-dotenv"])

    err = capsys.readouterr().err
    assert code == 1
    assert err == (
        "Configuration validation failed:\n"
        "Missing required environment variables:\n"
        "  - ENV_VALIDATOR_TEST_API_KEY\n"
    )


def test_parse_failure_exits_one(service_env, capsys):
    code = main([
        "ENV_VALIDATOR_TEST_PORT",
        "--no-dotenv",
        "--parse", "ENV_VALIDATOR_TEST_PORT:u16",
        "--parse", "ENV_VALIDATOR_TEST_BAD_PORT:u16",
    ])

    err = capsys.readouterr().err
    assert code == 1
    assert "Invalid environment variables:" in err
    assert "  - ENV_VALIDATOR_TEST_BAD_PORT: invalid digit found in string" in err
    assert "ENV_VALIDATOR_TEST_PORT:" not in err


def test_parse_success(service_env, capsys):
    code = main(["ENV_VALIDATOR_TEST_PORT", "--no-dotenv", "--parse", "ENV_VALIDATOR_TEST_PORT:u16"])

    assert code == 0
    assert "ENV_VALIDATOR_TEST_PORT parses as u16" in capsys.readouterr().out


def test_unknown_type_exits_two(service_env, capsys):
    code = main(["ENV_VALIDATOR_TEST_PORT", "--parse", "ENV_VALIDATOR_TEST_PORT:port"])

    assert code == 2
    assert "Unknown type" in capsys.readouterr().err


def test_reads_env_file(workdir, capsys):
    env_file = workdir / "service.env"
    env_file.write_text("ENV_VALIDATOR_TEST_FROM_FILE=1\n")

    code = main(["ENV_VALIDATOR_TEST_FROM_FILE", "--env-file", str(env_file)])

    assert code == 0


def test_parse_type_checks():
    assert parse_type_checks(["PORT:u16"]) == [("PORT", U16)]

    for bad in ("PORT", "PORT:", ":u16"):
        with pytest.raises(ValueError):
            parse_type_checks([bad])


def test_mask_value():
    assert mask_value("ab") == "**"
    assert mask_value("secret") == "se****"
    assert mask_value("a" * 40) == "aa" + "*" * 8
