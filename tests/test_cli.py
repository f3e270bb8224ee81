import logging

import pytest

from rolltoken import RollingTokenManager, ClockUnavailable
from rolltoken import cli
from rolltoken.utils import logger as rt_logger


@pytest.fixture
def secret_env(monkeypatch):
    monkeypatch.setenv('ROLLTOKEN_SECRET', 'my_secret')


def test_generate_prints_current_code(secret_env, capsys):
    assert cli.main(["generate", "--interval", "3600"]) == cli.EXIT_OK
    code = capsys.readouterr().out.strip()
    assert RollingTokenManager("my_secret", 3600).is_valid(code)


def test_validate_valid_and_invalid(secret_env, capsys):
    code = RollingTokenManager("my_secret", 3600).generate_token().code
    assert cli.main(["validate", code, "--interval", "3600"]) == cli.EXIT_OK
    assert "VALID" in capsys.readouterr().out

    assert cli.main(["validate", "not-a-token", "--interval", "3600"]) == cli.EXIT_INVALID
    assert "INVALID" in capsys.readouterr().out


def test_offset_outside_window_is_invalid(secret_env, capsys):
    cli.main(["generate", "--interval", "3600", "--offset", "5"])
    code = capsys.readouterr().out.strip()
    assert cli.main(["validate", code, "--interval", "3600"]) == cli.EXIT_INVALID


def test_info(secret_env, capsys):
    assert cli.main(["info", "--interval", "60", "--tolerance", "2"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "60s" in out
    assert "tolerance:  2" in out


def test_configuration_error_exit_status(secret_env, capsys):
    assert cli.main(["generate", "--interval", "0"]) == cli.EXIT_CONFIG
    assert "Configuration error" in capsys.readouterr().err


def test_secret_prompt_when_environment_is_empty(monkeypatch, capsys):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: "my_secret")
    assert cli.main(["generate", "--interval", "3600"]) == cli.EXIT_OK
    code = capsys.readouterr().out.strip()
    assert RollingTokenManager(b"my_secret", 3600).is_valid(code)


def test_empty_prompted_secret_is_configuration_error(monkeypatch):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: "")
    assert cli.main(["generate"]) == cli.EXIT_CONFIG


def test_clock_failure_exit_status(secret_env, monkeypatch, capsys):
    def broken():
        raise ClockUnavailable("no clock")

    monkeypatch.setattr("rolltoken.rolling.manager.system_time", broken)
    assert cli.main(["validate", "0" * 64]) == cli.EXIT_CLOCK
    assert "Clock unavailable" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_debug_flag_lowers_console_level(secret_env, capsys):
    assert cli.main(["info", "--debug"]) == cli.EXIT_OK
    assert rt_logger.get_logger().handlers[0].level == logging.DEBUG

    cli.main(["info"])
    assert rt_logger.get_logger().handlers[0].level == logging.WARNING
