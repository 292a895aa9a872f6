"""
Command Line Tests
===================
Runs scripts/find_twin.py main() in-process against the fixture config.
"""

import logging
import sys
from unittest.mock import patch

import pytest

from scripts.find_twin import main


@pytest.fixture
def run_cli(fixtures_dir):
    """Call main() with the given arguments; root logging is restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    def _run(*args, config=None):
        argv = ["find_twin.py", *args, "--config", str(config or fixtures_dir / "test_config.yml")]
        with patch.object(sys, "argv", argv):
            main()

    yield _run

    root.handlers[:] = handlers
    root.setLevel(level)


def test_prints_source_and_twin(run_cli, capsys):
    run_cli("1")

    out = capsys.readouterr().out
    assert "SOURCE\nDeathbat #1\nMask: Red, Eyes: Blue\nOwner: Unknown" in out
    assert "TWIN (score 6)\nDeathbat #2" in out


def test_one_of_one_message(run_cli, capsys):
    run_cli("5", "--no-owner")

    out = capsys.readouterr().out
    assert "Deathbat #5 is a 1/1 (Zacky Vengeance) and has no twin." in out
    assert "TWIN" not in out


@pytest.mark.parametrize("token_id,message", [
    ("abc", "invalid token id"),
    ("101", "invalid token id"),
    ("50", "not found"),
])
def test_bad_token_id_exits_1(run_cli, capsys, token_id, message):
    with pytest.raises(SystemExit) as exc_info:
        run_cli(token_id)

    assert exc_info.value.code == 1
    assert message in capsys.readouterr().out


def test_malformed_config_exits_1(run_cli, capsys, tmp_path):
    config = tmp_path / "broken.yml"
    config.write_text("catalog: [unclosed\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        run_cli("1", config=config)

    assert exc_info.value.code == 1
    assert capsys.readouterr().out.startswith("ERROR:")


def test_missing_config_exits_1(run_cli, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        run_cli("1", config=tmp_path / "missing.yml")

    assert exc_info.value.code == 1
