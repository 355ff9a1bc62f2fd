from unittest import mock

import pytest

from zerobase.cli import VERSION, build_parser, main, tip
from zerobase.textcolor import green, red


def test_tip_shows_version_and_help_flag(capsys):
    tip()
    out = capsys.readouterr().out
    assert green("zerobase " + VERSION) in out
    assert red("-h") in out
    assert len(out.splitlines()) == 2


def test_no_arguments_fails(capsys):
    assert main([]) == 255
    captured = capsys.readouterr()
    assert red("requires at least one arg") in captured.err
    assert VERSION in captured.out


def test_unknown_positional_prints_tip(capsys):
    assert main(["anything"]) == 0
    assert VERSION in capsys.readouterr().out


def test_server_defaults():
    args = build_parser().parse_args(["server"])
    assert args.command == "server"
    assert args.config == "config/settings.yml"
    assert args.api is False


def test_server_flags():
    args = build_parser().parse_args(["server", "-c", "custom.yml", "-a"])
    assert args.config == "custom.yml"
    assert args.api is True


def test_ai_has_no_name_flag():
    assert build_parser().parse_args(["ai"]).command == "ai"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["ai", "-n", "admin"])


def test_server_runs_until_interrupted(capsys):
    with mock.patch("time.sleep", side_effect=KeyboardInterrupt):
        assert main(["server"]) == 0
    captured = capsys.readouterr()
    assert "http://localhost:8901/" in captured.out
    assert "http://localhost:8901/swagger/admin/index.html" in captured.out
    assert "Server exiting" in captured.err
    assert "starting api server..." in captured.err