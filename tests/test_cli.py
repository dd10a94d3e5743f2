from __future__ import annotations

import pytest

from interview_prep import cli


@pytest.fixture(autouse=True)
def fake_version(monkeypatch):
    def _version(name: str) -> str:
        assert name == "interview-prep"
        return "0.0-test"

    monkeypatch.setattr(cli.metadata, "version", _version)


def test_no_args_prints_usage(capsys):
    assert cli.main([]) == 2
    out = capsys.readouterr().out
    assert "Usage: interview-prep" in out
    assert "Available commands:" in out


def test_help_flag_and_list(capsys):
    assert cli.main(["--help"]) == 0
    assert "Usage: interview-prep" in capsys.readouterr().out

    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    for name in ("init", "menu", "quiz", "review"):
        assert f"  {name}" in out
    assert "(interactive)" in out


@pytest.mark.parametrize("flag", ["version", "--version", "-V"])
def test_version_variants(flag, capsys):
    assert cli.main([flag]) == 0
    assert capsys.readouterr().out.strip() == "0.0-test"


def test_version_missing_package(monkeypatch, capsys):
    def _missing(name: str) -> str:
        raise cli.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(cli.metadata, "version", _missing)

    assert cli.main(["version"]) == 0
    assert capsys.readouterr().out.strip() == "unknown"


def test_help_for_command_and_unknown(capsys):
    assert cli.main(["help", "quiz"]) == 0
    assert "quiz: Answer randomly drawn" in capsys.readouterr().out

    assert cli.main(["help", "nope"]) == 2
    assert "Unknown command 'nope'" in capsys.readouterr().err


def test_unknown_command(capsys):
    assert cli.main(["dance"]) == 2
    assert "Unknown command 'dance'" in capsys.readouterr().err


def test_dispatches_review(capsys):
    assert cli.main(["review"]) == 0
    assert "Question Review" in capsys.readouterr().out


def test_dispatches_init(tmp_path, capsys):
    assert cli.main(["init", "--path", str(tmp_path / "ws")]) == 0
    out = capsys.readouterr().out
    assert "Workspace ready" in out
    assert "logs" in out


def test_subcommand_help_exit_is_normalized(capsys):
    assert cli.main(["quiz", "--help"]) == 0
    assert "--num" in capsys.readouterr().out


def test_subcommand_argparse_error_returns_two(capsys):
    assert cli.main(["quiz", "--num", "many"]) == 2
    assert "invalid int value" in capsys.readouterr().err


def test_invoke_main_forwards_argv_and_restores_sys_argv(monkeypatch):
    seen = []
    monkeypatch.setattr(cli.sys, "argv", ["outer"])

    def _target(argv):
        seen.append((list(argv), list(cli.sys.argv)))
        return 3

    assert cli._invoke_main(_target, "interview-prep demo", ["-x"]) == 3
    assert seen == [(["-x"], ["interview-prep demo", "-x"])]
    assert cli.sys.argv == ["outer"]


def test_every_command_has_a_handler():
    with pytest.raises(TypeError):
        cli.CommandSpec(name="bare", summary="No handler.")
    assert all(callable(spec.handler) for spec in cli.COMMANDS.values())
