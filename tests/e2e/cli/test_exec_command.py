"""End-to-end tests for `fouroneone exec`."""

from pathlib import Path

from fouroneone.entrypoints.cli.main import fouroneone
from fouroneone.entrypoints.cli.process import EXIT_NOT_RUN

# pylint: disable=unused-argument

BASE = ["--no-flight-recorder", "exec"]


def test_exit_code_is_propagated(runner):
    """The command exits with the program's own exit code."""
    result = runner.invoke(fouroneone, BASE + ["/bin/sh", "-c", "exit 42"])
    assert result.exit_code == 42


def test_success(runner):
    """A successful program exits 0."""
    result = runner.invoke(fouroneone, BASE + ["/bin/sh", "-c", "true"])
    assert result.exit_code == 0


def test_missing_program_exits_127(runner):
    """A program that cannot be run reports an error and exits 127."""
    result = runner.invoke(fouroneone, BASE + ["/no/such/binary"])
    assert result.exit_code == EXIT_NOT_RUN
    assert "/no/such/binary could not be run" in result.output


def test_signal_exits_127(runner):
    """A program killed by a signal is reported like one that never ran."""
    result = runner.invoke(fouroneone, BASE + ["/bin/sh", "-c", "kill -9 $$"])
    assert result.exit_code == EXIT_NOT_RUN


def test_env_pairs_reach_child(runner, fs):
    """-e NAME=VALUE sets variables; nothing else is inherited by default."""
    script = 'test "$A" = "1=2" && test -z "$HOME" && printf ok > out.txt'
    result = runner.invoke(
        fouroneone, BASE + ["-e", "A=1=2", "/bin/sh", "-c", script]
    )
    assert result.exit_code == 0
    assert Path("out.txt").read_text(encoding="utf-8") == "ok"


def test_inherit_env(runner):
    """--inherit-env passes the caller's environment through."""
    result = runner.invoke(
        fouroneone,
        BASE + ["--inherit-env", "/bin/sh", "-c", 'test "$MARKER" = yes'],
        env={"MARKER": "yes"},
    )
    assert result.exit_code == 0


def test_options_after_program_belong_to_program(runner):
    """Options after the program name are not parsed by fouroneone."""
    result = runner.invoke(
        fouroneone, BASE + ["/bin/sh", "-c", 'test "$0" = "--env"', "--env"]
    )
    assert result.exit_code == 0


def test_bad_env_pair_is_usage_error(runner):
    """Malformed -e values are rejected before anything runs."""
    result = runner.invoke(fouroneone, BASE + ["-e", "NOVALUE", "/bin/true"])
    assert result.exit_code == 2
    assert "Expected NAME=VALUE" in result.output


def test_empty_executable_is_usage_error(runner):
    """An empty program name is rejected before anything runs."""
    result = runner.invoke(fouroneone, BASE + [""])
    assert result.exit_code == 2
    assert "must not be empty" in result.output
