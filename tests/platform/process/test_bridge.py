"""Tests for the synchronous process bridge."""

from __future__ import annotations

import shlex
import sys
from pathlib import Path

import pytest

from rexp.platform.process import ProcessBridge, ProcessOutcome, run, to_argv

PYTHON = sys.executable


def _script(code: str) -> list[str]:
    return [PYTHON, "-c", code]


def test_run_returns_stdout() -> None:
    bridge = ProcessBridge()

    assert bridge.run(_script("print('hello')")) == "hello\n"


def test_run_silent_command_returns_empty_string() -> None:
    bridge = ProcessBridge()

    result = bridge.execute(_script("pass"))
    assert bridge.run(_script("pass")) == ""
    assert result.outcome is ProcessOutcome.EMPTY
    assert result.ok
    assert result.exit_code == 0


def test_run_accepts_command_strings_without_a_shell() -> None:
    command = f"{shlex.quote(PYTHON)} -c 'import sys; print(sys.argv[1])' 'a b; echo injected'"

    assert run(command) == "a b; echo injected\n"


def test_non_zero_exit_keeps_stdout() -> None:
    bridge = ProcessBridge()
    code = "import sys; print('partial'); sys.stderr.write('boom'); sys.exit(3)"

    result = bridge.execute(_script(code))

    assert result.outcome is ProcessOutcome.NON_ZERO_EXIT
    assert not result.ok
    assert result.exit_code == 3
    assert result.text == "partial\n"
    assert result.stderr == "boom"
    assert bridge.run(_script(code)) == "partial\n"


def test_non_zero_exit_without_output_is_empty_text() -> None:
    bridge = ProcessBridge()

    assert bridge.run(_script("import sys; sys.exit(1)")) == ""


def test_spawn_failure_is_empty_text(tmp_path: Path) -> None:
    bridge = ProcessBridge()
    missing = str(tmp_path / "definitely-not-a-command")

    result = bridge.execute([missing, "--json"])

    assert result.outcome is ProcessOutcome.SPAWN_FAILURE
    assert result.text == ""
    assert result.exit_code is None
    assert bridge.run([missing]) == ""


def test_timeout_kills_and_returns_empty_text() -> None:
    bridge = ProcessBridge(timeout_seconds=0.5)

    result = bridge.execute(_script("import time; print('late', flush=True); time.sleep(30)"))

    assert result.outcome is ProcessOutcome.TIMEOUT
    assert result.text == ""
    assert result.duration_ms < 30_000


def test_runs_in_requested_directory(tmp_path: Path) -> None:
    bridge = ProcessBridge()

    output = bridge.run(_script("import os; print(os.getcwd())"), cwd=tmp_path)

    assert Path(output.strip()).resolve() == tmp_path.resolve()


def test_environment_override() -> None:
    bridge = ProcessBridge(env={"REXP_PROBE": "42"})

    output = bridge.run(_script("import os; print(os.environ.get('REXP_PROBE'))"))

    assert output == "42\n"


def test_undecodable_output_is_replaced() -> None:
    bridge = ProcessBridge()

    output = bridge.run(_script("import sys; sys.stdout.buffer.write(b'ok\\xff')"))

    assert output == "ok\ufffd"


@pytest.mark.parametrize("command", ["", "   ", []])
def test_empty_command_is_rejected(command: str | list[str]) -> None:
    with pytest.raises(ValueError):
        _ = ProcessBridge().run(command)


def test_to_argv_normalizes_paths() -> None:
    assert to_argv(["git", Path("a b")]) == ("git", "a b")  # pyright: ignore[reportArgumentType]
    assert to_argv("git log -1 -- 'a b'") == ("git", "log", "-1", "--", "a b")


def test_command_line_is_shell_quoted() -> None:
    result = ProcessBridge().execute(_script("pass"))

    assert result.command_line == shlex.join([PYTHON, "-c", "pass"])
