"""Tests for ``GitMetadataProvider``."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable

import pytest

from rexp.features.providers import (
    GitMetadataProvider,
    ProviderSettings,
    UNKNOWN,
    create_provider,
)
from rexp.platform.process import ProcessOutcome, ProcessResult
from rexp.shared import (
    Entry,
    InvalidSettingsError,
    ProviderAlreadyConfiguredError,
    ProviderNotConfiguredError,
)


class _PathEntry:
    """Minimal host entry exposing only a path."""

    def __init__(self, path: Path | str) -> None:
        self.path = path


ResultFactory = Callable[..., ProcessResult]


def _provider(runner: Any, limit: int = 10) -> GitMetadataProvider:
    provider = GitMetadataProvider(runner=runner)
    _ = provider.configure(limit)
    return provider


def test_query_before_configure_is_fatal(fake_runner: Any, tmp_path: Path) -> None:
    provider = GitMetadataProvider(runner=fake_runner)
    entry = _PathEntry(tmp_path)

    for query in (
        provider.commit_summary,
        provider.primary_language,
        provider.last_modified_relative,
        provider.last_author,
    ):
        with pytest.raises(ProviderNotConfiguredError):
            _ = query(entry)
    assert fake_runner.calls == []


def test_configure_only_once(fake_runner: Any) -> None:
    provider = GitMetadataProvider(runner=fake_runner)
    settings = provider.configure(20)

    assert settings == ProviderSettings(limit=20)
    assert provider.is_configured
    with pytest.raises(ProviderAlreadyConfiguredError):
        _ = provider.configure(30)
    assert provider.settings.limit == 20


@pytest.mark.parametrize("limit", [-1, 2.5, True, "10"])
def test_configure_rejects_invalid_limits(fake_runner: Any, limit: Any) -> None:
    provider = GitMetadataProvider(runner=fake_runner)
    with pytest.raises(InvalidSettingsError):
        _ = provider.configure(limit)
    assert not provider.is_configured


def test_settings_can_be_bound_at_construction(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["summary"] = result_factory("abcdef")
    provider = GitMetadataProvider(ProviderSettings(limit=3), runner=fake_runner)

    assert provider.commit_summary(_PathEntry(tmp_path)) == "abc.."
    with pytest.raises(ProviderAlreadyConfiguredError):
        _ = provider.configure(5)


def test_commit_summary_truncates_long_subjects(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["summary"] = result_factory("Fix off-by-one error in parser")
    provider = _provider(fake_runner, limit=10)

    assert provider.commit_summary(_PathEntry(tmp_path / "main")) == "Fix off-by.."


def test_commit_summary_returns_short_subjects_unchanged(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["summary"] = result_factory("Add README\n")
    provider = _provider(fake_runner, limit=10)

    assert provider.commit_summary(_PathEntry(tmp_path)) == "Add README"


def test_commit_summary_never_contains_newlines(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["summary"] = result_factory("line one\nline two\n")
    provider = _provider(fake_runner, limit=12)

    result = provider.commit_summary(_PathEntry(tmp_path))
    assert "\n" not in result
    assert result == "line oneline.."


def test_commit_summary_empty_when_git_prints_nothing(fake_runner: Any, tmp_path: Path) -> None:
    provider = _provider(fake_runner)

    assert provider.commit_summary(_PathEntry(tmp_path)) == ""


@pytest.mark.parametrize(
    ("stdout", "expected"),
    [
        ('{"language": "Go"}', "Go"),
        ("{}", UNKNOWN),
        ("<html>oops</html>", UNKNOWN),
        ("", UNKNOWN),
    ],
)
def test_primary_language(
    fake_runner: Any,
    result_factory: ResultFactory,
    tmp_path: Path,
    stdout: str,
    expected: str,
) -> None:
    fake_runner.responses["language"] = result_factory(stdout)
    provider = _provider(fake_runner)

    result = provider.primary_language(_PathEntry(tmp_path / "main.go"))
    assert result == expected
    assert result != ""


def test_primary_language_unknown_when_linguist_missing(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["language"] = result_factory(
        outcome=ProcessOutcome.SPAWN_FAILURE, exit_code=None
    )
    provider = _provider(fake_runner)

    query = provider.query_primary_language(_PathEntry(tmp_path))
    assert query.value == UNKNOWN
    assert query.result.outcome is ProcessOutcome.SPAWN_FAILURE
    assert not query.ok


def test_last_modified_and_author_strip_line_terminators(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["modified"] = result_factory("3 days ago\r\n")
    fake_runner.responses["author"] = result_factory("Ada\nLovelace\n")
    provider = _provider(fake_runner)
    entry = _PathEntry(tmp_path)

    assert provider.last_modified_relative(entry) == "3 days ago"
    assert provider.last_author(entry) == "AdaLovelace"


def test_non_zero_exit_still_uses_stdout(
    fake_runner: Any, result_factory: ResultFactory, tmp_path: Path
) -> None:
    fake_runner.responses["author"] = result_factory(
        "Grace\n", outcome=ProcessOutcome.NON_ZERO_EXIT, exit_code=128
    )
    provider = _provider(fake_runner)

    query = provider.query_last_author(_PathEntry(tmp_path))
    assert query.value == "Grace"
    assert query.result.exit_code == 128


def test_file_entries_run_in_parent_directory(fake_runner: Any, tmp_path: Path) -> None:
    target = tmp_path / "src" / "main.rs"
    target.parent.mkdir()
    target.write_text("fn main() {}\n")
    provider = _provider(fake_runner)

    _ = provider.last_author(_PathEntry(target))
    _ = provider.primary_language(_PathEntry(str(target)))

    (git_argv, git_cwd), (linguist_argv, linguist_cwd) = fake_runner.calls
    assert git_argv == (
        "git",
        "--literal-pathspecs",
        "log",
        "-1",
        "--format=%an",
        "--",
        "main.rs",
    )
    assert git_cwd == target.parent
    assert linguist_argv == ("github-linguist", "--json", "main.rs")
    assert linguist_cwd == target.parent


def test_directory_entries_query_their_own_tree(fake_runner: Any, tmp_path: Path) -> None:
    provider = _provider(fake_runner)

    _ = provider.last_modified_relative(_PathEntry(tmp_path))

    argv, cwd = fake_runner.calls[0]
    assert argv[-2:] == ("--", ".")
    assert "--date=relative" in argv
    assert cwd == tmp_path


def test_path_with_shell_metacharacters_is_one_argument(fake_runner: Any, tmp_path: Path) -> None:
    target = tmp_path / "a b; rm -rf $HOME.txt"
    target.write_text("")
    provider = _provider(fake_runner)

    _ = provider.commit_summary(_PathEntry(target))

    argv, _cwd = fake_runner.calls[0]
    assert argv[-1] == "a b; rm -rf $HOME.txt"


def test_accepts_concrete_entries(fake_runner: Any, result_factory: ResultFactory, tmp_path: Path) -> None:
    target = tmp_path / "notes.md"
    target.write_text("# notes\n")
    fake_runner.responses["summary"] = result_factory("Write notes")
    provider = _provider(fake_runner, limit=20)

    assert provider.commit_summary(Entry.from_path(target)) == "Write notes"


def test_create_provider_is_configured(fake_runner: Any) -> None:
    provider = create_provider(7, runner=fake_runner)

    assert provider.settings.limit == 7


_GIT = shutil.which("git")


@pytest.mark.skipif(_GIT is None, reason="git is not installed")
def test_against_real_repository(tmp_path: Path) -> None:
    """End-to-end check with a throwaway repository."""

    repo = tmp_path / "repo"
    repo.mkdir()
    tracked = repo / "parser.py"
    tracked.write_text("print('hi')\n")

    def git(*args: str) -> None:
        _ = subprocess.run(
            [
                "git",
                "-c",
                "user.name=Test Author",
                "-c",
                "user.email=test@example.com",
                "-c",
                "commit.gpgsign=false",
                *args,
            ],
            cwd=repo,
            check=True,
            capture_output=True,
        )

    git("init", "-q")
    git("add", "parser.py")
    git("commit", "-q", "-m", "Fix off-by-one error in parser")

    provider = create_provider(10, timeout_seconds=30.0)
    entry = Entry.from_path(tracked)

    assert provider.commit_summary(entry) == "Fix off-by.."
    assert provider.last_author(entry) == "Test Author"
    assert provider.last_modified_relative(entry).endswith("ago")
    assert provider.commit_summary(Entry.from_path(repo)) == "Fix off-by.."
