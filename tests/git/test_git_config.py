"""Tests for readmegen.git.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from readmegen.detector import DetectionContext, MetadataDetector
from readmegen.git.config import (
    GitConfigStore,
    default_global_paths,
    extract_github_user,
    parse_git_config,
)


def test_parse_drops_entries_before_any_section() -> None:
    assert parse_git_config("key=val") == {}


def test_parse_last_duplicate_wins() -> None:
    assert parse_git_config("[a]\nk=1\nk=2")["a.k"] == "2"


def test_parse_handles_subsections_and_whitespace() -> None:
    text = """
[core]
    bare = false
[remote "origin"]
    url = git@github.com:alice/repo.git
    fetch = +refs/heads/*:refs/remotes/origin/*
[user]
\tname =   Alice Example  
"""
    table = parse_git_config(text)
    assert table == {
        "core.bare": "false",
        "remote.origin.url": "git@github.com:alice/repo.git",
        "remote.origin.fetch": "+refs/heads/*:refs/remotes/origin/*",
        "user.name": "Alice Example",
    }


def test_parse_ignores_comments_and_malformed_lines() -> None:
    text = "[user]\n# name = hidden\n; email = hidden\nnot a pair\n\nemail = a@b.com\n"
    assert parse_git_config(text) == {"user.email": "a@b.com"}


def test_section_header_line_never_contributes_an_entry() -> None:
    assert parse_git_config('[remote "x=y"]\n') == {}


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("git@github.com:alice/repo.git", "alice"),
        ("https://github.com/bob/project.git", "bob"),
        ("ssh://git@github.com/carol/tool", "carol"),
        ("https://gitlab.com/alice/repo.git", ""),
        ("gh:alice/repo.git", ""),
        ("https://github.com/alice", ""),
    ],
)
def test_extract_github_user(url: str, expected: str) -> None:
    assert extract_github_user(url) == expected


def test_resolve_prefers_local_over_global(project) -> None:
    project.local_git_config("[user]\n    email = local@example.com\n")
    project.global_git_config("[user]\n    email = global@example.com\n    name = Global Name\n")
    store = project.git_store()

    assert store.resolve("user.email") == "local@example.com"
    assert store.resolve("user.name") == "Global Name"
    assert store.resolve("user.signingkey") == ""


def test_resolve_falls_back_when_local_value_is_empty(project) -> None:
    project.local_git_config("[user]\n    email =\n")
    project.global_git_config("[user]\n    email = global@example.com\n")
    assert project.git_store().resolve("user.email") == "global@example.com"


def test_resolve_with_no_config_files(tmp_path: Path) -> None:
    store = GitConfigStore(tmp_path, global_paths=[tmp_path / "missing"])
    assert store.resolve("user.name") == ""
    assert store.resolve_github_user() == ""


def test_resolve_github_user_from_remote(project) -> None:
    project.local_git_config('[remote "origin"]\n    url = git@github.com:alice/repo.git\n')
    assert project.git_store().resolve_github_user() == "alice"


def test_resolve_github_user_ignores_other_hosts(project) -> None:
    project.local_git_config('[remote "origin"]\n    url = https://gitlab.com/alice/repo.git\n')
    assert project.git_store().resolve_github_user() == ""


def test_local_path_follows_gitdir_pointer(tmp_path: Path) -> None:
    worktree = tmp_path / "worktree"
    worktree.mkdir()
    gitdir = tmp_path / "main" / ".git" / "worktrees" / "wt"
    gitdir.mkdir(parents=True)
    (gitdir / "config").write_text("[user]\n    name = Worktree\n", encoding="utf-8")
    (worktree / ".git").write_text(f"gitdir: {gitdir}\n", encoding="utf-8")

    store = GitConfigStore(worktree, global_paths=[])
    assert store.local_path() == gitdir / "config"
    assert store.resolve("user.name") == "Worktree"


def test_injected_reader_is_used_for_every_scope(tmp_path: Path) -> None:
    seen = []

    def reader(path: Path) -> str:
        seen.append(path)
        return "[user]\n  name = Injected\n" if path.name == "global" else ""

    store = GitConfigStore(tmp_path, global_paths=[tmp_path / "global"], reader=reader)
    assert store.resolve("user.name") == "Injected"
    assert seen == [tmp_path / ".git" / "config", tmp_path / "global"]


def test_default_global_paths_without_home_directory(monkeypatch, tmp_path: Path) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert default_global_paths() == [tmp_path / "xdg" / "git" / "config"]

    monkeypatch.delenv("XDG_CONFIG_HOME")
    assert default_global_paths() == []


def test_detect_survives_missing_home_directory(monkeypatch, tmp_path: Path) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    project_root = tmp_path / "proj"
    project_root.mkdir()

    info = MetadataDetector(DetectionContext(project_root)).detect()

    assert info.title == "proj"
    assert info.email == ""
