"""Git configuration parsing and scoped lookups."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..logging import get_logger
from ..readers import read_text

_SECTION_RE = re.compile(r'^\s*\[([^\]\s"]+)(?:\s+"([^"]*)")?\s*\]')
_ENTRY_RE = re.compile(r"^\s*([^=\s#;][^=\s]*)\s*=\s*(.*)$")
_GITHUB_RE = re.compile(r"github\.com[:/]([^/]+)/")

_LOGGER = get_logger("git.config")


def parse_git_config(text: str) -> Dict[str, str]:
    """Flatten git-config text into ``section[.subsection].key -> value``.

    Entries appearing before the first section header are dropped, as are
    comments and lines that match neither form. Later duplicates win.
    """
    entries: Dict[str, str] = {}
    section = ""
    for line in text.splitlines():
        header = _SECTION_RE.match(line)
        if header:
            name, subsection = header.group(1), header.group(2)
            section = f"{name}.{subsection}" if subsection is not None else name
            continue
        entry = _ENTRY_RE.match(line)
        if entry and section:
            entries[f"{section}.{entry.group(1).strip()}"] = entry.group(2).strip()
    return entries


def extract_github_user(url: str) -> str:
    """Return the account segment of a GitHub remote URL, or ``""``."""
    match = _GITHUB_RE.search(url)
    return match.group(1) if match else ""


def default_global_paths() -> List[Path]:
    """Return the user-global git config locations in lookup order."""
    try:
        home: Optional[Path] = Path.home()
    except RuntimeError:
        _LOGGER.debug("Home directory cannot be determined; skipping ~/.gitconfig")
        home = None

    paths = [home / ".gitconfig"] if home is not None else []
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        paths.append(Path(xdg_home) / "git" / "config")
    elif home is not None:
        paths.append(home / ".config" / "git" / "config")
    return paths


class GitConfigStore:
    """Resolves git config keys from the repository first, then user-global files."""

    def __init__(
        self,
        root: Path | str,
        *,
        global_paths: Optional[Sequence[Path | str]] = None,
        reader: Callable[[Path], str] = read_text,
    ) -> None:
        self.root = Path(root)
        self._global_paths = [Path(p) for p in global_paths] if global_paths is not None else None
        self._reader = reader
        self._tables: Optional[List[Dict[str, str]]] = None

    def resolve(self, key: str) -> str:
        """Return the first non-empty value for ``key`` across scopes, or ``""``."""
        for table in self._load_tables():
            value = table.get(key, "")
            if value:
                return value
        _LOGGER.debug("git config key %s not set", key)
        return ""

    def resolve_github_user(self) -> str:
        url = self.resolve("remote.origin.url")
        if not url:
            return ""
        user = extract_github_user(url)
        if not user:
            _LOGGER.debug("Remote %s is not a GitHub URL", url)
        return user

    def local_path(self) -> Path:
        """Return the repository-local config file, following ``.git`` link files."""
        dot_git = self.root / ".git"
        if dot_git.is_file():
            pointer = self._reader(dot_git).strip()
            if pointer.startswith("gitdir:"):
                gitdir = Path(pointer[len("gitdir:"):].strip())
                if not gitdir.is_absolute():
                    gitdir = self.root / gitdir
                return gitdir / "config"
        return dot_git / "config"

    def _load_tables(self) -> List[Dict[str, str]]:
        if self._tables is None:
            global_paths = (
                self._global_paths if self._global_paths is not None else default_global_paths()
            )
            paths = [self.local_path(), *global_paths]
            self._tables = [parse_git_config(self._reader(path)) for path in paths]
        return self._tables


__all__ = ["GitConfigStore", "default_global_paths", "extract_github_user", "parse_git_config"]
