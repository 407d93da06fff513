"""Project metadata detection from package.json and git config."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .git.config import GitConfigStore
from .licenses import DEFAULT_LICENSE
from .logging import get_logger
from .models import AuthorField, ObjectAuthor, ProjectInfo, StringAuthor
from .readers import read_json

MANIFEST_FILENAME = "package.json"
INSTALL_COMMAND = "npm install"
NO_TEST_MARKER = "no test specified"

_AUTHOR_RE = re.compile(r"^([^<]*)<([^>]+)>")


@dataclass
class DetectionContext:
    """Everything the detector reads from: a directory, a JSON reader and a git store."""

    root: Path
    json_reader: Callable[[Path], Optional[Dict[str, Any]]] = read_json
    git: Optional[GitConfigStore] = None
    default_license: str = DEFAULT_LICENSE
    manifest_name: str = field(default=MANIFEST_FILENAME)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if self.git is None:
            self.git = GitConfigStore(self.root)


def parse_author(value: Any) -> Optional[AuthorField]:
    """Classify the manifest ``author`` value, returning ``None`` when unusable."""
    if isinstance(value, str):
        return StringAuthor(value) if value else None
    if isinstance(value, Mapping):
        name = value.get("name")
        email = value.get("email")
        return ObjectAuthor(
            name=name if isinstance(name, str) else "",
            email=email if isinstance(email, str) else "",
        )
    return None


def split_author(author: Optional[AuthorField]) -> Tuple[str, str]:
    """Return ``(name, email)`` for a parsed author field."""
    if author is None:
        return "", ""
    if isinstance(author, ObjectAuthor):
        return author.name, author.email
    match = _AUTHOR_RE.match(author.text)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return author.text, ""


class MetadataDetector:
    """Assembles a :class:`ProjectInfo` from the manifest and git configuration."""

    def __init__(self, context: DetectionContext) -> None:
        self.context = context
        self.logger = get_logger("detector")

    def detect(self) -> ProjectInfo:
        root = self.context.root
        git = self.context.git
        manifest = self.context.json_reader(root / self.context.manifest_name)
        if manifest is None:
            self.logger.debug("No usable %s in %s", self.context.manifest_name, root)
            manifest = {}

        author_name, author_email = split_author(parse_author(manifest.get("author")))

        info = ProjectInfo(
            title=_text(manifest.get("name")) or _directory_name(root),
            description=_text(manifest.get("description")),
            license=_text(manifest.get("license")) or self.context.default_license,
            installation=INSTALL_COMMAND if _declares_dependencies(manifest) else "",
            tests=_test_command(manifest),
            github=git.resolve_github_user(),
            email=author_email or git.resolve("user.email"),
            author=author_name or git.resolve("user.name"),
        )
        self.logger.debug("Detected project info: %s", info)
        return info


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _directory_name(root: Path) -> str:
    return root.name or root.resolve().name


def _declares_dependencies(manifest: Mapping[str, Any]) -> bool:
    for key in ("dependencies", "devDependencies"):
        deps = manifest.get(key)
        if isinstance(deps, Mapping) and deps:
            return True
    return False


def _test_command(manifest: Mapping[str, Any]) -> str:
    scripts = manifest.get("scripts")
    if not isinstance(scripts, Mapping):
        return ""
    command = _text(scripts.get("test"))
    if NO_TEST_MARKER in command:
        return ""
    return command


__all__ = [
    "DetectionContext",
    "MetadataDetector",
    "parse_author",
    "split_author",
]
