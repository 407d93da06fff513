"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .licenses import DEFAULT_LICENSE, is_known_license

CONFIG_FILENAME = ".readmegen.yml"
DEFAULT_OUTPUT = "README.md"
DEFAULT_CONTRIBUTING = "Fork the repo, create a feature branch, and submit a pull request."


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReadmegenConfig:
    """Represents the defaults defined in .readmegen.yml."""

    root: Path
    output: str = DEFAULT_OUTPUT
    license: str = DEFAULT_LICENSE
    contributing: str = DEFAULT_CONTRIBUTING
    global_gitconfig: List[Path] = field(default_factory=list)


def load_config(config_path: Path) -> ReadmegenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent

    if not config_file.is_file():
        return ReadmegenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ReadmegenConfig(root=root)

    output = _as_str(data.get("output"))
    if output:
        if not output.strip().endswith(".md"):
            raise ConfigError(f"output must name a .md file, got {output!r}")
        config.output = output.strip()

    license_id = _as_str(data.get("license"))
    if license_id:
        if not is_known_license(license_id):
            raise ConfigError(f"Unknown license {license_id!r}")
        config.license = license_id

    contributing = _as_str(data.get("contributing"))
    if contributing:
        config.contributing = contributing

    config.global_gitconfig = [
        Path(item).expanduser() for item in _as_str_list(data.get("global_gitconfig"))
    ]
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, str)]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONTRIBUTING",
    "DEFAULT_OUTPUT",
    "ReadmegenConfig",
    "load_config",
]
