"""Readers for the git configuration store."""

from .config import GitConfigStore, default_global_paths, extract_github_user, parse_git_config

__all__ = ["GitConfigStore", "default_global_paths", "extract_github_user", "parse_git_config"]
