"""License identifiers offered by the questionnaire and their badge tokens."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

# Insertion order is the order shown in the license prompt.
LICENSE_BADGES: Dict[str, Optional[str]] = {
    "MIT": "MIT-yellow",
    "Apache-2.0": "Apache_2.0-blue",
    "GPL-3.0": "GPL_3.0-red",
    "BSD-3-Clause": "BSD_3--Clause-orange",
    "None": None,
}

LICENSES: Tuple[str, ...] = tuple(LICENSE_BADGES)

DEFAULT_LICENSE = "MIT"
UNLICENSED = "None"

BADGE_URL = "https://img.shields.io/badge/License-{token}.svg"


def badge_for(license_id: str) -> str:
    """Return the Markdown badge for ``license_id`` or ``""`` when it has none."""
    token = LICENSE_BADGES.get(license_id)
    if not token:
        return ""
    return f"![License]({BADGE_URL.format(token=token)})"


def is_known_license(license_id: str) -> bool:
    return license_id in LICENSE_BADGES


__all__ = [
    "BADGE_URL",
    "DEFAULT_LICENSE",
    "LICENSES",
    "LICENSE_BADGES",
    "UNLICENSED",
    "badge_for",
    "is_known_license",
]
