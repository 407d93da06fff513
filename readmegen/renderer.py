"""Markdown rendering for generated README files."""

from __future__ import annotations

from typing import Callable, List, Tuple

from .licenses import UNLICENSED, badge_for
from .models import DocumentData

TOC_ENTRIES = ("Installation", "Usage", "License", "Contributing")

Predicate = Callable[[DocumentData], bool]
SectionBuilder = Callable[[DocumentData], str]


def _always(_: DocumentData) -> bool:
    return True


def _has_badge(data: DocumentData) -> bool:
    return bool(badge_for(data.license))


def _has_tests(data: DocumentData) -> bool:
    return bool(data.tests)


def _fenced(command: str) -> str:
    return f"```bash\n{command}\n```\n"


def toc_entries(data: DocumentData) -> List[str]:
    """Return the table-of-contents entries in display order."""
    entries = list(TOC_ENTRIES)
    if _has_tests(data):
        entries.append("Tests")
    entries.append("Questions")
    return entries


def _title(data: DocumentData) -> str:
    return f"# {data.title}\n"


def _badge(data: DocumentData) -> str:
    return badge_for(data.license) + "\n"


def _description(data: DocumentData) -> str:
    return f"## Description\n{data.description}\n"


def _table_of_contents(data: DocumentData) -> str:
    links = "\n".join(f"- [{entry}](#{entry.lower()})" for entry in toc_entries(data))
    return f"## Table of Contents\n{links}\n"


def _installation(data: DocumentData) -> str:
    return "## Installation\n" + _fenced(data.installation)


def _usage(data: DocumentData) -> str:
    return f"## Usage\n{data.usage}\n"


def _license(data: DocumentData) -> str:
    if data.license == UNLICENSED:
        return "## License\nThis project is not currently licensed.\n"
    return f"## License\nThis project is licensed under the **{data.license}** license.\n"


def _contributing(data: DocumentData) -> str:
    return f"## Contributing\n{data.contributing}\n"


def _tests(data: DocumentData) -> str:
    return "## Tests\n" + _fenced(data.tests)


def _questions(data: DocumentData) -> str:
    return (
        "## Questions\n"
        f"For questions or issues, open an issue or contact me at **{data.email}**.\n"
        f"Find more of my work on [GitHub](https://github.com/{data.github}).\n"
    )


# Evaluated top to bottom; a section is emitted when its predicate holds.
SECTIONS: Tuple[Tuple[Predicate, SectionBuilder], ...] = (
    (_always, _title),
    (_has_badge, _badge),
    (_always, _description),
    (_always, _table_of_contents),
    (_always, _installation),
    (_always, _usage),
    (_always, _license),
    (_always, _contributing),
    (_has_tests, _tests),
    (_always, _questions),
)


def render_readme(data: DocumentData) -> str:
    """Render ``data`` into README Markdown."""
    return "\n".join(build(data) for predicate, build in SECTIONS if predicate(data))


__all__ = ["SECTIONS", "TOC_ENTRIES", "render_readme", "toc_entries"]
