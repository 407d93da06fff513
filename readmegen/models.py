"""Core data models shared across readmegen components."""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional, Tuple, Union

Validator = Callable[[str], Union[bool, str]]


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class ProjectInfo:
    """Metadata detected from the manifest and git configuration.

    Every field is a string; a missing value is ``""``, never ``None``.
    """

    title: str = ""
    description: str = ""
    license: str = ""
    installation: str = ""
    tests: str = ""
    github: str = ""
    email: str = ""
    author: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """Build a record from a mapping, ignoring unknown keys and non-string values."""
        names = {item.name for item in fields(cls)}
        return cls(**{name: _as_text(data.get(name)) for name in names})

    def merge(self, answers: Mapping[str, Any]):
        """Return a copy with ``answers`` layered on top; answers win."""
        names = {item.name for item in fields(self)}
        updates = {key: _as_text(value) for key, value in answers.items() if key in names}
        return replace(self, **updates)


@dataclass(frozen=True)
class DocumentData(ProjectInfo):
    """Everything the README renderer needs."""

    usage: str = ""
    contributing: str = ""


@dataclass(frozen=True)
class StringAuthor:
    """``author`` given as ``"Name <email>"`` or a bare name."""

    text: str


@dataclass(frozen=True)
class ObjectAuthor:
    """``author`` given as an object with ``name``/``email`` keys."""

    name: str = ""
    email: str = ""


AuthorField = Union[StringAuthor, ObjectAuthor]


@dataclass(frozen=True)
class Question:
    """A single interactive prompt."""

    kind: str
    name: str
    message: str
    default: Any = None
    choices: Tuple[str, ...] = ()
    validate: Optional[Validator] = field(default=None, compare=False)

    def check(self, value: str) -> Union[bool, str]:
        """Run the validator, treating a missing one as always passing."""
        if self.validate is None:
            return True
        return self.validate(value)
