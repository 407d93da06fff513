"""Questionnaire construction for fields that detection could not fill."""

from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any, List, Mapping, Union

from .config import DEFAULT_CONTRIBUTING, DEFAULT_OUTPUT
from .licenses import DEFAULT_LICENSE, LICENSES, is_known_license
from .models import ProjectInfo, Question, Validator

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

EMAIL_MESSAGE = "Please enter a valid email."
OUTPUT_MESSAGE = "Filename must end with .md"


def required(message: str) -> Validator:
    """Return a validator rejecting blank answers with ``message``."""

    def _validate(value: str) -> Union[bool, str]:
        return True if value.strip() else message

    return _validate


def validate_email(value: str) -> Union[bool, str]:
    return True if _EMAIL_RE.match(value) else EMAIL_MESSAGE


def validate_output_file(value: str) -> Union[bool, str]:
    return True if value.strip().endswith(".md") else OUTPUT_MESSAGE


def build_questions(
    detected: Union[ProjectInfo, Mapping[str, Any]],
    *,
    default_license: str = DEFAULT_LICENSE,
    default_contributing: str = DEFAULT_CONTRIBUTING,
    default_output: str = DEFAULT_OUTPUT,
) -> List[Question]:
    """Return the prompts to ask, skipping the fields already detected."""
    values = asdict(detected) if isinstance(detected, ProjectInfo) else dict(detected)

    def get(key: str) -> str:
        value = values.get(key)
        return value if isinstance(value, str) else ""

    questions: List[Question] = []

    if not get("title"):
        questions.append(
            Question("input", "title", "Project name:", validate=required("Project name is required."))
        )

    questions.append(
        Question(
            "input",
            "description",
            "Short description:",
            default=get("description") or None,
            validate=required("Description is required."),
        )
    )

    if not get("github"):
        questions.append(
            Question("input", "github", "GitHub username:", validate=required("GitHub username is required."))
        )

    if not get("email"):
        questions.append(Question("input", "email", "Email address:", validate=validate_email))

    detected_license = get("license")
    questions.append(
        Question(
            "list",
            "license",
            "License:",
            default=detected_license if is_known_license(detected_license) else default_license,
            choices=LICENSES,
        )
    )

    questions.append(
        Question(
            "input",
            "usage",
            "Usage information:",
            validate=required("Usage information is required."),
        )
    )

    questions.append(
        Question("input", "contributing", "Contribution guidelines:", default=default_contributing)
    )

    questions.append(
        Question(
            "input",
            "outputFile",
            "Output filename:",
            default=default_output,
            validate=validate_output_file,
        )
    )

    return questions


__all__ = [
    "EMAIL_MESSAGE",
    "OUTPUT_MESSAGE",
    "build_questions",
    "required",
    "validate_email",
    "validate_output_file",
]
