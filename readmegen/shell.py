"""Interactive driver: detect, ask, render and write the README."""

from __future__ import annotations

import os
import stat
import sys
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import ReadmegenConfig
from .detector import DetectionContext, MetadataDetector
from .git.config import GitConfigStore
from .logging import get_logger
from .models import DocumentData, ProjectInfo, Question
from .questions import build_questions
from .renderer import render_readme

OUTPUT_FIELD = "outputFile"


class NoTerminalError(RuntimeError):
    """Raised when prompts are needed but stdin is not an interactive terminal."""


@dataclass
class RunResult:
    """Outcome of a shell run; ``path`` is ``None`` when the user aborted."""

    path: Optional[Path]
    data: Optional[DocumentData] = None


def _new_file_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, content: str) -> None:
    """Write ``content`` next to ``path`` first, then move it into place.

    The result keeps the mode of the file it replaces, or the umask default
    for a new file.
    """
    mode = _new_file_mode(path)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise



def summarize_detection(info: ProjectInfo) -> List[str]:
    """Return the "auto-detected" lines shown before the questionnaire."""
    labels = (
        ("title", "Project"),
        ("github", "GitHub"),
        ("email", "Email"),
        ("installation", "Install"),
        ("tests", "Tests"),
    )
    lines = []
    for name, label in labels:
        value = getattr(info, name)
        if value:
            lines.append(f"  {label + ':':<9} {value}")
    return lines


class InteractionShell:
    """Runs the questionnaire against a terminal and writes the result."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        prompt: Callable[..., Any] = Prompt.ask,
        confirm: Callable[..., bool] = Confirm.ask,
        interactive: Callable[[], bool] | None = None,
    ) -> None:
        self.console = console or Console()
        self._prompt = prompt
        self._confirm = confirm
        self._interactive = interactive or sys.stdin.isatty
        self.logger = get_logger("shell")

    def ask(self, question: Question) -> Any:
        """Ask ``question`` until its validator accepts the answer."""
        kwargs: Dict[str, Any] = {"console": self.console}
        if question.default is not None:
            kwargs["default"] = question.default

        if question.kind == "confirm":
            return self._confirm(question.message, **kwargs)
        if question.kind == "list":
            kwargs["choices"] = list(question.choices)

        while True:
            answer = self._prompt(question.message, **kwargs)
            answer = "" if answer is None else str(answer)
            verdict = question.check(answer)
            if verdict is True:
                return answer
            self.console.print(f"[red]{verdict}[/red]")

    def run(
        self,
        root: Path,
        config: ReadmegenConfig,
        *,
        output: str | None = None,
        force: bool = False,
    ) -> RunResult:
        """Detect metadata under ``root``, prompt for the rest and write the README."""
        if not self._interactive():
            raise NoTerminalError("Prompts require an interactive terminal.")

        git = GitConfigStore(root, global_paths=config.global_gitconfig or None)
        context = DetectionContext(root, git=git, default_license=config.license)
        detected = MetadataDetector(context).detect()

        self.console.print("\n[bold]README Generator[/bold]\n")
        summary = summarize_detection(detected)
        if summary:
            self.console.print("Auto-detected from your project:")
            for line in summary:
                self.console.print(line, markup=False, highlight=False)
            self.console.print()

        questions = build_questions(
            detected,
            default_license=config.license,
            default_contributing=config.contributing,
            default_output=config.output,
        )
        if output is not None:
            questions = [q for q in questions if q.name != OUTPUT_FIELD]

        answers: Dict[str, Any] = {q.name: self.ask(q) for q in questions}
        output_name = str(answers.pop(OUTPUT_FIELD, None) or output or config.output).strip()
        data = DocumentData.from_mapping(asdict(detected)).merge(answers)

        target = Path(output_name)
        if not target.is_absolute():
            target = root / target

        if target.exists() and not force:
            overwrite = self.ask(
                Question(
                    "confirm",
                    "overwrite",
                    f"{output_name} already exists. Overwrite?",
                    default=False,
                )
            )
            if not overwrite:
                self.console.print("Aborted.")
                self.logger.info("Declined to overwrite %s", target)
                return RunResult(path=None, data=data)

        # Rendering finishes before the file is touched.
        markdown = render_readme(data)
        write_atomic(target, markdown)
        self.logger.info("README written to %s", target)
        self.console.print(f"\n[green]{output_name} created successfully![/green]")
        return RunResult(path=target, data=data)


__all__ = ["InteractionShell", "NoTerminalError", "RunResult", "summarize_detection", "write_atomic"]
