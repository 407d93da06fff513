"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from . import __version__
from .config import ConfigError, load_config
from .logging import configure_logging, get_logger
from .questions import validate_output_file
from .shell import InteractionShell, NoTerminalError

_DESCRIPTION = (
    "Generate a professional README.md by answering a few prompts. "
    "Auto-detects project info from package.json and git config."
)


def _package_version() -> str:
    try:
        return metadata.version("readmegen")
    except metadata.PackageNotFoundError:
        return __version__


def _output_file(value: str) -> str:
    verdict = validate_output_file(value)
    if verdict is not True:
        raise argparse.ArgumentTypeError(str(verdict))
    return value.strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="readmegen", description=_DESCRIPTION)
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=_package_version(),
        help="Show version number and exit.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory to inspect and write into (defaults to current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=_output_file,
        default=None,
        help="Output filename; skips the filename prompt. Must end with .md.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing output file without asking.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    root = Path(args.path).expanduser().resolve()
    if not root.is_dir():
        parser.exit(1, f"{args.path} is not a directory\n")

    try:
        config = load_config(root)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    logger.debug("Loaded settings for %s (output=%s, license=%s)", root, config.output, config.license)

    shell = InteractionShell()
    try:
        shell.run(root, config, output=args.output, force=bool(args.force))
    except NoTerminalError as exc:
        logger.debug("stdin is not a terminal; aborting before any prompt")
        parser.exit(1, f"{exc}\n")
    except KeyboardInterrupt:
        parser.exit(130, "\nAborted.\n")
    except OSError as exc:
        logger.debug("Write failed", exc_info=True)
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
