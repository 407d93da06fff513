"""Generate a README.md from detected project metadata and a short questionnaire."""

__version__ = "1.0.0"

__all__ = ["__version__"]
