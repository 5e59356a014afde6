"""Route group exports."""

from . import health, sequencing

__all__ = ["health", "sequencing"]
