"""Output directory staging for podsite."""

from podsite.output.manager import OutputManager

__all__ = ["OutputManager"]
