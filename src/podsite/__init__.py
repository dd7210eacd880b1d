"""podsite - static site generator for a podcast."""

__version__ = "0.1.0"
