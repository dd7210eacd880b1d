"""Utility functions and helpers for podsite."""

from podsite.utils.errors import (
    ConfigError,
    DuplicateMediaFileError,
    EpisodeError,
    EpisodeIOError,
    HygieneViolationError,
    InvalidConfigError,
    MalformedDocumentError,
    MetadataParseError,
    PodsiteError,
    StagingError,
    UnexpectedFileTypeError,
)

__all__ = [
    # Errors
    "PodsiteError",
    "ConfigError",
    "InvalidConfigError",
    "StagingError",
    "EpisodeError",
    "EpisodeIOError",
    "UnexpectedFileTypeError",
    "MalformedDocumentError",
    "HygieneViolationError",
    "MetadataParseError",
    "DuplicateMediaFileError",
]
