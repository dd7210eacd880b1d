"""Custom exceptions for podsite."""

from pathlib import Path


class PodsiteError(Exception):
    """Base exception for all podsite errors."""

    pass


class ConfigError(PodsiteError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class StagingError(PodsiteError):
    """Static asset staging errors."""

    pass


class EpisodeError(PodsiteError):
    """Errors raised while loading episode documents.

    Attributes:
        path: Filesystem location the error refers to
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class EpisodeIOError(EpisodeError):
    """Reading a directory or document failed."""

    pass


class UnexpectedFileTypeError(EpisodeError):
    """A document-level entry is not a markdown file."""

    pass


class MalformedDocumentError(EpisodeError):
    """Document is missing a front matter delimiter."""

    pass


class HygieneViolationError(EpisodeError):
    """Document contains a disallowed typographic glyph.

    Attributes:
        category: Which glyph class was hit ("dash" or "quote")
    """

    def __init__(self, message: str, path: Path | None = None, category: str = "") -> None:
        super().__init__(message, path)
        self.category = category


class MetadataParseError(EpisodeError):
    """Front matter could not be decoded into an episode."""

    pass


class DuplicateMediaFileError(EpisodeError):
    """Two episodes reference the same media file.

    Attributes:
        file: The shared media file value
        first_path: Path of the episode that used the file first
    """

    def __init__(self, message: str, path: Path | None, file: str, first_path: Path | None) -> None:
        super().__init__(message, path)
        self.file = file
        self.first_path = first_path
