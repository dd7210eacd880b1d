"""Load episode documents from a series/episode directory tree.

Layout::

    _episodes/
        <series>/
            <episode>.md

Loading is fail-fast: the first problem anywhere in the tree aborts the
whole load and nothing is returned.
"""

import logging
from pathlib import Path

from podsite.episodes.duplicates import check_duplicate_media
from podsite.episodes.frontmatter import parse_front_matter, split_front_matter
from podsite.episodes.hygiene import check_hygiene
from podsite.episodes.models import Episode
from podsite.utils.errors import EpisodeIOError, UnexpectedFileTypeError

EPISODE_SUFFIX = ".md"


class EpisodeLoader:
    """Load and validate every episode under a root directory.

    Example:
        >>> loader = EpisodeLoader(Path("_episodes"))
        >>> episodes = loader.load()
        >>> print(len(episodes))
        42
    """

    def __init__(self, root: Path, logger: logging.Logger | None = None) -> None:
        """Initialize the loader.

        Args:
            root: Directory containing one subdirectory per series
            logger: Logger for progress messages (defaults to module logger)
        """
        self.root = Path(root)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def load(self) -> list[Episode]:
        """Load all episodes.

        Returns:
            Episodes in directory enumeration order

        Raises:
            EpisodeIOError: If a directory or file cannot be read
            UnexpectedFileTypeError: If a non-markdown file is found
            MalformedDocumentError: If front matter delimiters are missing
            HygieneViolationError: If a disallowed glyph is found
            MetadataParseError: If front matter is invalid
            DuplicateMediaFileError: If two episodes share a media file
        """
        episodes: list[Episode] = []

        for series_dir in self._list_dir(self.root):
            self.logger.debug(f"Loading series {series_dir}")
            for path in self._list_dir(series_dir):
                episodes.append(self.load_episode(path))
            check_duplicate_media(episodes)

        self.logger.info(f"{len(episodes)} episodes loaded from {self.root}")
        return episodes

    def load_episode(self, path: Path) -> Episode:
        """Load a single episode document.

        Args:
            path: Path to the markdown document

        Returns:
            Episode with ``path`` and ``body`` set
        """
        if path.suffix != EPISODE_SUFFIX:
            raise UnexpectedFileTypeError(f"Not a markdown file: {path}", path)

        self.logger.debug(f"Loading episode {path}")
        content = self._read(path)

        check_hygiene(content, path)
        metadata, body = split_front_matter(content, path)
        episode = parse_front_matter(metadata, path)
        episode = episode.model_copy(update={"path": path, "body": body})

        self.logger.info(f"Loaded '{episode.title}'")
        return episode

    def _list_dir(self, directory: Path) -> list[Path]:
        try:
            return list(directory.iterdir())
        except OSError as e:
            raise EpisodeIOError(
                f"Failed to read directory {directory}: {e.strerror or e}", directory
            ) from e

    def _read(self, path: Path) -> str:
        # newline="" keeps "\r\n" intact so offsets match the file on disk
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise EpisodeIOError(
                f"Failed to read file {path}: {e.strerror or e}", path
            ) from e
        except UnicodeDecodeError as e:
            raise EpisodeIOError(f"Failed to read file {path}: {e}", path) from e


def load_episodes(root: Path, logger: logging.Logger | None = None) -> list[Episode]:
    """Load all episodes under ``root``.

    Convenience wrapper around :class:`EpisodeLoader`.
    """
    return EpisodeLoader(root, logger=logger).load()
