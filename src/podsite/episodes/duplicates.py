"""Uniqueness checks across loaded episodes."""

from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from podsite.episodes.models import Episode
from podsite.utils.errors import DuplicateMediaFileError


def check_duplicate_media(episodes: Sequence[Episode]) -> None:
    """Ensure no two episodes share a media file.

    Slugs are not checked here.

    Args:
        episodes: Episodes in load order

    Raises:
        DuplicateMediaFileError: For the first repeated ``file`` value
    """
    seen: dict[str, Optional[Path]] = {}
    for episode in episodes:
        if episode.file in seen:
            first_path = seen[episode.file]
            raise DuplicateMediaFileError(
                f"Duplicate media file '{episode.file}' in {first_path} and {episode.path}",
                episode.path,
                file=episode.file,
                first_path=first_path,
            )
        seen[episode.file] = episode.path
