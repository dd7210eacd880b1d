"""Episode loading and validation for podsite."""

from podsite.episodes.duplicates import check_duplicate_media
from podsite.episodes.frontmatter import parse_front_matter, split_front_matter
from podsite.episodes.hygiene import check_hygiene
from podsite.episodes.loader import EpisodeLoader, load_episodes
from podsite.episodes.models import Episode

__all__ = [
    "Episode",
    "EpisodeLoader",
    "check_duplicate_media",
    "check_hygiene",
    "load_episodes",
    "parse_front_matter",
    "split_front_matter",
]
