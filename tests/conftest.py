"""Shared fixtures for podsite tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

DEFAULT_METADATA: dict[str, Any] = {
    "title": "Pilot",
    "date": "2024-03-01T12:00:00+00:00",
    "slug": "pilot",
    "file": "https://cdn.example.com/pilot.mp3",
    "duration": "1:02:03",
    "length": "12345678",
}


def render_document(body: str = "Episode notes.\n", **overrides: Any) -> str:
    """Build a document with front matter.

    Keyword arguments override metadata keys; a value of None drops the key.
    """
    metadata = {**DEFAULT_METADATA, **overrides}
    lines = [f"{key}: {value}" for key, value in metadata.items() if value is not None]
    return "---\n" + "\n".join(lines) + "\n---\n" + body


@pytest.fixture
def episode_text() -> Callable[..., str]:
    """Factory for episode document text."""
    return render_document


@pytest.fixture
def episodes_root(tmp_path: Path) -> Path:
    """Create an empty episodes directory."""
    root = tmp_path / "_episodes"
    root.mkdir()
    return root


@pytest.fixture
def write_episode(episodes_root: Path) -> Callable[..., Path]:
    """Factory that writes an episode document into a series directory."""

    def _write(series: str, name: str, text: str | None = None, **overrides: Any) -> Path:
        series_dir = episodes_root / series
        series_dir.mkdir(exist_ok=True)
        path = series_dir / name
        if text is None:
            text = render_document(**overrides)
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Sample podsite.yaml content."""
    return {
        "episodes_dir": "episodes",
        "output_dir": "public",
        "static_files": ["style.css"],
        "image_dir": "images",
        "log_level": "DEBUG",
    }
