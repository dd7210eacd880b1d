"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SiteConfig(BaseModel):
    """Site build configuration.

    Relative paths are resolved against the project directory.
    """

    episodes_dir: Path = Path("_episodes")
    output_dir: Path = Path("_site")
    static_files: list[str] = Field(
        default_factory=lambda: ["style.css", "404.html", "robots.txt"]
    )
    image_dir: Path | None = Path("img")
    log_level: LogLevel = "INFO"

    def resolve(self, project_dir: Path) -> "SiteConfig":
        """Return a copy with directories made absolute under ``project_dir``."""
        return self.model_copy(
            update={
                "episodes_dir": project_dir / self.episodes_dir,
                "output_dir": project_dir / self.output_dir,
                "image_dir": project_dir / self.image_dir if self.image_dir else None,
            }
        )
