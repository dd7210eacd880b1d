"""Output directory manager.

Clears the build directory and stages static assets into it.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..utils.errors import StagingError

logger = logging.getLogger(__name__)


class OutputManager:
    """Manage the site output directory.

    Example:
        >>> manager = OutputManager(output_dir=Path("_site"))
        >>> manager.clear()
        >>> manager.stage_static(Path("."), ["style.css", "robots.txt"], Path("img"))
    """

    def __init__(self, output_dir: Path):
        """Initialize output manager.

        Args:
            output_dir: Site output directory
        """
        self.output_dir = output_dir

    def clear(self) -> None:
        """Remove everything inside the output directory.

        The directory itself is kept (or created if missing).
        """
        if self.output_dir.is_symlink() or (
            self.output_dir.exists() and not self.output_dir.is_dir()
        ):
            raise StagingError(f"Output path is not a directory: {self.output_dir}")

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            for item in self.output_dir.iterdir():
                if item.is_dir() and not item.is_symlink():
                    shutil.rmtree(item)
                else:
                    item.unlink()
        except OSError as e:
            raise StagingError(f"Failed to clear {self.output_dir}: {e}") from e

        logger.debug(f"Cleared {self.output_dir}")

    def stage_static(
        self,
        source_dir: Path,
        files: Iterable[str],
        image_dir: Path | None = None,
    ) -> list[Path]:
        """Copy static files and the image directory into the output directory.

        Args:
            source_dir: Directory the named files are relative to
            files: File names to copy
            image_dir: Directory copied as a whole, if given

        Returns:
            Paths of the staged files and directories

        Raises:
            StagingError: If a source file or directory is missing
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        staged = []

        for name in files:
            source = source_dir / name
            if not source.is_file():
                raise StagingError(f"Failed to copy {source} to {self.output_dir}: not found")
            target = self.output_dir / name
            self._copy(source, target)
            staged.append(target)

        if image_dir is not None:
            if not image_dir.is_dir():
                raise StagingError(f"Failed to copy {image_dir} to {self.output_dir}: not found")
            target = self.output_dir / image_dir.name
            self._copy(image_dir, target)
            staged.append(target)

        logger.info(f"Staged {len(staged)} static item(s) into {self.output_dir}")
        return staged

    def _copy(self, source: Path, target: Path) -> None:
        try:
            if source.is_dir():
                shutil.copytree(source, target, dirs_exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source, target)
        except OSError as e:
            raise StagingError(f"Failed to copy {source} to {target}: {e}") from e
