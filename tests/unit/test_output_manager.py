"""Unit tests for output manager."""

from pathlib import Path

import pytest

from podsite.output.manager import OutputManager
from podsite.utils.errors import StagingError


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project with static files and an image directory."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "style.css").write_text("body {}")
    (project / "404.html").write_text("<h1>Not found</h1>")
    (project / "robots.txt").write_text("User-agent: *")
    images = project / "img"
    (images / "covers").mkdir(parents=True)
    (images / "logo.png").write_bytes(b"\x89PNG")
    (images / "covers" / "s1.jpg").write_bytes(b"\xff\xd8")
    return project


class TestOutputManagerClear:
    """Tests for clearing the output directory."""

    def test_clear_creates_missing_dir(self, tmp_path: Path) -> None:
        """Test that clearing a missing directory creates it."""
        output_dir = tmp_path / "_site"

        OutputManager(output_dir).clear()

        assert output_dir.is_dir()

    def test_clear_removes_contents_keeps_dir(self, tmp_path: Path) -> None:
        """Test that files and subdirectories are removed."""
        output_dir = tmp_path / "_site"
        (output_dir / "old" / "deep").mkdir(parents=True)
        (output_dir / "index.html").write_text("old")
        (output_dir / "old" / "deep" / "page.html").write_text("old")
        inode = output_dir.stat().st_ino

        OutputManager(output_dir).clear()

        assert output_dir.is_dir()
        assert list(output_dir.iterdir()) == []
        assert output_dir.stat().st_ino == inode

    def test_clear_does_not_follow_symlinks(self, tmp_path: Path) -> None:
        """Test that a symlinked directory inside the output is unlinked only."""
        output_dir = tmp_path / "_site"
        output_dir.mkdir()
        keep = tmp_path / "keep"
        keep.mkdir()
        (keep / "important.txt").write_text("data")
        (output_dir / "link").symlink_to(keep, target_is_directory=True)

        OutputManager(output_dir).clear()

        assert list(output_dir.iterdir()) == []
        assert (keep / "important.txt").exists()

    def test_clear_rejects_file(self, tmp_path: Path) -> None:
        """Test that an output path that is a file is refused."""
        output_file = tmp_path / "_site"
        output_file.write_text("not a dir")

        with pytest.raises(StagingError, match="not a directory"):
            OutputManager(output_file).clear()


class TestOutputManagerStageStatic:
    """Tests for staging static assets."""

    def test_stage_files_and_images(self, tmp_path: Path, project_dir: Path) -> None:
        """Test that named files and the image tree are copied."""
        output_dir = tmp_path / "_site"
        manager = OutputManager(output_dir)

        staged = manager.stage_static(
            project_dir, ["style.css", "404.html", "robots.txt"], project_dir / "img"
        )

        assert (output_dir / "style.css").read_text() == "body {}"
        assert (output_dir / "404.html").exists()
        assert (output_dir / "robots.txt").exists()
        assert (output_dir / "img" / "logo.png").read_bytes() == b"\x89PNG"
        assert (output_dir / "img" / "covers" / "s1.jpg").exists()
        assert staged == [
            output_dir / "style.css",
            output_dir / "404.html",
            output_dir / "robots.txt",
            output_dir / "img",
        ]

    def test_stage_without_images(self, tmp_path: Path, project_dir: Path) -> None:
        """Test staging when no image directory is configured."""
        output_dir = tmp_path / "_site"

        staged = OutputManager(output_dir).stage_static(project_dir, ["style.css"])

        assert staged == [output_dir / "style.css"]
        assert not (output_dir / "img").exists()

    def test_missing_file(self, tmp_path: Path, project_dir: Path) -> None:
        """Test that a missing static file raises StagingError."""
        manager = OutputManager(tmp_path / "_site")

        with pytest.raises(StagingError, match="favicon.ico"):
            manager.stage_static(project_dir, ["style.css", "favicon.ico"])

    def test_missing_image_dir(self, tmp_path: Path, project_dir: Path) -> None:
        """Test that a missing image directory raises StagingError."""
        manager = OutputManager(tmp_path / "_site")

        with pytest.raises(StagingError, match="pictures"):
            manager.stage_static(project_dir, [], project_dir / "pictures")

    def test_clear_then_stage(self, tmp_path: Path, project_dir: Path) -> None:
        """Test that a rebuild leaves no stale files behind."""
        output_dir = tmp_path / "_site"
        manager = OutputManager(output_dir)
        manager.stage_static(project_dir, ["style.css", "robots.txt"])

        manager.clear()
        manager.stage_static(project_dir, ["style.css"])

        assert sorted(p.name for p in output_dir.iterdir()) == ["style.css"]
