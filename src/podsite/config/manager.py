"""Configuration manager for loading and saving podsite config."""

from pathlib import Path

import yaml

from podsite.config.schema import SiteConfig
from podsite.utils.errors import InvalidConfigError

CONFIG_FILENAME = "podsite.yaml"


class ConfigManager:
    """Manages the podsite.yaml file of a site project."""

    def __init__(self, project_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            project_dir: Site project directory. Defaults to the current directory.
        """
        self.project_dir = project_dir if project_dir is not None else Path.cwd()
        self.config_file = self.project_dir / CONFIG_FILENAME

    def load_config(self) -> SiteConfig:
        """Load and validate site configuration.

        A missing config file means all defaults apply.

        Returns:
            Validated SiteConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            return SiteConfig()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return SiteConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: SiteConfig) -> None:
        """Save site configuration.

        Args:
            config: SiteConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.project_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
