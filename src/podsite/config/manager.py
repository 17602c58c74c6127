"""Configuration manager for loading and saving podsite config."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podsite.config.defaults import CONFIG_FILENAME, get_default_config_content
from podsite.config.schema import SiteConfig
from podsite.utils.errors import ConfigError, InvalidConfigError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the ``podsite.yaml`` file of a site project."""

    def __init__(self, root_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            root_dir: Project root holding podsite.yaml. Defaults to the current directory.
        """
        self.root_dir = root_dir if root_dir is not None else Path(".")
        self.config_file = self.root_dir / CONFIG_FILENAME

    def load_config(self, overrides: dict[str, Any] | None = None) -> SiteConfig:
        """Load and validate the site configuration.

        Values in ``overrides`` that are not None replace values from the file.
        A missing file means all defaults.

        Args:
            overrides: Values supplied on the command line

        Returns:
            Validated SiteConfig instance

        Raises:
            InvalidConfigError: If the file or the overrides are invalid
        """
        data: dict[str, Any] = {}
        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: {e}"
                ) from e
            if not isinstance(data, dict):
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: expected a mapping"
                )
        else:
            logger.debug("No %s found in %s, using defaults", CONFIG_FILENAME, self.root_dir)

        data["root_dir"] = self.root_dir
        if overrides:
            data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return SiteConfig(**data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid configuration: {e}") from e

    def save_config(self, config: SiteConfig) -> None:
        """Save the site configuration.

        Args:
            config: SiteConfig instance to save
        """
        data = config.model_dump(mode="json", exclude={"root_dir"})

        self.root_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def create_default_config(self, overwrite: bool = False) -> Path:
        """Write a default podsite.yaml.

        Args:
            overwrite: Replace an existing file

        Returns:
            Path of the written file

        Raises:
            ConfigError: If the file exists and overwrite is False
        """
        if self.config_file.exists() and not overwrite:
            raise ConfigError(
                f"Config file already exists: {self.config_file}\n"
                f"Use --force to replace it."
            )
        self.root_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
        return self.config_file
