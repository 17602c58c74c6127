"""Default configuration values and file content."""

import yaml

from podsite.config.schema import SiteConfig

CONFIG_FILENAME = "podsite.yaml"

DEFAULT_SITE_CONFIG = SiteConfig()


def get_default_config_content() -> str:
    """Get the default podsite.yaml content.

    ``root_dir`` is left out so the file stays valid when the project moves.
    """
    data = DEFAULT_SITE_CONFIG.model_dump(mode="json", exclude={"root_dir"})
    header = "# podsite configuration\n# Paths are relative to the directory holding this file.\n\n"
    return header + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
