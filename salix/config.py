"""Site configuration for Salix.

A build needs no configuration: every value has a default that matches the
stock site. An optional ``salix.yaml`` in the project root may override any of
the keys in ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "salix.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "output_dir": "dist",
    "site_name": "Salix Ventures",
    "stylesheet": "/css/style.css",
    "font_url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
    "summary_length": 200,
    "highlight": False,
}


def load_config(project_root: Path) -> dict[str, Any]:
    """Load site configuration from salix.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config
