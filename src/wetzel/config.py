"""Style configuration loader.

A wetzel config file is a small YAML document selecting the markup style
and the formatting flags the documentation generator passes through to it::

    style: asciidoctor
    auto_link: aggressive
    suppress_warnings: false
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .enums import AutoLinkOption, StyleName
from .exceptions import ConfigError


class StyleConfig(BaseModel):
    """Formatting options handed to a style by its caller."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    style: StyleName = StyleName.ASCIIDOCTOR
    auto_link: AutoLinkOption = AutoLinkOption.OFF
    suppress_warnings: bool = False


def load_style_config(config_path: Path | str) -> StyleConfig:
    """Load style configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file

    Returns:
        StyleConfig with defaults for any omitted key

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is not valid YAML or holds invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return StyleConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")

    try:
        return StyleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
