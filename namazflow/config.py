"""
Runtime settings.

Settings come from three layers, later ones winning: the defaults
below, an optional YAML file, and ``NAMAZFLOW_*`` environment variables
(a ``.env`` file in the working directory is loaded first).  Example
YAML::

    diyanet:
      base_url: https://namazvakitleri.diyanet.gov.tr
      culture: tr-TR
      country_id: "2"
      default_state: "516"
    output:
      root: vakitler
    logging:
      level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "NAMAZFLOW_"


@dataclass(frozen=True)
class Settings:
    base_url: str = "https://namazvakitleri.diyanet.gov.tr"
    culture: str = "tr-TR"
    country_id: str = "2"
    default_state: str = "516"  # Bingöl
    output_root: str = "vakitler"
    log_level: str = "WARNING"


# YAML section/key -> Settings field
_YAML_KEYS = {
    ("diyanet", "base_url"): "base_url",
    ("diyanet", "culture"): "culture",
    ("diyanet", "country_id"): "country_id",
    ("diyanet", "default_state"): "default_state",
    ("output", "root"): "output_root",
    ("logging", "level"): "log_level",
}

_ENV_KEYS = {
    "BASE_URL": "base_url",
    "CULTURE": "culture",
    "COUNTRY_ID": "country_id",
    "DEFAULT_STATE": "default_state",
    "OUTPUT_ROOT": "output_root",
    "LOG_LEVEL": "log_level",
}


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data


def load_settings(path: Optional[str] = None) -> Settings:
    """Build `Settings` from defaults, an optional YAML file and the environment."""
    load_dotenv()
    overrides: Dict[str, str] = {}

    if path:
        data = _load_yaml(Path(path))
        for (section, key), field_name in _YAML_KEYS.items():
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ConfigError(f"config section '{section}' in {path} must be a mapping")
            value = section_data.get(key)
            if value is not None:
                overrides[field_name] = str(value)
        logger.debug("Loaded config file %s", path)

    for suffix, field_name in _ENV_KEYS.items():
        value = os.environ.get(ENV_PREFIX + suffix)
        if value:
            overrides[field_name] = value

    settings = replace(Settings(), **overrides)
    return replace(settings, base_url=settings.base_url.rstrip("/"))
