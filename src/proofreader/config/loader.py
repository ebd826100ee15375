"""YAML configuration loader.

Reads a configuration file into a :class:`Configuration`. Two layouts are
accepted for the ``validators`` section::

    lang: ja
    validators:
      SentenceLength:
        properties:
          max_len: 100
      HankakuKana:            # no overrides

or a list of records::

    validators:
      - name: SentenceLength
        level: warning
        properties: {max_len: 100}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from proofreader.config.exceptions import ConfigurationError
from proofreader.config.models import Configuration, ValidatorConfiguration
from proofreader.logging_config import get_logger

__all__ = ["load_configuration", "parse_configuration"]

logger = get_logger(__name__)

# Keys allowed under a validator name in the mapping layout
_RECORD_KEYS = {"level", "properties"}


def _load_yaml_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read YAML file {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid YAML structure: expected mapping, got {type(data).__name__}"
        )

    return data


def _parse_validators(raw: Any) -> list[ValidatorConfiguration]:
    if raw is None:
        return []

    if isinstance(raw, dict):
        records = []
        for name, body in raw.items():
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise ConfigurationError(
                    f"Validator '{name}' must map to a mapping, got {type(body).__name__}"
                )
            unknown = set(body) - _RECORD_KEYS
            if unknown:
                raise ConfigurationError(
                    f"Validator '{name}' has unknown keys: {', '.join(sorted(map(str, unknown)))}"
                    " (overrides belong under 'properties')"
                )
            records.append({"name": name, **body})
    elif isinstance(raw, list):
        records = raw
    else:
        raise ConfigurationError(
            f"'validators' must be a mapping or a list, got {type(raw).__name__}"
        )

    return [ValidatorConfiguration.model_validate(record) for record in records]


def parse_configuration(data: dict[str, Any]) -> Configuration:
    """Build a Configuration from already-parsed YAML data.

    Args:
        data: Mapping with optional ``lang``, ``variant`` and ``validators``.

    Returns:
        The validated Configuration.

    Raises:
        ConfigurationError: If the data does not describe a valid configuration.

    """
    unknown = set(data) - {"lang", "variant", "validators"}
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    try:
        fields: dict[str, Any] = {"validator_configs": _parse_validators(data.get("validators"))}
        for key in ("lang", "variant"):
            if data.get(key) is not None:
                fields[key] = str(data[key])
        return Configuration(**fields)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_configuration(path: Path | str) -> Configuration:
    """Load and validate a configuration from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated Configuration.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.

    """
    path = Path(path)
    configuration = parse_configuration(_load_yaml_file(path))
    logger.debug(
        "configuration_loaded",
        path=str(path),
        lang=configuration.lang,
        validator_count=len(configuration.validator_configs),
    )
    return configuration
