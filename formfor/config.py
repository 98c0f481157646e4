"""Package-wide defaults for rendered forms.

Defaults come from ``FORMFOR_*`` environment variables (or a ``.env`` file)
and can be overlaid with the ``formfor:`` section of a YAML file:

    formfor:
      input_class: span6
      date_format: "%d/%m/%Y"
"""

import logging
import os
import re
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from formfor.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# $NAME or ${NAME}, optionally ${NAME:-fallback}
ENV_REFERENCE = re.compile(
    r"\$(?:\{(?P<braced>[A-Z_][A-Z0-9_]*)(?::-(?P<fallback>[^}]*))?\}|(?P<bare>[A-Z_][A-Z0-9_]*))"
)


def expand_env_references(section: dict, source: str | Path = "<config>") -> dict:
    """Replace environment references in the string values of a settings section.

    Only top-level strings are expanded; settings are flat. A reference to an
    unset variable without a fallback raises ConfigurationError naming the key.
    """
    expanded = {}
    for key, value in section.items():
        if not isinstance(value, str):
            expanded[key] = value
            continue

        def lookup(match, key=key):
            var = match.group("braced") or match.group("bare")
            found = os.environ.get(var, match.group("fallback"))
            if found is None:
                raise ConfigurationError(f"{source}: formfor.{key} references ${var}, which is not set")
            return found

        expanded[key] = ENV_REFERENCE.sub(lookup, value)
    return expanded


class FormForSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FORMFOR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Class added to text-like inputs of decorated forms
    input_class: str | None = None
    form_class: str = "form-horizontal"
    label_class: str = "control-label"

    date_format: str = "%Y-%m-%d"

    # Check box values
    checked_value: str = "1"
    unchecked_value: str = "0"


@lru_cache
def get_settings() -> FormForSettings:
    """Settings from the environment, cached for the process."""
    return FormForSettings()


def load_settings(path: str | Path) -> FormForSettings:
    """Overlay the ``formfor:`` section of a YAML file on the environment settings."""
    path = Path(path)
    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ConfigurationError(f"{path} must contain a mapping")

    section = config.get("formfor") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"The formfor section of {path} must be a mapping")
    section = expand_env_references(section, path)

    base_settings = get_settings()
    try:
        settings = FormForSettings.model_validate({**base_settings.model_dump(), **section})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid formfor settings in {path}: {e}") from e

    logger.debug("Loaded formfor settings from %s", path)
    return settings
