"""Optional locale lookup used for label text."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from formfor.exceptions import TranslationFileError

logger = logging.getLogger(__name__)


@runtime_checkable
class Translator(Protocol):
    """Anything that can resolve a dotted key to translated text."""

    def lookup(self, key: str) -> str | None: ...


def flatten(tree: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted keys. {"a": {"b": "x"}} -> {"a.b": "x"}"""
    flat: dict[str, str] = {}
    for key, value in tree.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, dotted))
        elif value is not None:
            flat[dotted] = str(value)
    return flat


class MappingTranslator:
    """Translator backed by an in-memory dictionary.

    Accepts either dotted keys or nested mappings:

        MappingTranslator({"model": {"attributes": {"email": "E-mail"}}})
        MappingTranslator({"model.attributes.email": "E-mail"})
    """

    def __init__(self, messages: Mapping[str, Any] | None = None):
        self.messages = flatten(messages or {})

    def lookup(self, key: str) -> str | None:
        return self.messages.get(key)

    def __len__(self) -> int:
        return len(self.messages)

    def __repr__(self) -> str:
        return f"MappingTranslator({len(self.messages)} keys)"


def load_translations(path: str | Path, locale: str | None = None) -> MappingTranslator:
    """Load a YAML translation file.

    When ``locale`` is given, only that top-level section of the file is used,
    so one file can hold several languages.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if locale is not None:
        data = data.get(locale, {}) if isinstance(data, Mapping) else data

    if not isinstance(data, Mapping):
        raise TranslationFileError(f"{path} must contain a mapping of translation keys")

    translator = MappingTranslator(data)
    logger.debug("Loaded %d translation keys from %s", len(translator), path)
    return translator
