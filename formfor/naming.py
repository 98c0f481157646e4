"""Name derivation for models and attribute labels."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_LABEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|[_-]")
_NAMESPACE_SEPARATORS = re.compile(r"[\\.:]")


def camel_to_snake(name: str) -> str:
    """Convert CamelCase to snake_case. ShippingAddress -> shipping_address"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def strip_namespace(name: str) -> str:
    r"""Drop everything up to the last namespace separator. Shop\Order -> Order"""
    return _NAMESPACE_SEPARATORS.split(name)[-1]


def derive_base_name(model: object) -> str:
    """Derive the top-level field name from a model's type name."""
    return camel_to_snake(strip_namespace(type(model).__name__))


def humanize(attribute: str) -> str:
    """Turn an attribute name into label text. dueDate -> Due Date, contact_email -> Contact Email"""
    words = _LABEL_BOUNDARY.sub(" ", attribute).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)
