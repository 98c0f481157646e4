"""Value and label lookup strategies.

A form resolves both strategies once, when it is created, and reuses them
for every attribute. Any callable with the matching signature can stand in
for the classes below:

    value_getter(model, attribute) -> value
    label_getter(form, attribute) -> str
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any, Protocol

from formfor.naming import humanize

if TYPE_CHECKING:
    from formfor.core import FormFor
    from formfor.i18n import Translator

logger = logging.getLogger(__name__)

LABEL_KEY_BRACKETS = "({[]})"


class ValueGetter(Protocol):
    def __call__(self, model: Any, attribute: str) -> Any: ...


class LabelGetter(Protocol):
    def __call__(self, form: FormFor, attribute: str) -> str: ...


# -- Value getters --


class AttributeValueGetter:
    """Read values with attribute access, formatting dates for date inputs.

    A missing attribute raises the model's own ``AttributeError``.
    """

    def __init__(self, date_format: str = "%Y-%m-%d"):
        self.date_format = date_format

    def __call__(self, model: Any, attribute: str) -> Any:
        return self.format(getattr(model, attribute))

    def format(self, value: Any) -> Any:
        if isinstance(value, date):
            return value.strftime(self.date_format)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(date_format={self.date_format!r})"


class MappingValueGetter(AttributeValueGetter):
    """Read values from dict-like models with item access."""

    def __call__(self, model: Mapping[str, Any], attribute: str) -> Any:
        return self.format(model[attribute])


# -- Label getters --


class HumanizedLabelGetter:
    """Label text derived from the attribute name alone."""

    def __call__(self, form: FormFor, attribute: str) -> str:
        return humanize(attribute)


class TranslatedLabelGetter(HumanizedLabelGetter):
    """Look labels up in a translator, falling back to the humanized name.

    Keys are tried in order:
        model.<model_name>.attributes.<attribute>
        model.attributes.<attribute>

    A translation that is empty, or merely echoes its key (some translators
    return "[key]" for misses), does not count.
    """

    def __init__(self, model_name: str, translator: Translator | None = None):
        self.model_name = model_name
        self.translator = translator

    def keys(self, attribute: str) -> list[str]:
        return [
            f"model.{self.model_name}.attributes.{attribute}",
            f"model.attributes.{attribute}",
        ]

    def __call__(self, form: FormFor, attribute: str) -> str:
        if self.translator is not None:
            for key in self.keys(attribute):
                label = self.translator.lookup(key)
                if label and label.strip(LABEL_KEY_BRACKETS) != key:
                    return label
            logger.debug("No translation for %s, using humanized label", attribute)
        return super().__call__(form, attribute)


class FieldTitleLabelGetter(TranslatedLabelGetter):
    """Prefer labels declared on pydantic fields.

    Uses ``json_schema_extra={"label": ...}`` or ``Field(title=...)`` when the
    bound model declares one, otherwise behaves like TranslatedLabelGetter.
    """

    def __call__(self, form: FormFor, attribute: str) -> str:
        fields = getattr(type(form.model), "model_fields", None) or {}
        info = fields.get(attribute)
        if info is not None:
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            if extra.get("label"):
                return extra["label"]
            if info.title:
                return info.title
        return super().__call__(form, attribute)
