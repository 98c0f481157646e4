"""formfor - model-bound HTML form helpers with Bootstrap control groups."""

from formfor.core import FormFor
from formfor.bootstrap import BootstrapFormFor
from formfor.config import FormForSettings, get_settings, load_settings
from formfor.errors import ErrorSource, MappingErrorGetter, errors_from_validation_error
from formfor.exceptions import FormForError, UnknownOperationError
from formfor.getters import (
    AttributeValueGetter,
    FieldTitleLabelGetter,
    HumanizedLabelGetter,
    MappingValueGetter,
    TranslatedLabelGetter,
)
from formfor.i18n import MappingTranslator, Translator, load_translations
from formfor.naming import derive_base_name, humanize

__all__ = [
    "FormFor",
    "BootstrapFormFor",
    "FormForSettings",
    "get_settings",
    "load_settings",
    "ErrorSource",
    "MappingErrorGetter",
    "errors_from_validation_error",
    "FormForError",
    "UnknownOperationError",
    "AttributeValueGetter",
    "FieldTitleLabelGetter",
    "HumanizedLabelGetter",
    "MappingValueGetter",
    "TranslatedLabelGetter",
    "MappingTranslator",
    "Translator",
    "load_translations",
    "derive_base_name",
    "humanize",
]
