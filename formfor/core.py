"""FormFor: form helpers bound to a model instance."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from markupsafe import Markup

from formfor import primitives
from formfor.config import FormForSettings, get_settings
from formfor.getters import AttributeValueGetter, LabelGetter, TranslatedLabelGetter, ValueGetter
from formfor.i18n import Translator
from formfor.naming import derive_base_name

logger = logging.getLogger(__name__)


def is_collection(models: Any) -> bool:
    """True for lists of models; strings, bytes and mappings count as single values."""
    return isinstance(models, Sequence) and not isinstance(models, (str, bytes))


class FormFor:
    """Generate inputs with names, ids and values taken from a model.

    Usage:
        f = FormFor(Transport(user_id=123), "/transports")
        f.open()             # <form action="/transports" method="post">
        f.label("user_id")   # <label for="transport_user_id" id="transport_user_id_label">User Id</label>
        f.text("user_id")    # <input type="text" name="transport[user_id]" id="transport_user_id" value="123">
        f.close()            # </form>

    Nested models get their own FormFor via ``fields_for``; their field names
    continue the parent's, e.g. ``transport[driver][name]``.

    Options given here (other than ``name``) are passed on to nested forms.
    """

    def __init__(
        self,
        model: Any,
        action: str | None = "",
        *,
        name: str | None = None,
        label_getter: LabelGetter | None = None,
        value_getter: ValueGetter | None = None,
        translator: Translator | None = None,
        attributes: Mapping[str, Any] | None = None,
        settings: FormForSettings | None = None,
    ):
        self._model = model
        self.action = action
        self.model_name = derive_base_name(model)
        self.name = name or self.model_name
        self.translator = translator
        self.attributes = dict(attributes or {})
        self.is_nested = False

        self.settings = settings if settings is not None else get_settings()
        self.label_getter: LabelGetter = label_getter or TranslatedLabelGetter(self.model_name, translator)
        self.value_getter: ValueGetter = value_getter or AttributeValueGetter(self.settings.date_format)
        self.checked_value = self.settings.checked_value
        self.unchecked_value = self.settings.unchecked_value

        # Only options the caller set explicitly are handed down
        self.nested_options: dict[str, Any] = {
            key: value
            for key, value in (
                ("label_getter", label_getter),
                ("value_getter", value_getter),
                ("translator", translator),
                ("attributes", attributes),
                ("settings", settings),
            )
            if value is not None
        }

    @classmethod
    def create_fields_for(
        cls,
        name: str,
        models: Any,
        parent_name: str | None = None,
        **options: Any,
    ) -> FormFor | list[FormFor]:
        """Build nested forms for a single model or a list of models.

        A list yields one form per element, named ``parent[name][index]``;
        anything else yields one form named ``parent[name]``. Without a parent
        the leading segment is ``name`` itself.
        """
        base = name if parent_name is None else f"{parent_name}[{name}]"

        if is_collection(models):
            forms = []
            for idx, model in enumerate(models):
                form = cls(model, None, **{**options, "name": f"{base}[{idx}]"})
                form.is_nested = True
                forms.append(form)
            logger.debug("Created %d nested forms for %s", len(forms), base)
            return forms

        form = cls(models, None, **{**options, "name": base})
        form.is_nested = True
        return form

    # -- Tags --

    def __str__(self) -> str:
        return str(self.open() or "")

    def __html__(self) -> str:
        """Enables {{ form }} in Jinja templates to output the opening tag."""
        return str(self)

    def open(self, **attributes: Any) -> Markup | None:
        """The form's opening tag, or None for nested forms."""
        if self.is_nested:
            return None
        return primitives.open(self.action, {**self.attributes, **attributes})

    def close(self) -> Markup | None:
        if self.is_nested:
            return None
        return primitives.close()

    # -- Controls --

    def label(self, name: str, text: str | None = None, attributes: Mapping[str, Any] | None = None) -> Markup:
        """Label for an attribute; text defaults to ``label_text(name)``."""
        if text is None:
            text = self.label_text(name)
        return primitives.label(text, self.field_name(name), attributes)

    def text(self, name: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        return primitives.text(self.field_name(name), self.value(name), attributes)

    def password(self, name: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        """Password input. The model value is never rendered."""
        return primitives.password(self.field_name(name), None, attributes)

    def hidden(self, name: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        return primitives.hidden(self.field_name(name), self.value(name), attributes)

    def text_area(self, name: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        """Textarea; a ``value`` attribute replaces the model value as content."""
        attributes = dict(attributes or {})
        if "value" in attributes:
            text = attributes.pop("value")
        else:
            text = self.value(name)
        return primitives.text_area(self.field_name(name), text, attributes)

    def check_box(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        with_hidden: bool = True,
        split: bool = False,
    ) -> Markup | tuple[Markup, Markup]:
        """Check box plus a hidden field so the attribute is always submitted.

        With ``split`` returns ``(hidden, checkbox)``.
        """
        return primitives.check_box(
            self.field_name(name),
            self.value(name),
            self.checked_value,
            attributes,
            with_hidden=with_hidden,
            unchecked_value=self.unchecked_value,
            split=split,
        )

    def collection_check_boxes(
        self,
        name: str,
        collection: Mapping[Any, Any],
        label_attributes: Mapping[str, Any] | None = None,
        as_list: bool = False,
    ) -> Markup | list[Markup]:
        """One check box per entry of ``collection`` for a has-many association."""
        return primitives.collection_check_boxes(
            self.field_name(name), collection, self.value(name), label_attributes, as_list
        )

    def radio(self, name: str, value: Any, attributes: Mapping[str, Any] | None = None) -> Markup:
        checked = self.value(name) == value
        return primitives.radio(self.field_name(name), value, checked, attributes)

    def collection_radios(
        self,
        name: str,
        collection: Mapping[Any, Any],
        label_attributes: Mapping[str, Any] | None = None,
        as_list: bool = False,
    ) -> Markup | list[Markup]:
        return primitives.collection_radios(
            self.field_name(name), collection, self.value(name), label_attributes, as_list
        )

    def select(
        self,
        name: str,
        collection: Mapping[Any, Any],
        attributes: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Select tag; ``collection`` maps option values to their text."""
        return primitives.select(self.field_name(name), collection, self.value(name), attributes)

    def button(self, name: str, text: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        return primitives.button(self.field_name(name), text, attributes)

    # -- Nesting --

    def fields_for(self, name: str, models: Any = None, **options: Any) -> FormFor | list[FormFor]:
        """Nested form(s) for an association.

        Without ``models`` the association's current value is used:

            for item in order_form.fields_for("items"):
                item.hidden("id")    # order[items][0][id]
                item.text("price")   # order[items][0][price]
        """
        if models is None:
            models = self.value(name)
        return type(self).create_fields_for(name, models, self.name, **{**self.nested_options, **options})

    # -- Binding --

    def field_name(self, name: str) -> str:
        """transport + driver_id -> transport[driver_id]"""
        return f"{self.name}[{name}]"

    def field_id(self, name: str) -> str:
        """transport + driver_id -> transport_driver_id"""
        return primitives.auto_id(self.field_name(name))

    def value(self, attribute: str) -> Any:
        return self.value_getter(self._model, attribute)

    def label_text(self, attribute: str) -> str:
        return self.label_getter(self, attribute)

    @property
    def model(self) -> Any:
        return self._model

    def __repr__(self) -> str:
        return f"FormFor({self.name!r}, nested={self.is_nested})"
