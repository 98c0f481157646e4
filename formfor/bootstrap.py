"""Bootstrap 2 control-group rendering around FormFor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape
from pydantic import ValidationError

from formfor.core import FormFor
from formfor.errors import ErrorGetter, resolve_error_getter
from formfor.exceptions import UnknownOperationError
from formfor.html import attributes as render_attributes
from formfor.html import class_list, tag

# Wrapped FormFor operations reachable as ``decorated._<name>(...)``
FORWARDED_OPERATIONS = frozenset({
    "open",
    "close",
    "label",
    "text",
    "password",
    "hidden",
    "text_area",
    "check_box",
    "collection_check_boxes",
    "radio",
    "collection_radios",
    "select",
    "button",
    "fields_for",
    "field_name",
    "field_id",
    "value",
    "label_text",
})


class BootstrapFormFor:
    """Wraps a FormFor and renders each control as a Bootstrap control group.

    Usage:
        f = BootstrapFormFor.forge(user, input_class="span4")
        f.text("email", row_options={"help": "We never share it"})

    Output:
        <div class="control-group">
          <label for="user_email" id="user_email_label" class="control-label">Email</label>
          <div class="controls">
            <input type="text" name="user[email]" ... class="span4">
            <span class="help-inline">We never share it</span>
          </div>
        </div>

    The plain FormFor is available as ``form`` for undecorated controls.
    """

    def __init__(
        self,
        form_for: FormFor,
        *,
        input_class: str | None = None,
        error_getter: ErrorGetter | None = None,
        errors: Mapping[str, str] | ValidationError | None = None,
        error_prefix: tuple[Any, ...] = (),
    ):
        self._form_for = form_for
        settings = form_for.settings
        self.input_class = input_class if input_class is not None else settings.input_class
        self.form_class = settings.form_class
        self.label_class = settings.label_class
        self.error_getter = resolve_error_getter(form_for.model, error_getter, errors, error_prefix)

        # Used when creating fields_for()
        self.nested_options: dict[str, Any] = {}
        if input_class is not None:
            self.nested_options["input_class"] = input_class

        # Nested forms read their own errors from the same ValidationError
        self._validation_error = errors if isinstance(errors, ValidationError) else None
        self._error_prefix = tuple(error_prefix)

    @classmethod
    def forge(cls, model: Any, action: str | None = "", **options: Any) -> BootstrapFormFor:
        """Create the decorated form together with its plain FormFor.

        ``input_class``, ``error_getter`` and ``errors`` go to the decorator,
        every other option (``settings`` included) to FormFor.
        """
        decorator_options = {
            key: options.pop(key) for key in ("input_class", "error_getter", "errors") if key in options
        }
        return cls(FormFor(model, action, **options), **decorator_options)

    # -- Forwarded --

    @property
    def form(self) -> FormFor:
        """The wrapped FormFor."""
        return self._form_for

    @property
    def model(self) -> Any:
        return self._form_for.model

    def field_name(self, name: str) -> str:
        return self._form_for.field_name(name)

    def field_id(self, name: str) -> str:
        return self._form_for.field_id(name)

    def value(self, attribute: str) -> Any:
        return self._form_for.value(attribute)

    def label_text(self, attribute: str) -> str:
        return self._form_for.label_text(attribute)

    def close(self) -> Markup | None:
        return self._form_for.close()

    def __getattr__(self, name: str) -> Any:
        if name == "_form_for" or name.startswith("__"):
            raise AttributeError(name)
        if name.startswith("_") and name[1:] in FORWARDED_OPERATIONS:
            return getattr(self._form_for, name[1:])
        raise UnknownOperationError(name, self, self._form_for)

    def __str__(self) -> str:
        return str(self.open() or "")

    def __html__(self) -> str:
        return str(self)

    # -- Tags --

    def open(self, **attributes: Any) -> Markup | None:
        return self._form_for.open(**{"class": self.form_class, **attributes})

    def label(self, name: str, text: str | None = None, attributes: Mapping[str, Any] | None = None) -> Markup:
        return self._form_for.label(name, text, {"class": self.label_class, **(attributes or {})})

    def hidden(self, name: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        return self._form_for.hidden(name, attributes)

    # -- Control groups --

    def text(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        return self._row(name, self._form_for.text(name, self._with_input_class(attributes)), row_options)

    def password(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        return self._row(name, self._form_for.password(name, self._with_input_class(attributes)), row_options)

    def text_area(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        return self._row(name, self._form_for.text_area(name, self._with_input_class(attributes)), row_options)

    def select(
        self,
        name: str,
        collection: Mapping[Any, Any],
        attributes: Mapping[str, Any] | None = None,
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        controls = self._form_for.select(name, collection, self._with_input_class(attributes))
        return self._row(name, controls, row_options)

    def check_box(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Control group with a check box. Check boxes do not get the input class.

        The hidden companion field sits next to the row label instead of
        inside the controls, where it would break Bootstrap's margin-top for
        the check box (and rounded corners when the group is a first child).
        Inline help is rendered inside the check box label for the same reason.
        """
        options = dict(row_options or {})
        hidden, checkbox = self._form_for.check_box(name, attributes, split=True)

        help_text = options.pop("help", None)
        label_attributes: dict[str, Any] = {}
        if isinstance(help_text, Mapping):
            label_attributes = dict(help_text)
            help_text = label_attributes.pop("text", None)
        content = tag(
            "label",
            {"class": class_list("checkbox", label_attributes.pop("class", None)), **label_attributes},
            checkbox + escape(help_text or Markup("&nbsp;")),
            escape_content=False,
        )

        label = self.label(name, options.pop("label", None))
        options["errors"] = self.error_text_for(name)

        return self.row(label + hidden, content, options)

    def collection_check_boxes(
        self,
        name: str,
        collection: Mapping[Any, Any],
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        controls = self._form_for.collection_check_boxes(name, collection, {"class": "checkbox inline"})
        return self._row(name, controls, row_options)

    def collection_radios(
        self,
        name: str,
        collection: Mapping[Any, Any],
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        options = dict(row_options or {})
        # The label names the whole group, not a single input
        label = self.label(name, options.pop("label", None), {"for": False, "id": False})
        options["errors"] = self.error_text_for(name)
        controls = self._form_for.collection_radios(name, collection, {"class": "radio"})
        return self.row(label, controls, options)

    def button_group(
        self,
        name: str,
        collection: Mapping[Any, Any],
        row_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Group of buttons acting as radio buttons; the current value is active."""
        selected = self._form_for.value(name)
        content = Markup("")
        for value, text in collection.items():
            btn_attributes = {
                "data-value": value,
                "class": ["btn", "btn-large", "active" if value == selected else None],
            }
            content += self._form_for.button(name, text, btn_attributes)

        div_attributes = {
            "class": "btn-group masked-radio",
            "data-toggle": "buttons-radio",
            "data-field": name,
        }
        return self._row(name, tag("div", div_attributes, content, escape_content=False), row_options)

    # -- Nesting --

    def fields_for(
        self,
        name: str,
        models: Any = None,
        bootstrap_options: Mapping[str, Any] | None = None,
        **form_options: Any,
    ) -> BootstrapFormFor | list[BootstrapFormFor]:
        """Decorated nested form(s); see FormFor.fields_for.

        When this form was given a pydantic ValidationError, each nested form
        shows the errors located under it, e.g. ``("lines", 1, "qty")``.
        """
        options = {**self.nested_options, **(bootstrap_options or {})}
        nested = self._form_for.fields_for(name, models, **form_options)
        if isinstance(nested, list):
            return [
                type(self)(sub_form, **self._nested_error_options(options, name, idx))
                for idx, sub_form in enumerate(nested)
            ]
        return type(self)(nested, **self._nested_error_options(options, name))

    def _nested_error_options(self, options: dict[str, Any], *location: Any) -> dict[str, Any]:
        if self._validation_error is None or "errors" in options or "error_getter" in options:
            return options
        return {**options, "errors": self._validation_error, "error_prefix": (*self._error_prefix, *location)}

    # -- Rows --

    def row(self, label: Any, controls: Any, options: Mapping[str, Any] | None = None) -> Markup:
        """Render a control group around already rendered controls.

        Options:
            class        extra classes for the group (string or list)
            prepend      add-on rendered before the control
            append       add-on rendered after the control
            content-after  raw markup after the control
            help         inline help text (string, or attributes with a "text" key)
            errors       error text; also marks the group with the "error" class
            help-block   block help text, rendered last

        Any other option becomes an attribute of the group element.
        """
        options = dict(options or {})
        classes = class_list(options.pop("class", None))

        controls = self._prepend_and_append(controls, options.pop("prepend", None), options.pop("append", None))

        extra_html = options.pop("content-after", None)
        if extra_html:
            controls += Markup(extra_html)

        help_inline = options.pop("help", None)
        if help_inline:
            controls += self.help("inline", help_inline)

        errors = options.pop("errors", None)
        if errors:
            controls += self._error_block(errors)
            classes.append("error")

        help_block = options.pop("help-block", None)
        if help_block:
            controls += self.help("block", help_block)

        return self._render_row(label, controls, classes, options)

    def error_text_for(self, attribute: str) -> str | None:
        """Error text for an attribute, or None without an error getter."""
        if self.error_getter is None:
            return None
        return self.error_getter(attribute)

    def help(self, kind: str, text: Any, attributes: Mapping[str, Any] | None = None) -> Markup:
        """Inline (``span.help-inline``) or block (``p.help-block``) help.

        ``text`` may be a mapping of HTML attributes with the text under "text".
        """
        if not text:
            return Markup("")
        if isinstance(text, Mapping):
            text = dict(text)
            return self.help(kind, text.pop("text", None), text)
        if kind == "block":
            return tag("p", {"class": "help-block", **(attributes or {})}, text)
        return tag("span", {"class": "help-inline", **(attributes or {})}, text)

    # -- Internals --

    def _row(self, name: str, controls: Markup, row_options: Mapping[str, Any] | None) -> Markup:
        """Row with the attribute's label and error text."""
        options = dict(row_options or {})
        label = self.label(name, options.pop("label", None))
        options["errors"] = self.error_text_for(name)
        return self.row(label, controls, options)

    def _with_input_class(self, attributes: Mapping[str, Any] | None) -> dict[str, Any]:
        return {"class": self.input_class, **(attributes or {})}

    @staticmethod
    def _error_block(errors: Any) -> Markup:
        return tag("p", {"class": "help-block"}, errors)

    @staticmethod
    def _prepend_and_append(controls: Any, prepend: Any, append: Any) -> Markup:
        if not prepend and not append:
            return Markup(controls)

        wrapper_class = []
        output = Markup("")
        if prepend:
            output += tag("span", {"class": "add-on"}, prepend)
            wrapper_class.append("input-prepend")
        output += Markup(controls)
        if append:
            output += tag("span", {"class": "add-on"}, append)
            wrapper_class.append("input-append")

        return tag("div", {"class": wrapper_class}, output, escape_content=False)

    @staticmethod
    def _render_row(label: Any, controls: Markup, classes: list[str], attributes: Mapping[str, Any]) -> Markup:
        group_class = " ".join(["control-group", *classes])
        return Markup(
            f'<div class="{escape(group_class)}"{render_attributes(attributes)}>'
            f'{label}<div class="controls">{controls}</div></div>'
        )

    def __repr__(self) -> str:
        return f"BootstrapFormFor({self._form_for!r})"
