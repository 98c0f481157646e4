"""Form element primitives.

Every function takes a field name, a value and a mapping of extra HTML
attributes and returns ``Markup``. Caller attributes always win over the
generated ``id``/``name``/``value`` defaults; set an attribute to ``False``
to drop it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup

from formfor.html import attributes, tag

_ID_SEPARATORS = re.compile(r"[\[\]\s]+")


def auto_id(name: str) -> str:
    """Derive an element id from a field name. order[items][0][price] -> order_items_0_price"""
    return _ID_SEPARATORS.sub("_", str(name)).strip("_")


def _merge(defaults: Mapping[str, Any], attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    merged = dict(defaults)
    if attrs:
        merged.update(attrs)
    return merged


def _same(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is b
    return str(a) == str(b)


def _selected_values(selected: Any) -> set[str]:
    if selected is None:
        return set()
    if isinstance(selected, Iterable) and not isinstance(selected, str):
        return {str(v) for v in selected}
    return {str(selected)}


def open(action: str | None = "", attrs: Mapping[str, Any] | None = None) -> Markup:
    """Render the opening ``<form>`` tag. Method defaults to post."""
    merged = _merge({"action": action or "", "method": "post"}, attrs)
    return Markup(f"<form{attributes(merged)}>")


def close() -> Markup:
    return Markup("</form>")


def label(text: Any, name: str, attrs: Mapping[str, Any] | None = None) -> Markup:
    field_id = auto_id(name)
    merged = _merge({"for": field_id, "id": f"{field_id}_label"}, attrs)
    return tag("label", merged, text)


def input_field(input_type: str, name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    merged = _merge(
        {"type": input_type, "name": name, "id": auto_id(name), "value": value},
        attrs,
    )
    return tag("input", merged)


def text(name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    return input_field("text", name, value, attrs)


def password(name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    return input_field("password", name, value, attrs)


def hidden(name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    return input_field("hidden", name, value, attrs)


def text_area(name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    merged = _merge({"name": name, "id": auto_id(name)}, attrs)
    return tag("textarea", merged, "" if value is None else value)


def check_box(
    name: str,
    value: Any = None,
    checked_value: Any = "1",
    attrs: Mapping[str, Any] | None = None,
    with_hidden: bool = True,
    unchecked_value: Any = "0",
    split: bool = False,
) -> Markup | tuple[Markup, Markup]:
    """Render a check box, preceded by a hidden field carrying ``unchecked_value``.

    The hidden field makes the attribute present in submitted data even when
    the box is left unchecked. With ``split`` the pair is returned as
    ``(hidden, checkbox)`` so callers can place them separately.
    """
    checked = value if isinstance(value, bool) else _same(value, checked_value)
    box = input_field("checkbox", name, checked_value, _merge({"checked": checked}, attrs))
    companion = (
        tag("input", {"type": "hidden", "name": name, "value": unchecked_value})
        if with_hidden
        else Markup("")
    )
    if split:
        return companion, box
    return companion + box


def radio(name: str, value: Any, checked: bool = False, attrs: Mapping[str, Any] | None = None) -> Markup:
    defaults = {"id": f"{auto_id(name)}_{auto_id(str(value))}", "checked": checked}
    return input_field("radio", name, value, _merge(defaults, attrs))


def _labelled(control: Markup, text: Any, label_attrs: Mapping[str, Any] | None) -> Markup:
    return tag("label", label_attrs, control + Markup(" ") + Markup.escape(text), escape_content=False)


def collection_check_boxes(
    name: str,
    collection: Mapping[Any, Any],
    selected: Any = None,
    label_attrs: Mapping[str, Any] | None = None,
    as_list: bool = False,
) -> Markup | list[Markup]:
    """One labelled check box per collection entry, submitted as ``name[]``."""
    chosen = _selected_values(selected)
    items = []
    for value, text_ in collection.items():
        box = input_field(
            "checkbox",
            f"{name}[]",
            value,
            {"id": f"{auto_id(name)}_{auto_id(str(value))}", "checked": str(value) in chosen},
        )
        items.append(_labelled(box, text_, label_attrs))
    if as_list:
        return items
    return Markup("").join(items)


def collection_radios(
    name: str,
    collection: Mapping[Any, Any],
    selected: Any = None,
    label_attrs: Mapping[str, Any] | None = None,
    as_list: bool = False,
) -> Markup | list[Markup]:
    items = [
        _labelled(radio(name, value, _same(value, selected)), text_, label_attrs)
        for value, text_ in collection.items()
    ]
    if as_list:
        return items
    return Markup("").join(items)


def select(
    name: str,
    collection: Mapping[Any, Any],
    selected: Any = None,
    attrs: Mapping[str, Any] | None = None,
) -> Markup:
    """Render a ``<select>``; nested mappings become ``<optgroup>`` elements."""
    chosen = _selected_values(selected)

    def options(entries: Mapping[Any, Any]) -> Markup:
        html = Markup("")
        for value, text_ in entries.items():
            if isinstance(text_, Mapping):
                html += tag("optgroup", {"label": value}, options(text_), escape_content=False)
            else:
                html += tag("option", {"value": value, "selected": str(value) in chosen}, text_)
        return html

    merged = _merge({"name": name, "id": auto_id(name)}, attrs)
    return tag("select", merged, options(collection), escape_content=False)


def button(name: str, text_: Any, attrs: Mapping[str, Any] | None = None) -> Markup:
    merged = _merge({"type": "button", "name": name, "id": auto_id(name)}, attrs)
    return tag("button", merged, text_)
