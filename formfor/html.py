"""Low-level HTML tag rendering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset({"input", "br", "hr", "img", "meta", "link"})


def attributes(attrs: Mapping[str, Any] | None) -> Markup:
    """Render a mapping as an HTML attribute string.

    Returns '' or ' key="val" key2="val2"'. ``None`` and ``False`` values are
    skipped, ``True`` renders a bare boolean attribute and lists (e.g. class
    names) are joined with spaces.
    """
    if not attrs:
        return Markup("")
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(str(escape(key)))
            continue
        if isinstance(value, Iterable) and not isinstance(value, str):
            value = " ".join(str(v) for v in value if v)
        parts.append(f'{escape(key)}="{escape(str(value))}"')
    if not parts:
        return Markup("")
    return Markup(" " + " ".join(parts))


def tag(
    name: str,
    attrs: Mapping[str, Any] | None = None,
    content: Any = None,
    escape_content: bool = True,
) -> Markup:
    """Render a single element.

    Void elements never get a closing tag. Content is escaped unless
    ``escape_content`` is False; ``Markup`` content is never escaped twice.
    """
    html = f"<{name}{attributes(attrs)}>"
    if name in VOID_ELEMENTS:
        return Markup(html)
    if content is None:
        content = ""
    body = escape(content) if escape_content else str(content)
    return Markup(f"{html}{body}</{name}>")


def class_list(*classes: Any) -> list[str]:
    """Flatten strings and lists of class names, dropping empty entries."""
    result: list[str] = []
    for value in classes:
        if not value:
            continue
        if isinstance(value, str):
            result.extend(value.split())
        else:
            result.extend(class_list(*value))
    return result
