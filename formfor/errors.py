"""Error text lookup for decorated forms."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import ValidationError

ErrorGetter = Callable[[str], Optional[str]]


@runtime_checkable
class ErrorSource(Protocol):
    """A model (or form object) that can report validation errors per attribute."""

    def error(self, attribute: str) -> str | None: ...


class MappingErrorGetter:
    """Error getter over a plain ``{attribute: message}`` mapping."""

    def __init__(self, errors: Mapping[str, str] | None = None):
        self.errors = dict(errors or {})

    def __call__(self, attribute: str) -> str | None:
        return self.errors.get(attribute)

    def __repr__(self) -> str:
        return f"MappingErrorGetter({self.errors!r})"


def errors_from_validation_error(exc: ValidationError, prefix: tuple[Any, ...] = ()) -> dict[str, str]:
    """Map a pydantic ValidationError to ``{attribute: first message}``.

    Only errors located under ``prefix`` are kept, with the prefix removed,
    so ``prefix=("items", 1)`` yields the errors of the second item.
    """
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = tuple(err["loc"])
        if loc[: len(prefix)] != prefix:
            continue
        rest = loc[len(prefix):]
        field_name = str(rest[0]) if rest else "__form__"
        # Only keep first error per field
        if field_name not in errors:
            errors[field_name] = err["msg"]
    return errors


def resolve_error_getter(
    model: Any,
    error_getter: ErrorGetter | None = None,
    errors: Mapping[str, str] | ValidationError | None = None,
    prefix: tuple[Any, ...] = (),
) -> ErrorGetter | None:
    """Pick the error getter for a model.

    An explicit getter wins, then an explicit errors mapping (or pydantic
    ValidationError, narrowed to ``prefix``), then the model's own
    ``error()`` method. A plain data attribute named ``error`` is ignored.
    """
    if error_getter is not None:
        return error_getter
    if isinstance(errors, ValidationError):
        return MappingErrorGetter(errors_from_validation_error(errors, prefix))
    if errors is not None:
        return MappingErrorGetter(errors)
    error = getattr(model, "error", None)
    if callable(error):
        return error
    return None
