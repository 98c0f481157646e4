"""Expose form helpers to Jinja templates.

    {% set f = bootstrap_form_for(user, "/users") %}
    {{ f }}
      {{ f.text("email") }}
    {{ f.close() }}
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import jinja2
from litestar.plugins.jinja import JinjaTemplateEngine
from litestar.template import TemplateConfig

from formfor.bootstrap import BootstrapFormFor
from formfor.config import FormForSettings
from formfor.core import FormFor
from formfor.i18n import Translator


def template_globals(
    translator: Translator | None = None,
    settings: FormForSettings | None = None,
) -> dict[str, Any]:
    """Template globals; ``translator`` and ``settings`` are handed to every form created from templates."""

    def form_for(model, action="", **options):
        options.setdefault("translator", translator)
        options.setdefault("settings", settings)
        return FormFor(model, action, **options)

    def bootstrap_form_for(model, action="", **options):
        options.setdefault("translator", translator)
        options.setdefault("settings", settings)
        return BootstrapFormFor.forge(model, action, **options)

    return {"form_for": form_for, "bootstrap_form_for": bootstrap_form_for}


def install(
    environment: jinja2.Environment,
    translator: Translator | None = None,
    settings: FormForSettings | None = None,
) -> jinja2.Environment:
    """Register the form globals on a Jinja environment."""
    environment.globals.update(template_globals(translator, settings))
    return environment


def build_template_engine_callback(
    translator: Translator | None = None,
    extra_globals: dict[str, Any] | None = None,
    settings: FormForSettings | None = None,
) -> Callable[[JinjaTemplateEngine], None]:
    """Build a Litestar template engine callback that sets the form globals."""

    def configure_engine(engine: JinjaTemplateEngine):
        install(engine.engine, translator, settings)
        if extra_globals:
            engine.engine.globals.update(extra_globals)

    return configure_engine


def build_template_config(
    directories: list[Path],
    translator: Translator | None = None,
    settings: FormForSettings | None = None,
) -> TemplateConfig:
    """Litestar template configuration with the form globals installed."""
    return TemplateConfig(
        directory=directories,
        engine=JinjaTemplateEngine,
        engine_callback=build_template_engine_callback(translator, settings=settings),
    )
