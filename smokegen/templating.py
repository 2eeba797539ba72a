"""Thin wrapper around Jinja2 for rendering generated test scripts."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined


def shquote(text: str) -> str:
    """Single-quote ``text`` for sh, keeping embedded newlines verbatim (atf_check inline: values)."""
    return "'" + text.replace("'", "'\\''") + "'"


_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
