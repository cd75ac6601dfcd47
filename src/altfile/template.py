"""Lightweight string templating used to render source stubs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .naming import to_pascal_case, to_snake_case

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _default_filters() -> dict[str, Callable[[Any], Any]]:
    return {
        "snake": lambda value: to_snake_case(str(value)),
        "pascal": lambda value: to_pascal_case(str(value)),
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Render ``{{ key|filter }}`` placeholders from a mapping.

    Filters are applied left to right. Keys missing from the context render
    as an empty string so optional sections simply disappear.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=_default_filters)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``."""

        def substitute(match: re.Match[str]) -> str:
            key, *filter_names = [part.strip() for part in match.group("expression").split("|")]
            if key not in context:
                return ""

            value = context[key]
            for name in filter_names:
                if name not in self.filters:
                    raise TemplateRenderingError(f"unknown filter '{name}'")
                value = self.filters[name](value)
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
