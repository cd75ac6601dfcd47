"""Case conversions and path <-> module name mapping for Phoenix style projects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "AppIdentity",
    "KNOWN_SUFFIXES",
    "SPECIAL_DIRECTORIES",
    "app_identity",
    "module_name_to_path",
    "path_to_module_name",
    "split_filename",
    "strip_known_suffix",
    "strip_known_suffixes",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]


_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

ROOT_DIRECTORIES = ("lib", "test")
WEB_SUFFIX = "_web"

SPECIAL_DIRECTORIES = ("controllers", "views", "live", "components", "channels", "templates")

# Priority order used when a filename carries more than one marker.
KNOWN_SUFFIXES = (
    "_controller",
    "_view",
    "_channel",
    "_component",
    "_live",
    "_html",
    "_json",
    "_test",
)

_MODULE_SUFFIX_DIRECTORIES = sorted(
    [
        ("Controller", "controllers"),
        ("View", "views"),
        ("Channel", "channels"),
        ("Component", "components"),
        ("Live", "live"),
        ("HTML", "controllers"),
        ("JSON", "controllers"),
    ],
    key=lambda pair: len(pair[0]),
    reverse=True,
)


def to_snake_case(value: str) -> str:
    """Return ``value`` in snake_case.

    Only a lowercase letter or digit followed by an uppercase letter starts a
    new word, so acronyms collapse: ``"APIRequest"`` becomes ``"apirequest"``.
    """

    if not value:
        return ""
    return _WORD_BOUNDARY.sub(r"\1_\2", value).lower()


def to_camel_case(value: str) -> str:
    """Return ``value`` (snake_case) as camelCase."""

    parts = value.split("_")
    head, *tail = parts
    return head.lower() + "".join(part.capitalize() for part in tail)


def to_pascal_case(value: str) -> str:
    """Return ``value`` (snake_case) as PascalCase."""

    return "".join(part.capitalize() for part in value.split("_"))


def split_filename(filename: str) -> tuple[str, str]:
    """Split ``filename`` at its first dot into ``(stem, extension)``.

    ``"index.html.heex"`` yields ``("index", "html.heex")``. A name without a
    dot has an empty extension.
    """

    stem, _, extension = filename.partition(".")
    return stem, extension


def strip_known_suffix(stem: str, suffixes: Sequence[str] = KNOWN_SUFFIXES) -> tuple[str, str]:
    """Remove the first matching marker in ``suffixes`` from ``stem``.

    Returns ``(base, suffix)`` where ``suffix`` is empty when nothing matched.
    """

    for suffix in suffixes:
        if stem.endswith(suffix) and len(stem) > len(suffix):
            return stem[: -len(suffix)], suffix
    return stem, ""


def strip_known_suffixes(stem: str, suffixes: Sequence[str] = KNOWN_SUFFIXES) -> str:
    """Strip markers from ``stem`` until none of ``suffixes`` is left.

    ``"map_live_component"`` becomes ``"map"``.
    """

    base, suffix = strip_known_suffix(stem, suffixes)
    while suffix:
        base, suffix = strip_known_suffix(base, suffixes)
    return base


@dataclass(frozen=True, slots=True)
class AppIdentity:
    """Application named by the segment following ``lib`` or ``test``."""

    base_name: str
    is_web_module: bool
    index: int

    @property
    def module_name(self) -> str:
        name = to_pascal_case(self.base_name)
        return f"{name}Web" if self.is_web_module else name


def app_identity(
    components: Sequence[str],
    *,
    roots: Sequence[str] = ROOT_DIRECTORIES,
    web_suffix: str = WEB_SUFFIX,
) -> AppIdentity | None:
    """Locate the app identity directory in ``components``.

    The identity is the directory right after the first root directory. When
    the root is followed directly by the filename there is no identity.
    """

    root_index = next((i for i, part in enumerate(components) if part in roots), None)
    if root_index is None or root_index + 1 >= len(components) - 1:
        return None

    index = root_index + 1
    segment = components[index]
    if segment.endswith(web_suffix):
        return AppIdentity(segment[: -len(web_suffix)], True, index)
    return AppIdentity(segment, False, index)


def path_to_module_name(path: str) -> str:
    """Convert a project file path into its dotted module name.

    >>> path_to_module_name("lib/my_app_web/controllers/user_controller.ex")
    'MyAppWeb.UserController'

    Special directories (``controllers``, ``views`` ...) do not contribute a
    module word. Paths without a ``lib``/``test`` root map to ``""``.
    """

    components = path.split("/")
    root_index = next((i for i, part in enumerate(components) if part in ROOT_DIRECTORIES), None)
    if root_index is None or root_index + 1 >= len(components):
        return ""

    words: list[str] = []
    identity = app_identity(components)
    if identity is not None:
        words.append(identity.module_name)
        words.extend(
            to_pascal_case(part)
            for part in components[identity.index + 1 : -1]
            if part not in SPECIAL_DIRECTORIES
        )

    stem, _ = split_filename(components[-1])
    base, suffix = strip_known_suffix(stem)
    word = to_pascal_case(base)
    if suffix:
        word += to_pascal_case(suffix[1:])
    words.append(word)

    return ".".join(words)


def module_name_to_path(module_name: str, root_dir: str = "lib", file_extension: str = "ex") -> str:
    """Convert a dotted module name into the conventional file path.

    >>> module_name_to_path("MyAppWeb.UserController")
    'lib/my_app_web/controllers/user_controller.ex'
    """

    words = module_name.split(".")
    if not module_name or not words:
        return ""

    head, *rest = words
    if head.endswith("Web"):
        app_directory = to_snake_case(head[: -len("Web")]) + WEB_SUFFIX
    else:
        app_directory = to_snake_case(head)

    if not rest:
        return f"{root_dir}/{app_directory}.{file_extension}"

    components = [root_dir, app_directory]

    *namespaces, last = rest
    components.extend(to_snake_case(word) for word in namespaces)

    for suffix, directory in _MODULE_SUFFIX_DIRECTORIES:
        if last.endswith(suffix) and len(last) > len(suffix):
            if directory not in components:
                components.insert(2, directory)
            base = to_snake_case(last[: -len(suffix)])
            components.append(f"{base}_{suffix.lower()}.{file_extension}")
            break
    else:
        components.append(f"{to_snake_case(last)}.{file_extension}")

    return "/".join(components)
