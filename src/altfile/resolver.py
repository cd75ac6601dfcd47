"""Directory convention rules that map a file to its alternate files.

Every rule works on an immutable tuple of path segments and returns a new
tuple. Rules never fail: when the directories a rule relies on are missing
the path is returned unchanged (or with a best effort insertion).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Sequence

from .config import FileExtensions, PathFormats
from .errors import InvalidPathError, UnsupportedConversionError
from .kinds import TargetKind
from .naming import app_identity, split_filename, strip_known_suffix, strip_known_suffixes

__all__ = ["ConversionResult", "PathConventionResolver", "convert_path"]


Components = tuple[str, ...]

CURRENT_DIRECTORY = "./"

COMPONENTS_DIR = "components"
CHANNELS_DIR = "channels"
FEATURES_DIR = "features"
MIX_TASKS = ("mix", "tasks")
HTML_TEMPLATE = "index.html.heex"
HTML_EXTENSION = "html.heex"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a single conversion."""

    path: str
    kind: TargetKind
    original_path: str


def _find(components: Components, name: str, start: int = 0) -> int | None:
    """Index of directory ``name`` at or after ``start``; the filename is never matched."""

    for index in range(start, len(components) - 1):
        if components[index] == name:
            return index
    return None


def _replace(components: Components, index: int, value: str) -> Components:
    return components[:index] + (value,) + components[index + 1 :]


def _insert(components: Components, index: int, value: str) -> Components:
    return components[:index] + (value,) + components[index:]


def _remove(components: Components, index: int) -> Components:
    return components[:index] + components[index + 1 :]


def _ensure_directory(
    components: Components,
    directory: str,
    *,
    anchor: int,
    rename: Sequence[str] = (),
) -> Components:
    """Make sure ``directory`` follows the web module at ``anchor``.

    An existing ``directory`` is kept. Otherwise the first directory of
    ``rename`` found in the path is renamed in place, and only when none is
    present is ``directory`` inserted right after ``anchor``.
    """

    if _find(components, directory, anchor + 1) is not None:
        return components
    for candidate in rename:
        index = _find(components, candidate, anchor + 1)
        if index is not None:
            return _replace(components, index, directory)
    return _insert(components, anchor + 1, directory)


def _rename_file(
    components: Components,
    *,
    strip: Sequence[str] = (),
    append: str = "",
    extension: str | None = None,
) -> Components:
    stem, current_extension = split_filename(components[-1])
    stem = strip_known_suffixes(stem, strip)
    if append and not stem.endswith(append):
        stem += append
    return components[:-1] + (f"{stem}.{extension or current_extension}",)


@dataclass(frozen=True, slots=True)
class PathConventionResolver:
    """Convert project paths to the path of a related file of another kind.

    Parameters
    ----------
    formats:
        Directory names (``lib``, ``test``, the web suffix and the special
        web directories).
    extensions:
        Source and test file extensions.
    strict:
        When ``True`` a path that lacks the root directory a kind depends on
        raises :class:`UnsupportedConversionError` instead of passing through.
    """

    formats: PathFormats = field(default_factory=PathFormats)
    extensions: FileExtensions = field(default_factory=FileExtensions)
    strict: bool = False

    def convert(self, path: str, kind: TargetKind) -> ConversionResult:
        """Return the path of the ``kind`` alternate for ``path``."""

        prefix = CURRENT_DIRECTORY if path.startswith(CURRENT_DIRECTORY) else ""
        components: Components = tuple(path[len(prefix) :].split("/"))
        if "." not in components[-1]:
            raise InvalidPathError(path)

        if self.strict and not self.applies(components, kind):
            raise UnsupportedConversionError(path, kind)

        converted = _RULES[kind](self, components)
        return ConversionResult(path=prefix + "/".join(converted), kind=kind, original_path=path)

    def applies(self, components: Components, kind: TargetKind) -> bool:
        """Whether ``components`` contain the root directory ``kind`` relies on."""

        formats = self.formats
        if kind is TargetKind.FEATURE:
            return True
        if kind is TargetKind.TEST:
            return _find(components, formats.lib) is not None or _find(components, formats.test) is not None
        if kind is TargetKind.TASK:
            return _find(components, formats.lib) is not None
        return app_identity(components, roots=(formats.lib,), web_suffix=formats.web) is not None

    def _web_module(self, components: Components) -> tuple[Components, int] | None:
        """Move the app directory into its web module; returns the new path and its index."""

        identity = app_identity(components, roots=(self.formats.lib,), web_suffix=self.formats.web)
        if identity is None:
            return None
        if not identity.is_web_module:
            web_name = components[identity.index] + self.formats.web
            components = _replace(components, identity.index, web_name)
        return components, identity.index

    def _to_test(self, components: Components) -> Components:
        formats = self.formats
        lib_index = _find(components, formats.lib)
        if lib_index is not None:
            components = _replace(components, lib_index, formats.test)
            return _rename_file(components, append="_test", extension=self.extensions.test)

        test_index = _find(components, formats.test)
        if test_index is not None:
            components = _replace(components, test_index, formats.lib)
            return _rename_file(components, strip=("_test",), extension=self.extensions.source)

        return components

    def _to_controller(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(components, self.formats.controllers, anchor=web_index)

        stem, extension = split_filename(components[-1])
        base, _ = strip_known_suffix(stem)
        return components[:-1] + (f"{base}_controller.{extension}",)

    def _to_model(self, components: Components) -> Components:
        formats = self.formats
        identity = app_identity(components, roots=(formats.lib,), web_suffix=formats.web)
        if identity is None:
            return components

        if identity.is_web_module:
            components = _replace(components, identity.index, identity.base_name)
            controllers_index = _find(components, formats.controllers, identity.index + 1)
            if controllers_index is not None:
                components = _remove(components, controllers_index)

        return _rename_file(components, strip=("_controller",))

    def _to_view(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(
            components,
            self.formats.views,
            anchor=web_index,
            rename=(self.formats.controllers,),
        )
        return _rename_file(components, strip=("_controller",), append="_view")

    def _to_html(self, components: Components) -> Components:
        formats = self.formats
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        if components[-1].endswith("." + HTML_EXTENSION):
            return components

        if _find(components, formats.controllers, web_index + 1) is not None:
            stem, _ = split_filename(components[-1])
            name, _ = strip_known_suffix(stem)
            return components[:-1] + (f"{name}_html", HTML_TEMPLATE)

        views_index = _find(components, formats.views, web_index + 1)
        if views_index is not None:
            components = _replace(components, views_index, formats.templates)
        else:
            components = _insert(components, web_index + 1, formats.templates)
        return _rename_file(components, strip=("_view",), extension=HTML_EXTENSION)

    def _to_live(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(
            components,
            self.formats.live,
            anchor=web_index,
            rename=(self.formats.views, self.formats.controllers),
        )
        return _rename_file(components, strip=("_controller", "_view"), append="_live")

    def _to_component(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(
            components,
            COMPONENTS_DIR,
            anchor=web_index,
            rename=(self.formats.controllers, self.formats.views),
        )
        return _rename_file(components, strip=("_controller", "_view", "_component"))

    def _to_live_component(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(
            components,
            self.formats.live,
            anchor=web_index,
            rename=(self.formats.views, self.formats.controllers, COMPONENTS_DIR),
        )
        return _rename_file(components, strip=("_controller", "_view"), append="_component")

    def _to_channel(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(
            components,
            CHANNELS_DIR,
            anchor=web_index,
            rename=(self.formats.controllers, self.formats.views, self.formats.live),
        )
        return _rename_file(components, strip=("_controller", "_view", "_live"), append="_channel")

    def _to_json(self, components: Components) -> Components:
        web = self._web_module(components)
        if web is None:
            return components
        components, web_index = web
        components = _ensure_directory(components, self.formats.controllers, anchor=web_index)
        return _rename_file(components, strip=("_controller", "_html"), append="_json")

    def _to_task(self, components: Components) -> Components:
        lib_index = _find(components, self.formats.lib)
        if lib_index is None:
            return components
        if components[lib_index + 1 : lib_index + 3] == MIX_TASKS:
            return components
        return components[: lib_index + 1] + MIX_TASKS + components[lib_index + 1 :]

    def _to_feature(self, components: Components) -> Components:
        formats = self.formats
        test_index = _find(components, formats.test)
        if test_index is not None:
            if components[test_index + 1] != FEATURES_DIR:
                components = _insert(components, test_index + 1, FEATURES_DIR)
        elif len(components) == 1:
            components = (formats.test, FEATURES_DIR) + components
        else:
            components = (formats.test, FEATURES_DIR) + components[1:]

        return _rename_file(components, append="_test", extension=self.extensions.test)


_RULES: Mapping[TargetKind, Callable[[PathConventionResolver, Components], Components]] = {
    TargetKind.TEST: PathConventionResolver._to_test,
    TargetKind.CONTROLLER: PathConventionResolver._to_controller,
    TargetKind.MODEL: PathConventionResolver._to_model,
    TargetKind.VIEW: PathConventionResolver._to_view,
    TargetKind.HTML: PathConventionResolver._to_html,
    TargetKind.LIVE: PathConventionResolver._to_live,
    TargetKind.COMPONENT: PathConventionResolver._to_component,
    TargetKind.LIVE_COMPONENT: PathConventionResolver._to_live_component,
    TargetKind.CHANNEL: PathConventionResolver._to_channel,
    TargetKind.JSON: PathConventionResolver._to_json,
    TargetKind.TASK: PathConventionResolver._to_task,
    TargetKind.FEATURE: PathConventionResolver._to_feature,
}


def convert_path(path: str, kind: TargetKind | str, **options) -> ConversionResult:
    """Convert ``path`` with a resolver built from ``options``.

    ``kind`` may be a :class:`TargetKind` or its command line name.
    """

    if not isinstance(kind, TargetKind):
        kind = TargetKind.parse(kind)
    return PathConventionResolver(**options).convert(path, kind)
