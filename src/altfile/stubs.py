"""Source stubs for newly created alternate files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .config import TemplateOptions
from .kinds import TargetKind
from .naming import (
    ROOT_DIRECTORIES,
    SPECIAL_DIRECTORIES,
    app_identity,
    path_to_module_name,
    split_filename,
    strip_known_suffixes,
    to_pascal_case,
)
from .template import TemplateRenderer

__all__ = ["StubGenerator", "generate_stub"]


MODULE_TEMPLATE = """defmodule {{ module }} do
{{ body }}end
"""

MODULEDOC_TEMPLATE = '''  @moduledoc """
  {{ label }} for {{ name }}
  """
'''

TEST_TEMPLATE = """defmodule {{ module }} do
  use {{ case }}, async: true{{ aliases }}
end
"""

TASK_TEMPLATE = '''defmodule Mix.Tasks.{{ task_module }} do
  use Mix.Task

  @shortdoc "{{ name|pascal }} task"
{{ moduledoc }}
  @impl true
  @doc false
  def run(argv) do
  end
end
'''

USE_TEMPLATES: Mapping[TargetKind, str] = {
    TargetKind.CONTROLLER: "  use {{ web }}, :controller\n",
    TargetKind.MODEL: "  use Ecto.Schema\n  import Ecto.Changeset\n",
    TargetKind.VIEW: "  use {{ web }}, :view\n",
    TargetKind.HTML: '  use {{ web }}, :html\n\n  embed_templates "{{ name|snake }}_html/*"\n',
    TargetKind.LIVE: "  use {{ web }}, :live_view\n",
    TargetKind.COMPONENT: "  use Phoenix.Component\n",
    TargetKind.LIVE_COMPONENT: "  use {{ web }}, :live_component\n",
    TargetKind.CHANNEL: "  use {{ web }}, :channel\n",
}

# (module name suffix, @moduledoc label)
MODULE_KINDS: Mapping[TargetKind, tuple[str, str]] = {
    TargetKind.CONTROLLER: ("Controller", "Controller"),
    TargetKind.MODEL: ("", "Schema"),
    TargetKind.VIEW: ("View", "View"),
    TargetKind.HTML: ("HTML", "HTML"),
    TargetKind.LIVE: ("Live", "LiveView"),
    TargetKind.COMPONENT: ("", "Component"),
    TargetKind.LIVE_COMPONENT: ("Component", "LiveComponent"),
    TargetKind.CHANNEL: ("Channel", "Channel"),
    TargetKind.JSON: ("JSON", "JSON"),
}

# Directory -> (ExUnit case module, extra lines before the alias, whether to alias the subject)
TEST_CASES: Mapping[str, tuple[str, str, bool]] = {
    "controllers": ("ConnCase", "", True),
    "channels": ("ChannelCase", "", True),
    "live": ("ConnCase", "  import Phoenix.LiveViewTest\n", True),
    "components": ("ConnCase", "", True),
    "features": ("FeatureCase", "", False),
}

FEATURES_DIR = "features"
LIB_DIR = "lib"


@dataclass(frozen=True, slots=True)
class _ModuleInfo:
    app: str
    namespaces: tuple[str, ...]
    name: str

    @property
    def web(self) -> str:
        return f"{self.app}Web" if self.app else ""

    def module(self, *, web: bool, suffix: str = "") -> str:
        head = self.web if web else self.app
        words = [word for word in (head, *self.namespaces) if word]
        return ".".join([*words, self.name + suffix])


def _root(components: list[str]) -> str | None:
    return next((part for part in components[:-1] if part in ROOT_DIRECTORIES), None)


def _without_features(components: list[str]) -> list[str]:
    for index, part in enumerate(components[:-1]):
        if part in ROOT_DIRECTORIES:
            if components[index + 1] == FEATURES_DIR and index + 1 < len(components) - 1:
                return components[: index + 1] + components[index + 2 :]
            break
    return components


def _module_info(components: list[str]) -> _ModuleInfo:
    components = _without_features(components)
    stem, _ = split_filename(components[-1])
    name = to_pascal_case(strip_known_suffixes(stem))

    identity = app_identity(components)
    if identity is None:
        return _ModuleInfo("", (), name)

    namespaces = tuple(
        to_pascal_case(part)
        for part in components[identity.index + 1 : -1]
        if part not in SPECIAL_DIRECTORIES
    )
    return _ModuleInfo(to_pascal_case(identity.base_name), namespaces, name)


@dataclass(slots=True)
class StubGenerator:
    """Produce Elixir source stubs for a resolved path and kind.

    Generation never fails; paths it cannot make sense of yield an empty
    string or a bare module shell.
    """

    options: TemplateOptions = field(default_factory=TemplateOptions)
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    def generate(self, path: str, kind: TargetKind) -> str:
        """Return the stub for the file at ``path`` of type ``kind``."""

        components = path.split("/")
        if not strip_known_suffixes(split_filename(components[-1])[0]):
            return ""

        if kind is TargetKind.TEST and _root(components) == LIB_DIR:
            return self._source_stub(components)
        if kind in (TargetKind.TEST, TargetKind.FEATURE):
            return self._test_stub(components, kind)
        if kind is TargetKind.TASK:
            return self._task_stub(components)
        if kind is TargetKind.HTML and components[-1].endswith(".heex"):
            return ""
        return self._module_stub(components, kind)

    def _render(self, template: str, context: Mapping[str, str]) -> str:
        return self.renderer.render_string(template, context)

    def _moduledoc(self, label: str, name: str) -> str:
        if not self.options.include_module_doc:
            return ""
        return self._render(MODULEDOC_TEMPLATE, {"label": label, "name": name})

    def _module_stub(self, components: list[str], kind: TargetKind) -> str:
        info = _module_info(components)
        suffix, label = MODULE_KINDS[kind]
        context = {"web": info.web, "name": info.name}

        sections = [self._moduledoc(label, info.name)]
        use_template = USE_TEMPLATES.get(kind, "")
        # Web use lines need an application to name.
        if "{{ web }}" in use_template and not info.web:
            use_template = ""
        if self.options.include_use and use_template:
            sections.append(self._render(use_template, context))
        body = "\n".join(section for section in sections if section)

        module = info.module(web=kind.is_web, suffix=suffix)
        return self._render(MODULE_TEMPLATE, {"module": module, "body": body})

    def _source_stub(self, components: list[str]) -> str:
        """Plain module shell for the implementation side of a test."""

        info = _module_info(components)
        module = path_to_module_name("/".join(components)) or info.module(web=False)
        body = self._moduledoc("Module", module.rsplit(".", 1)[-1])
        return self._render(MODULE_TEMPLATE, {"module": module, "body": body})

    def _test_stub(self, components: list[str], kind: TargetKind) -> str:
        info = _module_info(components)
        module = path_to_module_name("/".join(_without_features(components))) or info.module(web=False)
        if not module.endswith("Test"):
            module += "Test"
        subject = module[: -len("Test")]

        if kind is TargetKind.FEATURE:
            directory = FEATURES_DIR
        else:
            directory = next((name for name in TEST_CASES if name in components[:-1]), None)

        case, imports, alias = "ExUnit.Case", "", True
        if directory is not None:
            case_name, imports, alias = TEST_CASES[directory]
            case = ".".join(word for word in (info.web, case_name) if word)

        aliases = ""
        if imports or alias:
            aliases = "\n\n" + imports.rstrip("\n")
            if alias:
                aliases += ("\n" if imports else "") + f"  alias {subject}"

        return self._render(TEST_TEMPLATE, {"module": module, "case": case, "aliases": aliases})

    def _task_stub(self, components: list[str]) -> str:
        stem, _ = split_filename(components[-1])
        words = [stem]
        for index in range(len(components) - 2):
            if components[index : index + 2] == ["mix", "tasks"]:
                words = [*components[index + 2 : -1], stem]
                break
        task_words = [to_pascal_case(word) for word in words]

        context = {
            "task_module": ".".join(task_words),
            "name": words[-1],
            "moduledoc": self._moduledoc("Mix task", task_words[-1]),
        }
        return self._render(TASK_TEMPLATE, context)


def generate_stub(path: str, kind: TargetKind, options: TemplateOptions | None = None) -> str:
    """Return the stub for ``path`` using ``options`` (defaults when omitted)."""

    return StubGenerator(options or TemplateOptions()).generate(path, kind)
