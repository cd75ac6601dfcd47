"""Configuration models shared by the resolver, stub generator and CLI."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError

__all__ = [
    "CONFIG_FILENAME",
    "Configuration",
    "EditorSettings",
    "FileExtensions",
    "PathFormats",
    "TemplateOptions",
    "default_config_locations",
    "editor_from_environment",
]


LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = ".altfile.json"


class _Settings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FileExtensions(_Settings):
    """Extensions used for source and test files, without the leading dot."""

    source: str = Field(default="ex", min_length=1, description="Extension of implementation files.")
    test: str = Field(default="exs", min_length=1, description="Extension of test files.")


class PathFormats(_Settings):
    """Directory names the path conventions are built from."""

    lib: str = Field(default="lib", min_length=1, description="Root directory for source files.")
    test: str = Field(default="test", min_length=1, description="Root directory for test files.")
    web: str = Field(default="_web", min_length=1, description="Suffix marking the web module.")
    controllers: str = Field(default="controllers", min_length=1)
    views: str = Field(default="views", min_length=1)
    live: str = Field(default="live", min_length=1)
    templates: str = Field(default="templates", min_length=1)


class EditorSettings(_Settings):
    """Command used to open files."""

    command: str = Field(default="zed", description="Executable launched to open a file.")
    arguments: List[str] = Field(default_factory=lambda: ["-g"], description="Arguments placed before the path.")

    def full_command(self, file_path: str) -> list[str]:
        """Return the argv list that opens ``file_path``."""

        return [self.command, *self.arguments, file_path]


class TemplateOptions(_Settings):
    """Switches for the boilerplate emitted into generated stubs."""

    include_use: bool = Field(default=True, description="Emit the kind specific use/import lines.")
    include_module_doc: bool = Field(default=False, description="Emit a @moduledoc block.")


class Configuration(_Settings):
    """Top level configuration, usually read from ``.altfile.json``."""

    file_extensions: FileExtensions = Field(default_factory=FileExtensions)
    path_formats: PathFormats = Field(default_factory=PathFormats)
    editor: EditorSettings = Field(default_factory=EditorSettings)
    templates: TemplateOptions = Field(default_factory=TemplateOptions)

    @classmethod
    def load(cls, path: str | Path) -> "Configuration":
        """Read and validate the JSON configuration stored at ``path``."""

        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError(f"cannot read configuration {path}: {exc}") from exc
        except (UnicodeDecodeError, ValidationError) as exc:
            raise ConfigurationError(f"invalid configuration {path}: {exc}") from exc

    def save(self, path: str | Path) -> Path:
        """Write the configuration to ``path`` as pretty, key sorted JSON."""

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.model_dump(mode="json", by_alias=True)
        path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        return path

    @classmethod
    def from_default_locations(
        cls,
        *,
        cwd: str | Path | None = None,
        home: str | Path | None = None,
    ) -> "Configuration":
        """Load the first readable configuration from the standard locations.

        Files that exist but fail to load are logged and skipped. When no file
        loads the defaults are returned.
        """

        for candidate in default_config_locations(cwd=cwd, home=home):
            if not candidate.is_file():
                continue
            try:
                config = cls.load(candidate)
            except ConfigurationError as exc:
                LOGGER.warning("Failed to load config from %s: %s", candidate, exc)
                continue
            LOGGER.debug("Loaded configuration from %s", candidate)
            return config

        LOGGER.debug("No configuration file found, using defaults")
        return cls()


def default_config_locations(
    *,
    cwd: str | Path | None = None,
    home: str | Path | None = None,
) -> list[Path]:
    """Return the configuration search path in priority order."""

    cwd_path = Path(cwd) if cwd is not None else Path.cwd()
    home_path = Path(home) if home is not None else Path.home()
    return [
        cwd_path / CONFIG_FILENAME,
        home_path / CONFIG_FILENAME,
        home_path / ".config" / "altfile" / "config.json",
    ]


def editor_from_environment(environ: Mapping[str, str] | None = None) -> EditorSettings | None:
    """Return editor settings from ``$EDITOR`` or ``$VISUAL`` when set."""

    env = os.environ if environ is None else environ
    for variable in ("EDITOR", "VISUAL"):
        command = env.get(variable, "").strip()
        if command:
            return EditorSettings(command=command, arguments=[])
    return None
