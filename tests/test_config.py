from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from altfile.config import (
    Configuration,
    EditorSettings,
    FileExtensions,
    PathFormats,
    TemplateOptions,
    default_config_locations,
    editor_from_environment,
)
from altfile.errors import ConfigurationError


def test_defaults():
    config = Configuration()
    assert config.file_extensions == FileExtensions(source="ex", test="exs")
    assert config.path_formats.lib == "lib"
    assert config.path_formats.web == "_web"
    assert config.editor.full_command("lib/app.ex") == ["zed", "-g", "lib/app.ex"]
    assert config.templates == TemplateOptions(include_use=True, include_module_doc=False)


def test_load_accepts_camel_case_keys(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "fileExtensions": {"source": "exs"},
                "pathFormats": {"lib": "src"},
                "editor": {"command": "code", "arguments": ["--goto"]},
                "templates": {"includeModuleDoc": True},
            }
        ),
        encoding="utf-8",
    )
    config = Configuration.load(path)
    assert config.file_extensions.source == "exs"
    assert config.file_extensions.test == "exs"
    assert config.path_formats == PathFormats(lib="src")
    assert config.editor == EditorSettings(command="code", arguments=["--goto"])
    assert config.templates.include_module_doc is True


def test_load_accepts_snake_case_keys(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"templates": {"include_use": False}}), encoding="utf-8")
    assert Configuration.load(path).templates.include_use is False


@pytest.mark.parametrize(
    "payload",
    [
        b'{"unknown": 1}',
        b'{"fileExtensions": {"source": ""}}',
        b"not json",
        b'{"editor": {"command": "\xff\xfe"}}',
        b"\xff",
    ],
)
def test_load_rejects_invalid_files(tmp_path: Path, payload: bytes):
    path = tmp_path / "config.json"
    path.write_bytes(payload)
    with pytest.raises(ConfigurationError):
        Configuration.load(path)


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        Configuration.load(tmp_path / "absent.json")


def test_save_round_trip(tmp_path: Path):
    config = Configuration(editor=EditorSettings(command="nvim", arguments=[]))
    path = config.save(tmp_path / "nested" / "config.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["editor"] == {"arguments": [], "command": "nvim"}
    assert "fileExtensions" in data
    assert Configuration.load(path) == config


def test_default_locations_order(tmp_path: Path):
    locations = default_config_locations(cwd=tmp_path / "project", home=tmp_path / "home")
    assert locations == [
        tmp_path / "project" / ".altfile.json",
        tmp_path / "home" / ".altfile.json",
        tmp_path / "home" / ".config" / "altfile" / "config.json",
    ]


def test_from_default_locations_prefers_project_file(tmp_path: Path):
    project = tmp_path / "project"
    home = tmp_path / "home"
    Configuration(editor=EditorSettings(command="vim")).save(project / ".altfile.json")
    Configuration(editor=EditorSettings(command="emacs")).save(home / ".altfile.json")

    config = Configuration.from_default_locations(cwd=project, home=home)
    assert config.editor.command == "vim"


def test_from_default_locations_skips_broken_files(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir()
    (project / ".altfile.json").write_text("{broken", encoding="utf-8")
    Configuration(editor=EditorSettings(command="emacs")).save(home / ".config" / "altfile" / "config.json")

    with caplog.at_level(logging.WARNING, logger="altfile.config"):
        config = Configuration.from_default_locations(cwd=project, home=home)

    assert config.editor.command == "emacs"
    assert "Failed to load config from" in caplog.text


def test_from_default_locations_skips_undecodable_files(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    project = tmp_path / "project"
    project.mkdir()
    (project / ".altfile.json").write_bytes(b'{"editor": {"command": "\xff\xfe"}}')

    with caplog.at_level(logging.WARNING, logger="altfile.config"):
        config = Configuration.from_default_locations(cwd=project, home=tmp_path / "home")

    assert config == Configuration()
    assert "Failed to load config from" in caplog.text


def test_from_default_locations_falls_back_to_defaults(tmp_path: Path):
    assert Configuration.from_default_locations(cwd=tmp_path, home=tmp_path) == Configuration()


def test_models_are_frozen():
    with pytest.raises(ValidationError):
        Configuration().editor.command = "vim"  # type: ignore[misc]


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"EDITOR": "vim", "VISUAL": "code"}, "vim"),
        ({"VISUAL": "code"}, "code"),
        ({"EDITOR": "  "}, None),
        ({}, None),
    ],
)
def test_editor_from_environment(environ, expected):
    settings = editor_from_environment(environ)
    if expected is None:
        assert settings is None
    else:
        assert settings == EditorSettings(command=expected, arguments=[])
