from __future__ import annotations

import subprocess

from altfile.config import EditorSettings
from altfile.opener import open_file, resolve_editor


class RecordingLauncher:
    def __init__(self, error: OSError | None = None) -> None:
        self.calls: list[tuple[list[str], dict]] = []
        self.error = error

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.error is not None:
            raise self.error
        return object()


def test_open_file_launches_editor_without_waiting():
    launcher = RecordingLauncher()
    result = open_file("lib/app.ex", EditorSettings(command="zed", arguments=["-g"]), launcher=launcher)

    assert result.success
    assert result.error is None
    command, kwargs = launcher.calls[0]
    assert command == ["zed", "-g", "lib/app.ex"]
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["start_new_session"] is True


def test_open_file_reports_launch_errors():
    launcher = RecordingLauncher(FileNotFoundError(2, "No such file or directory"))
    result = open_file("lib/app.ex", EditorSettings(command="missing-editor", arguments=[]), launcher=launcher)
    assert not result.success
    assert result.error == "No such file or directory"


def test_open_file_requires_a_command():
    launcher = RecordingLauncher()
    result = open_file("lib/app.ex", EditorSettings(command="", arguments=[]), launcher=launcher)
    assert not result.success
    assert result.error == "No editor command specified"
    assert launcher.calls == []


def test_resolve_editor_precedence():
    flag = EditorSettings(command="vim", arguments=[])
    configured = EditorSettings(command="code", arguments=["-g"])
    assert resolve_editor(flag, None, configured) is flag
    assert resolve_editor(None, None, configured) is configured
    assert resolve_editor(None, None) == EditorSettings(command="zed", arguments=[])
