"""Open files in the user's editor."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

from .config import EditorSettings

__all__ = ["OpenResult", "open_file", "resolve_editor"]


LOGGER = logging.getLogger(__name__)

Launcher = Callable[..., object]


@dataclass(frozen=True, slots=True)
class OpenResult:
    success: bool
    error: str | None = None


def resolve_editor(*candidates: EditorSettings | None) -> EditorSettings:
    """Return the first configured editor, falling back to ``zed``."""

    for candidate in candidates:
        if candidate is not None and candidate.command:
            return candidate
    return EditorSettings(command="zed", arguments=[])


def open_file(
    file_path: str,
    settings: EditorSettings,
    *,
    launcher: Launcher = subprocess.Popen,
) -> OpenResult:
    """Start the editor on ``file_path`` without waiting for it to exit."""

    command: Sequence[str] = settings.full_command(file_path)
    if not settings.command:
        return OpenResult(False, "No editor command specified")

    LOGGER.debug("Launching editor: %s", " ".join(command))
    try:
        launcher(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        LOGGER.debug("Editor launch failed", exc_info=True)
        return OpenResult(False, exc.strerror or str(exc))
    return OpenResult(True)
