"""Create alternate files on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["CreateOutcome", "CreateStatus", "create_file"]


LOGGER = logging.getLogger(__name__)


class CreateStatus(str, Enum):
    """What :func:`create_file` did with the target path."""

    CREATED = "created"
    CREATED_EMPTY = "created_empty"
    EXISTS = "exists"


@dataclass(frozen=True, slots=True)
class CreateOutcome:
    path: Path
    status: CreateStatus

    @property
    def message(self) -> str:
        if self.status is CreateStatus.CREATED:
            return f"Created file: {self.path}"
        if self.status is CreateStatus.CREATED_EMPTY:
            return f"Created empty file: {self.path}"
        return f"File already exists: {self.path}"


def create_file(
    path: str | Path,
    content: str = "",
    *,
    base_dir: str | Path | None = None,
    encoding: str = "utf-8",
) -> CreateOutcome:
    """Write ``content`` to ``path`` unless something already lives there.

    Missing parent directories are created. A relative ``path`` is resolved
    against ``base_dir`` (the working directory by default) while the
    returned outcome keeps the path as given.
    """

    display = Path(path)
    target = display if base_dir is None else Path(base_dir) / display
    if target.exists():
        LOGGER.debug("Not overwriting existing file %s", target)
        return CreateOutcome(display, CreateStatus.EXISTS)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding=encoding)
    LOGGER.debug("Wrote %d characters to %s", len(content), target)

    status = CreateStatus.CREATED if content else CreateStatus.CREATED_EMPTY
    return CreateOutcome(display, status)
