"""Kinds of alternate files the resolver knows how to reach."""

from __future__ import annotations

from enum import Enum

__all__ = ["TargetKind"]


class TargetKind(str, Enum):
    """Alternate file categories; values are the command line vocabulary."""

    TEST = "test"
    CONTROLLER = "controller"
    MODEL = "model"
    VIEW = "view"
    HTML = "html"
    LIVE = "live"
    COMPONENT = "component"
    LIVE_COMPONENT = "liveComponent"
    CHANNEL = "channel"
    JSON = "json"
    TASK = "task"
    FEATURE = "feature"

    @classmethod
    def parse(cls, value: str) -> "TargetKind":
        """Return the kind named by ``value``.

        Matching ignores case, dashes and underscores so ``live_component``
        and ``LiveComponent`` both resolve to :attr:`LIVE_COMPONENT`.
        """

        wanted = value.replace("-", "").replace("_", "").lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        choices = ", ".join(kind.value for kind in cls)
        raise ValueError(f"unknown kind '{value}'. Expected one of: {choices}")

    @property
    def is_web(self) -> bool:
        """Whether the kind lives inside the ``*_web`` module."""

        return self in _WEB_KINDS

    def __str__(self) -> str:
        return self.value


_WEB_KINDS = frozenset(
    {
        TargetKind.CONTROLLER,
        TargetKind.VIEW,
        TargetKind.HTML,
        TargetKind.LIVE,
        TargetKind.COMPONENT,
        TargetKind.LIVE_COMPONENT,
        TargetKind.CHANNEL,
        TargetKind.JSON,
    }
)
