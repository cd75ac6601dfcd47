"""Interactive terminal menu used to pick a target kind."""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Sequence, TextIO

__all__ = ["Key", "KindMenu", "decode_key", "raw_terminal"]


ESC = 27
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
HIGHLIGHT = "\x1b[7m"
RESET = "\x1b[0m"

HELP_LINE = "Navigate: ↑/↓ or j/k | Select: Enter/Space | Cancel: Esc | Shortcut: 1-9"


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    ESCAPE = "escape"
    NUMBER = "number"
    OTHER = "other"


_ARROWS = {ord("A"): Key.UP, ord("B"): Key.DOWN, ord("C"): Key.RIGHT, ord("D"): Key.LEFT}


def decode_key(data: bytes) -> tuple[Key, int | None]:
    """Translate raw terminal input into a :class:`Key`.

    ``NUMBER`` carries the digit pressed (1-9); ``j`` and ``k`` map to
    ``DOWN`` and ``UP``.
    """

    if not data:
        return Key.OTHER, None

    first = data[0]
    if first == ESC:
        if len(data) >= 3 and data[1] == ord("["):
            return _ARROWS.get(data[2], Key.OTHER), None
        return Key.ESCAPE, None
    if first in (10, 13):
        return Key.ENTER, None
    if first == ord(" "):
        return Key.SPACE, None
    if first == ord("j"):
        return Key.DOWN, None
    if first == ord("k"):
        return Key.UP, None
    if ord("1") <= first <= ord("9"):
        return Key.NUMBER, first - ord("0")
    return Key.OTHER, None


@contextmanager
def raw_terminal(stream: TextIO, output: TextIO) -> Iterator[None]:
    """Put ``stream`` in cbreak mode for the duration of the block.

    The original terminal attributes and the cursor are restored on every
    exit, including exceptions and ``KeyboardInterrupt``.
    """

    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        output.write(HIDE_CURSOR)
        output.flush()
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        output.write(SHOW_CURSOR)
        output.flush()


@dataclass(slots=True)
class KindMenu:
    """Vertical list of choices navigated with the keyboard."""

    items: Sequence[str]
    prompt: str = "Select an option:"

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("menu requires at least one item")

    def render(self, selected: int) -> str:
        lines = [self.prompt, ""]
        for index, item in enumerate(self.items):
            if index == selected:
                lines.append(f"{HIGHLIGHT} → {item}{RESET}")
            else:
                lines.append(f"   {item}")
        lines.extend(["", HELP_LINE])
        return "\n".join(lines) + "\n"

    def run(self, read_key: Callable[[], bytes], output: TextIO) -> int | None:
        """Drive the menu until a choice is made; ``None`` means cancelled."""

        selected = 0
        count = len(self.items)
        while True:
            output.write(CLEAR_SCREEN)
            output.write(self.render(selected))
            output.flush()

            data = read_key()
            if not data:
                return None
            key, number = decode_key(data)
            if key is Key.UP:
                selected = (selected - 1) % count
            elif key is Key.DOWN:
                selected = (selected + 1) % count
            elif key in (Key.ENTER, Key.SPACE):
                return selected
            elif key is Key.ESCAPE:
                return None
            elif key is Key.NUMBER and number is not None and number <= count:
                return number - 1

    def show(self, stdin: TextIO, stdout: TextIO) -> int | None:
        """Run the menu on a real terminal."""

        fd = stdin.fileno()
        with raw_terminal(stdin, stdout):
            choice = self.run(lambda: os.read(fd, 3), stdout)
        stdout.write("\n")
        return choice
