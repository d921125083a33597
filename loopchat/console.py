"""Small terminal helpers: clearing the screen and waiting for Enter."""

from __future__ import annotations

import sys
from typing import TextIO

CLEAR_SEQUENCE = "\033[2J\033[H"
PAUSE_PROMPT = "Нажмите Enter для продолжения..."


def clear_screen(out: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor home."""
    out = sys.stdout if out is None else out
    out.write(CLEAR_SEQUENCE)
    out.flush()


def pause_window(stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Prompt the user and wait until a line is entered."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    out.write(PAUSE_PROMPT)
    out.flush()
    stdin.readline()