"""Single-keypress reader for the terminal frontend.

Maps arrow keys, WASD and the command letters to action strings without
requiring Enter.  Works on macOS / Linux (tty+termios) and Windows
(msvcrt).
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "toggle",
    "\r": "toggle",
    "\n": "toggle",
    "c": "deselect",
    "x": "shuffle",
    "n": "hint",
    "r": "new",
    "y": "yes",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string ("" if unmapped)."""
    return KEY_MAP.get(ch.lower() if ch.isalpha() else ch, "")


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values: "up", "down", "left", "right", "toggle",
    "deselect", "shuffle", "hint", "new", "yes", "quit", or "" for an
    unrecognised key.
    """
    ch = _getch()

    # Arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve(ch)
