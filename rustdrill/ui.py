"""Terminal styling and status messages."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import TextIO

_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _colors_enabled(stream: TextIO | None = None) -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return _isatty(stream if stream is not None else sys.stdout)


def _style(text: object, code: str) -> str:
    if not _colors_enabled():
        return str(text)
    return f"\x1b[{code}m{text}{_RESET}"


def red(text: object) -> str:
    """Render text in red when colours are enabled."""
    return _style(text, "31")


def green(text: object) -> str:
    """Render text in green when colours are enabled."""
    return _style(text, "32")


def blue(text: object) -> str:
    """Render text in blue when colours are enabled."""
    return _style(text, "34")


def bold(text: object) -> str:
    """Render text in bold when colours are enabled."""
    return _style(text, "1")


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{red(symbol)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{green(symbol)} {green(message)}")


class _Spinner:
    """A steady-ticking spinner drawn on stderr while it is a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str, stream: TextIO | None = None, interval: float = 0.1):
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> "_Spinner":
        if self._thread is None and not self._stop.is_set() and _isatty(self._stream):
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            self._stream.write(f"\r\x1b[2K{frame} {self.message}")
            self._stream.flush()
            if self._stop.wait(self._interval):
                break

    def finish_and_clear(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            self._stream.write("\r\x1b[2K")
            self._stream.flush()

    def __enter__(self) -> "_Spinner":
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()