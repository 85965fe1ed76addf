"""Terminal Output Formatting Package"""

import itertools
import os
import sys
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    CYAN = '\033[36m'


def _supports_color(stream=None) -> bool:
    """NO_COLOR wins over FORCE_COLOR; otherwise color only on a terminal."""
    stream = stream or sys.stdout
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return hasattr(stream, 'isatty') and stream.isatty()


def _supports_unicode(stream=None) -> bool:
    """Whether the stream encoding can represent the status glyphs."""
    encoding = getattr(stream or sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '\u2713\u2717\u26a0'.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}")


def print_info(message: str) -> None:
    print(info(message))


STATUS_COLORS = {
    'added': Colors.GREEN,
    'modified': Colors.BLUE,
    'deleted': Colors.RED,
}


def colorize_status(status: str) -> str:
    """Color a file status label (added/modified/deleted)."""
    color = STATUS_COLORS.get(status)
    if not color:
        return status
    return _colorize(status, color)


class Spinner:
    """Shows a label while a slow call runs. Animated only on a terminal."""
    FRAMES_UNICODE = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'
    FRAMES_ASCII = '-\\|/'
    INTERVAL = 0.08

    def __init__(self, label: str = '', stream=None):
        self.label = label
        self.stream = stream or sys.stdout
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def animated(self) -> bool:
        return hasattr(self.stream, 'isatty') and self.stream.isatty()

    def _run(self):
        for tick in itertools.count():
            if self._done.is_set():
                break
            frame = self._frames[tick % len(self._frames)]
            self.stream.write(f"\r\033[K{frame} {self.label}")
            self.stream.flush()
            self._done.wait(self.INTERVAL)

    def __enter__(self):
        if not self.animated:
            if self.label:
                print(info(self.label), file=self.stream)
            return self
        self._done.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def __exit__(self, *exc):
        self._done.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            self.stream.write("\r\033[K")
            self.stream.flush()
        return False


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_info",
    "colorize_status", "Spinner", "STATUS_COLORS",
]
