import re

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove every ``ESC [ ... m`` sequence, leaving only the visible text."""
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


class Term:
    """
    Small factory for ANSI escape codes.
    Every helper returns an empty string when color is off, so callers can
    build lines the same way in both modes.
    """

    def __init__(self, color=None, stream=None):
        if color is None:
            color = self.probe_tty(stream)
        self.color = bool(color)

    @staticmethod
    def probe_tty(stream) -> bool:
        if stream is None:
            return False
        isatty = getattr(stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (OSError, ValueError):
            # closed or detached streams
            return False

    def _code(self, seq):
        return f"\x1b[{seq}m" if self.color else ""

    def reset(self):
        return self._code("0")

    def bold(self):
        return self._code("1")

    def dim(self):
        return self._code("2")

    def fg(self, color: int):
        return self._code(f"38;5;{color}")

    def bg(self, color: int):
        return self._code(f"48;5;{color}")

    def paint(self, text, color: int, bold=False, dim=False):
        """Wrap ``text`` in a foreground color plus optional weight, then reset."""
        prefix = self.fg(color)
        if bold:
            prefix += self.bold()
        if dim:
            prefix += self.dim()
        return prefix + text + self.reset()
