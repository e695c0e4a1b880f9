from PyQt5.QtCore import QObject, pyqtSignal

from core.term import Term

COLOR_MODES = ("auto", "always", "never")


class GlobalController(QObject):
    """
    Holds the runtime switches shared by every controller and view
    (trace on/off, color policy) and broadcasts changes so that the
    renderer can be wired or unwired without touching the sort.
    """

    traceChanged = pyqtSignal(bool)
    colorModeChanged = pyqtSignal(str)

    def __init__(self, trace_enabled=False, color_mode="auto"):
        super().__init__()
        self._trace_enabled = bool(trace_enabled)
        self._color_mode = self._validate_mode(color_mode)

    @property
    def trace_enabled(self) -> bool:
        return self._trace_enabled

    @property
    def color_mode(self) -> str:
        return self._color_mode

    def set_trace(self, enabled: bool):
        enabled = bool(enabled)
        if enabled != self._trace_enabled:
            self._trace_enabled = enabled
            self.traceChanged.emit(enabled)

    def set_color_mode(self, mode: str):
        mode = self._validate_mode(mode)
        if mode != self._color_mode:
            self._color_mode = mode
            self.colorModeChanged.emit(mode)

    def resolve_color(self, stream) -> bool:
        """
        Turn the color policy into a yes/no for a concrete output stream.
        'auto' defers to the TTY probe on that stream.
        """
        if self._color_mode == "always":
            return True
        if self._color_mode == "never":
            return False
        return Term.probe_tty(stream)

    @staticmethod
    def _validate_mode(mode):
        if mode not in COLOR_MODES:
            raise ValueError(f"Unknown color mode: {mode!r}")
        return mode
