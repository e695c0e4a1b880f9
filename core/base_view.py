import logging
import sys

from PyQt5.QtCore import QObject, pyqtSignal

from core.term import Term, visible_len

logger = logging.getLogger(__name__)

C_BORDER = 244  # medium gray
C_TITLE = 255  # white


class BaseTraceView(QObject):
    """
    Base class for structure-specific terminal views, providing:
    - the output stream and the Term escape factory bound to it
    - bordered box chrome whose width math ignores escape codes
    - frame writing that never lets an output error reach the caller
    """

    frameWritten = pyqtSignal(str)

    def __init__(self, global_ctrl, stream=None):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.stream = stream if stream is not None else sys.stdout
        self.term = Term(color=global_ctrl.resolve_color(self.stream))
        global_ctrl.colorModeChanged.connect(self._on_color_mode_changed)

    def _on_color_mode_changed(self, _mode):
        self.term = Term(color=self.global_ctrl.resolve_color(self.stream))

    # ---------- Box chrome ----------

    def _edge(self, left, right, width):
        T = self.term
        return T.fg(C_BORDER) + left + "─" * (width + 2) + right + T.reset()

    def box_top(self, width):
        return self._edge("┌", "┐", width)

    def box_bottom(self, width):
        return self._edge("└", "┘", width)

    def box_divider(self, width):
        return self._edge("├", "┤", width)

    def box_mid(self, text, width):
        """Pad ``text`` to ``width`` visible columns and frame it with side walls."""
        T = self.term
        pad = " " * max(0, width - visible_len(text))
        return (
            T.fg(C_BORDER) + "│ " + T.reset()
            + text + pad
            + T.fg(C_BORDER) + " │" + T.reset()
        )

    def box_title(self, title):
        return self.term.paint(title, C_TITLE, bold=True)

    def build_box(self, title, sections):
        """
        sections: list of line groups, separated by dividers.
        The box is as wide as the widest visible line (title included).
        """
        title_line = self.box_title(title)
        width = max(
            [visible_len(title_line)]
            + [visible_len(line) for group in sections for line in group]
        )

        lines = [self.box_top(width), self.box_mid(title_line, width)]
        for group in sections:
            lines.append(self.box_divider(width))
            lines.extend(self.box_mid(line, width) for line in group)
        lines.append(self.box_bottom(width))
        return lines

    # ---------- Output ----------

    def write_frame(self, title, lines):
        """
        Write one frame preceded by a blank line.
        Trace output is advisory: a failing stream ends the frame early and
        is only logged.
        """
        try:
            self.stream.write("\n")
            for line in lines:
                self.stream.write(line + "\n")
                self.stream.flush()
        except (OSError, ValueError) as exc:
            # ValueError: closed or detached stream
            logger.debug("trace frame %r not written: %s", title, exc)
            return False
        self.frameWritten.emit(title)
        return True
