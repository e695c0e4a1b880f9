import logging

from PyQt5.QtCore import QObject, pyqtSignal

from core.global_ctrl import GlobalController
from linklist.sl_model import LinkedListModel
from linklist.sl_sort import insertion_sort
from linklist.sl_view import LinkedListTraceView

logger = logging.getLogger(__name__)


class LinkedListController(QObject):
    """
    Controller wires model -> sort -> view.
    Trace snapshots travel over ``stateTraced``; the view is connected to it
    only while tracing is enabled, so the sort never sees the renderer.
    """

    stateTraced = pyqtSignal(str, object, object, object)
    sortFinished = pyqtSignal(list)

    def __init__(self, global_ctrl: GlobalController, stream=None):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.model = LinkedListModel()
        self.view = LinkedListTraceView(global_ctrl, stream)
        self._view_wired = False

        self.global_ctrl.traceChanged.connect(self._on_trace_changed)
        self._on_trace_changed(self.global_ctrl.trace_enabled)

    # ---------- Trace wiring ----------

    def _on_trace_changed(self, enabled):
        if enabled and not self._view_wired:
            self.stateTraced.connect(self.view.print_state)
            self._view_wired = True
            logger.debug("trace view connected")
        elif not enabled and self._view_wired:
            self.stateTraced.disconnect(self.view.print_state)
            self._view_wired = False
            logger.debug("trace view disconnected")

    # ---------- Operations ----------

    def create_from_iterable(self, values):
        self.model.create_from_iterable(values)

    def push_back(self, value):
        return self.model.push_back(value)

    def sort(self):
        hook = self.stateTraced.emit if self.global_ctrl.trace_enabled else None
        logger.info("sorting %d nodes (trace=%s)", len(self.model), hook is not None)
        insertion_sort(self.model, on_step=hook)
        values = self.model.values()
        logger.info("sorted: %s", values)
        self.sortFinished.emit(values)
        return values

    def format_values(self):
        return self.model.format_values()
