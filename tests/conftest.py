"""
Pytest configuration and fixtures for the linked list sort tests.

Provides reusable fixtures for:
- Building list models from plain values
- Trace views writing into an in-memory buffer (plain or colored)
- Controllers wired to such a buffer
"""

import io

import pytest

from core.global_ctrl import GlobalController
from linklist.sl_ctrl import LinkedListController
from linklist.sl_model import LinkedListModel
from linklist.sl_view import LinkedListTraceView


@pytest.fixture
def make_model():
    """
    Fixture that returns a function building a model from values.

    Usage:
        model = make_model([3, 1, 2])
    """
    def _make(values):
        model = LinkedListModel()
        model.create_from_iterable(values)
        return model

    return _make


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def plain_view(buffer):
    return LinkedListTraceView(GlobalController(color_mode="never"), buffer)


@pytest.fixture
def color_view(buffer):
    return LinkedListTraceView(GlobalController(color_mode="always"), buffer)


@pytest.fixture
def trace_controller(buffer):
    """Controller with tracing on and color off, writing into ``buffer``."""
    global_ctrl = GlobalController(trace_enabled=True, color_mode="never")
    return LinkedListController(global_ctrl, buffer)
