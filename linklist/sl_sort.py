import logging
from typing import Callable, NamedTuple, Optional

from linklist.sl_model import LinkedListModel, ListNode

logger = logging.getLogger(__name__)

TITLE_BEFORE = "BEFORE place"
TITLE_UNLINK = "AFTER unlink"
TITLE_AT_HEAD = "AFTER insert (at head)"
TITLE_AT_SPOT = "AFTER insert at spot"

TRACE_TITLES = (TITLE_BEFORE, TITLE_UNLINK, TITLE_AT_HEAD, TITLE_AT_SPOT)


class PointerRoles(NamedTuple):
    """Non-owning references annotating one trace snapshot."""

    head: Optional[ListNode] = None
    prev: Optional[ListNode] = None  # end of sorted prefix
    curr: Optional[ListNode] = None  # node being placed
    next: Optional[ListNode] = None  # saved successor of curr
    spot: Optional[ListNode] = None  # insert after this; None => head


# on_step(title, head, roles, isolated)
StepHook = Callable[[str, Optional[ListNode], PointerRoles, Optional[ListNode]], None]


def _log_step(event, node, model):
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s %d: %s", event, node.data, model.format_values())


def insertion_sort(model: Optional[LinkedListModel], on_step: Optional[StepHook] = None):
    """
    Stable in-place insertion sort. Only the model's rewiring primitives touch
    links; no node is created, copied or dropped.

    ``on_step`` receives a role snapshot before each placement and after each
    unlink / reinsert. It is never called when None.

    Time: O(n^2), space: O(1), stable.
    """
    if model is None or model.head is None or model.head.next is None:
        return

    prev = model.head
    curr = prev.next

    while curr is not None:
        _log_step("before placing", curr, model)
        # read before any rewiring, remove/insert overwrite curr.next
        nxt = curr.next

        spot = model.find_insertion_spot(curr.data, boundary=curr)

        if on_step is not None:
            # no S marker when curr stays where it is
            shown_spot = None if spot is prev else spot
            on_step(TITLE_BEFORE, model.head, PointerRoles(model.head, prev, curr, nxt, shown_spot), None)

        if spot is prev:
            prev = curr
        else:
            # prev stays: the node after it was the one moved
            model.remove_after(prev)
            _log_step("unlinked", curr, model)
            if on_step is not None:
                on_step(TITLE_UNLINK, model.head, PointerRoles(model.head, prev, curr, nxt, spot), curr)

            if spot is None:
                model.prepend(curr)
                title = TITLE_AT_HEAD
            else:
                model.insert_after(spot, curr)
                title = TITLE_AT_SPOT
            _log_step("inserted", curr, model)
            if on_step is not None:
                on_step(title, model.head, PointerRoles(model.head, prev, curr, nxt, spot), None)

        curr = nxt
