import itertools
from typing import Dict, Iterator, List, Optional


class ListNode:
    """One cell of the list: an integer payload and a forward link."""

    __slots__ = ("id", "data", "next")

    def __init__(self, node_id: int, data: int):
        self.id = node_id
        self.data = data
        self.next: Optional["ListNode"] = None

    def __repr__(self):
        return f"ListNode(id={self.id}, data={self.data})"


class LinkedListModel:
    """
    Singly linked list model. Nodes are real objects linked by ``next`` so
    that the sort can rewire them in place; the model keeps no Qt objects.

    The rewiring primitives (prepend / insert_after / remove_after /
    find_insertion_spot) are the only code that changes links.
    """

    def __init__(self):
        self._id_iter = itertools.count()
        self.head: Optional[ListNode] = None

    def _new_node(self, value) -> ListNode:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Node payload must be an int, got {type(value).__name__}")
        return ListNode(next(self._id_iter), value)

    # ---------- Building (caller side) ----------

    def clear(self):
        self.head = None

    def create_from_iterable(self, values):
        self.clear()
        tail = None
        for value in values:
            node = self._new_node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def push_back(self, value) -> ListNode:
        node = self._new_node(value)
        if self.head is None:
            self.head = node
            return node
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node
        return node

    # ---------- Rewiring primitives ----------

    def prepend(self, node: ListNode):
        """Make an isolated ``node`` the new head."""
        node.next = self.head
        self.head = node

    def insert_after(self, prev: Optional[ListNode], node: ListNode):
        """Link an isolated ``node`` right after ``prev``."""
        if prev is None:
            raise ValueError("Cannot insert after a null node")
        # keep the tail reachable before cutting prev's link
        node.next = prev.next
        prev.next = node

    def remove_after(self, prev: Optional[ListNode]) -> Optional[ListNode]:
        """
        Unlink and return the node following ``prev`` (the head when ``prev``
        is None). The returned node is isolated: its ``next`` is cleared.
        Returns None when there is nothing to remove.
        """
        if prev is None:
            removed = self.head
            if removed is not None:
                self.head = removed.next
                removed.next = None
            return removed

        removed = prev.next
        if removed is not None:
            prev.next = removed.next
            removed.next = None
        return removed

    def find_insertion_spot(self, value: int, boundary: Optional[ListNode]) -> Optional[ListNode]:
        """
        Return the node after which ``value`` belongs, scanning only up to
        ``boundary`` (compared by identity). None means "insert at head".
        Equal payloads are passed over, so a later equal node lands after the
        earlier ones and their original order is kept.
        """
        prev = None
        current = self.head
        while current is not boundary and current is not None and current.data <= value:
            prev = current
            current = current.next
        return prev

    # ---------- Inspection ----------

    def __iter__(self) -> Iterator[ListNode]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __len__(self):
        return sum(1 for _ in self)

    @property
    def length(self) -> int:
        return len(self)

    def node_at(self, index: int) -> ListNode:
        if index < 0:
            raise IndexError("Index out of range")
        for i, node in enumerate(self):
            if i == index:
                return node
        raise IndexError("Index out of range")

    def values(self) -> List[int]:
        return [node.data for node in self]

    def snapshot(self) -> List[Dict]:
        return [{"id": node.id, "value": node.data} for node in self]

    def format_values(self) -> str:
        return " -> ".join(str(value) for value in self.values())
