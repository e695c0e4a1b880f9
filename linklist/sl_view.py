from typing import List, Optional

from core.base_view import BaseTraceView
from core.term import visible_len
from linklist.sl_model import ListNode
from linklist.sl_sort import PointerRoles

# Palette (256-color safe)
C_HEAD = 51  # bright cyan
C_PREV = 226  # bright yellow
C_CURR = 196  # bright red
C_NEXT = 213  # pink/magenta
C_SPOT = 46  # bright green
C_TEXT = 252  # light gray

ROLE_COLORS = {
    "H": C_HEAD,
    "P": C_PREV,
    "C": C_CURR,
    "N": C_NEXT,
    "S": C_SPOT,
}

ROLE_NAMES = (
    ("H", "head"),
    ("P", "prev"),
    ("C", "curr"),
    ("N", "next"),
    ("S", "spot"),
)

INDENT = "  "


def role_color(node, roles: PointerRoles) -> int:
    """Primary color of a node: first matching role in C, S, P, N, H order."""
    if node is None:
        return C_TEXT
    if node is roles.curr:
        return C_CURR
    if node is roles.spot:
        return C_SPOT
    if node is roles.prev:
        return C_PREV
    if node is roles.next:
        return C_NEXT
    if node is roles.head:
        return C_HEAD
    return C_TEXT


def role_letters(node, roles: PointerRoles) -> List[str]:
    if node is None:
        return []
    letters = []
    if node is roles.head:
        letters.append("H")
    if node is roles.prev:
        letters.append("P")
    if node is roles.curr:
        letters.append("C")
    if node is roles.next:
        letters.append("N")
    if node is roles.spot:
        letters.append("S")
    return letters


class LinkedListTraceView(BaseTraceView):
    """
    Terminal view of the insertion sort. Each frame shows the list, the role
    letters centered under their nodes, the isolated node when one is
    detached, and a legend.
    """

    def role_label(self, node, roles: PointerRoles) -> str:
        letters = role_letters(node, roles)
        if not letters:
            return " "
        T = self.term
        slash = T.fg(C_TEXT) + "/" + T.reset()
        return slash.join(T.paint(letter, ROLE_COLORS[letter], bold=True) for letter in letters)

    def build_legend(self) -> str:
        T = self.term
        parts = []
        for i, (letter, name) in enumerate(ROLE_NAMES):
            suffix = "" if i == len(ROLE_NAMES) - 1 else " "
            parts.append(
                T.paint(letter, ROLE_COLORS[letter], bold=True)
                + T.dim() + "=" + name + suffix + T.reset()
            )
        return "".join(parts)

    def isolated_line(self, node: ListNode) -> str:
        T = self.term
        return (
            T.paint("C", C_CURR, bold=True)
            + T.dim() + " (isolated): " + T.reset()
            + T.paint(f"[{node.data}]", C_CURR, bold=True)
        )

    def list_lines(self, head: Optional[ListNode], roles: PointerRoles):
        """
        Build the list line and the aligned label line.
        Returns (line1, line2).
        """
        order = []
        tokens = []
        node = head
        while node is not None:
            order.append(node)
            token = f"[{node.data}]"
            node = node.next
            if node is not None:
                token += " -> "
            tokens.append(token)

        if not tokens:
            order.append(None)
            tokens.append("(empty)")

        T = self.term
        line1 = INDENT
        for node, token in zip(order, tokens):
            line1 += T.paint(token, role_color(node, roles), bold=True)

        line2 = INDENT
        for node, token in zip(order, tokens):
            if node is None:
                continue
            label = self.role_label(node, roles)
            label_len = visible_len(label)

            # center the label under the "[v]" box, not the whole token
            center = (len(str(node.data)) + 2) // 2
            half = label_len // 2
            pad_left = center - half if center >= half else 0
            pad_right = max(0, len(token) - pad_left - label_len)

            line2 += " " * pad_left + label + " " * pad_right

        return line1, line2

    def render_state(self, title, head, roles: PointerRoles, isolated=None) -> List[str]:
        line1, line2 = self.list_lines(head, roles)
        body = [line1, line2]
        if isolated is not None:
            body.append(self.isolated_line(isolated))
        return self.build_box(title, [body, [self.build_legend()]])

    def print_state(self, title, head, roles: PointerRoles, isolated=None):
        return self.write_frame(title, self.render_state(title, head, roles, isolated))
