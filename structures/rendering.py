"""
Text rendering for the linked list and tree exercises.

These helpers only read `value`/`next` and `value`/`left`/`right` attributes, so they work on any node shaped
like `ListNode` or `TreeNode`.
"""

from typing import Any

EMPTY_LIST = "Empty list"
CYCLE_MARKER = "... (possibly cyclic)"

LAST_BRANCH = "└── "
MIDDLE_BRANCH = "├── "
LAST_INDENT = "    "
MIDDLE_INDENT = "│   "


def render_list(head: Any, max_display: int = 20) -> str:
    """
    Render a chain of nodes as `1 -> 2 -> null`.

    At most `max_display` nodes are visited, so a cyclic chain ends with the cycle marker instead of looping.
    """
    if head is None:
        return EMPTY_LIST

    parts = []
    current = head
    count = 0
    while current is not None and count < max_display:
        parts.append(f"{current.value} -> ")
        current = current.next
        count += 1

    tail = CYCLE_MARKER if count >= max_display else "null"
    return "".join(parts) + tail


def render_tree(root: Any) -> list[str]:
    """
    Render a binary tree with box-drawing connectors, one line per node, in pre-order.

    With two children the left one is drawn first as a middle branch; a lone child is always the last branch.
    """
    lines = ["Tree Structure:"]
    if root is None:
        return lines

    # (node, indent, last) in pre-order; right pushed first so left pops first
    stack = [(root, "", True)]
    while stack:
        node, indent, last = stack.pop()
        lines.append(f"{indent}{LAST_BRANCH if last else MIDDLE_BRANCH}{node.value}")
        child_indent = indent + (LAST_INDENT if last else MIDDLE_INDENT)

        if node.left is not None and node.right is not None:
            stack.append((node.right, child_indent, True))
            stack.append((node.left, child_indent, False))
        elif node.left is not None:
            stack.append((node.left, child_indent, True))
        elif node.right is not None:
            stack.append((node.right, child_indent, True))
    return lines
