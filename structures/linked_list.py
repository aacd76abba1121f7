"""
Singly linked list of integers with cycle injection and Floyd's cycle detection.

Instances are not thread-safe. Share one between threads only behind an external lock.
"""

import logging
from collections.abc import Iterable, Iterator

from structures.rendering import render_list

logger = logging.getLogger(__name__)


class ListNode:
    """Node of a singly linked list. Two nodes are equal only if they are the same node."""

    def __init__(self, value: int):
        self.value = value
        self.next: ListNode | None = None

    def __repr__(self):
        return f"Node({self.value})"

    def __eq__(self, other):
        if not isinstance(other, ListNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


class CycleLinkedList:
    """Singly linked list that can be turned into a rho shape for cycle detection exercises."""

    def __init__(self):
        self.head: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "CycleLinkedList":
        """Build a list by appending `values` in order."""
        linked_list = cls()
        for value in values:
            linked_list.add(value)
        return linked_list

    def add(self, value: int) -> ListNode:
        """Add a value to the end of the list and return the new node."""
        new_node = ListNode(value)
        if self.head is None:
            self.head = new_node
            return new_node

        current = self.head
        while current.next is not None:
            current = current.next
        current.next = new_node
        return new_node

    def create_cycle(self, position: int) -> None:
        """
        Point the last node back at the node with zero-based index `position`.

        The loop then holds (node count - position) nodes. Nothing happens for an empty list, a negative
        position, or a position at or past the last node. Calling this on a list that already has a cycle
        never terminates.
        """
        if self.head is None or position < 0:
            logger.debug("create_cycle(%d) ignored: empty list or negative position", position)
            return

        cycle_node = None
        current = self.head
        index = 0
        while current.next is not None:
            if index == position:
                cycle_node = current
            current = current.next
            index += 1

        if cycle_node is None:
            logger.debug("create_cycle(%d) ignored: last index is %d", position, index)
            return

        current.next = cycle_node
        logger.debug("Linked node %r at index %d back to %r at index %d", current, index, cycle_node, position)

    def has_cycle(self) -> bool:
        """Floyd's tortoise and hare: O(n) time, O(1) extra space."""
        if self.head is None or self.head.next is None:
            return False

        slow = self.head  # tortoise, one step
        fast = self.head  # hare, two steps
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def find_cycle_start(self) -> ListNode | None:
        """
        Return the node where the cycle begins, or None for an acyclic list.

        If the head is mu steps away from the cycle entry and the cycle holds C nodes, the pointers meet
        mu mod C steps before the entry (going round the loop). Walking one pointer from the head and the other
        from the meeting point at equal speed therefore brings both to the entry after mu steps.
        """
        if self.head is None or self.head.next is None:
            return None

        slow = self.head
        fast = self.head
        meeting = None
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                meeting = fast
                break

        if meeting is None:
            return None

        slow = self.head
        while slow is not meeting:
            slow = slow.next
            meeting = meeting.next
        return slow

    def values(self, limit: int) -> Iterator[int]:
        """Yield at most `limit` values from the head. Safe on cyclic lists."""
        current = self.head
        count = 0
        while current is not None and count < limit:
            yield current.value
            current = current.next
            count += 1

    def display(self, max_display: int = 20) -> str:
        """Render the list, stopping after `max_display` nodes."""
        return render_list(self.head, max_display)

    def __repr__(self):
        return f"CycleLinkedList({self.display()})"
