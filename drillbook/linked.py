"""Singly linked list puzzles: digit addition, removal, merging and pair swaps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link ``values`` into a list and return its head, or None when empty."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode:
    """Add two numbers stored as digit lists, least significant digit first.

    The result is a new list in the same form; two empty lists give ``0``.
    """
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while True:
        if l1 is not None:
            carry += l1.val
            l1 = l1.next
        if l2 is not None:
            carry += l2.val
            l2 = l2.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
        if l1 is None and l2 is None and carry == 0:
            return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the new head."""
    dummy = ListNode(0, head)
    lead: ListNode | None = dummy
    for _ in range(n + 1):
        if lead is None or n < 1:
            raise ValueError(f"list has no node {n} from the end")
        lead = lead.next
    trail = dummy
    while lead is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; on ties ``l1`` comes first."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge sorted lists by merging neighbours pairwise, round after round."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        merged = [
            merge_two_lists(pending[i], pending[i + 1])
            for i in range(0, len(pending) - 1, 2)
        ]
        if len(pending) % 2:
            merged.append(pending[-1])
        pending = merged
    return pending[0]


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next