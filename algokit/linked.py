"""Singly linked lists: building, merging and reversing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Values of the list starting at ``head``."""
    return list(head) if head is not None else []


def merge_sorted(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one, reusing their nodes.

    On equal values the node from the second list comes first.
    """
    sentinel = ListNode(0)
    tail = sentinel
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return sentinel.next


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous