"""Singly linked lists and the puzzles played on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


@dataclass(eq=False)
class RandomNode:
    """Linked-list node that also points at an arbitrary node of the same list."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


def _nodes(head: Any) -> Iterator[Any]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _nodes(head)]


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies = {node: RandomNode(node.val) for node in _nodes(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever comes back to a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def reorder_list(head: Optional[ListNode]) -> None:
    """Relink ``L0, L1, ..., Ln`` in place as ``L0, Ln, L1, Ln-1, ...``."""
    if head is None:
        return
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while second is not None:
        after_first, after_second = first.next, second.next
        first.next = second
        second.next = after_first
        first, second = after_first, after_second


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be positive")
    dummy = ListNode(0, head)
    left, right = dummy, head
    for _ in range(n):
        if right is None:
            raise ValueError("list is shorter than n")
        right = right.next
    while right is not None:
        left = left.next
        right = right.next
    left.next = left.next.next
    return dummy.next


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    previous = None
    while head is not None:
        following = head.next
        head.next = previous
        previous, head = head, following
    return previous


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of ascending lists by merging them in pairs."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        pending = [
            merge_two_lists(a, b) for a, b in zip_longest(pending[0::2], pending[1::2])
        ]
    return pending[0]


def _kth(node: Optional[ListNode], k: int) -> Optional[ListNode]:
    while node is not None and k > 0:
        node = node.next
        k -= 1
    return node


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of ``k`` nodes, leaving a short tail as it is."""
    if k < 1:
        raise ValueError("group size must be positive")
    dummy = ListNode(0, head)
    group_prev = dummy
    while (kth := _kth(group_prev, k)) is not None:
        group_next = kth.next
        previous, current = group_next, group_prev.next
        while current is not group_next:
            following = current.next
            current.next = previous
            previous, current = current, following
        group_start = group_prev.next
        group_prev.next = kth
        group_prev = group_start
    return dummy.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node, the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow