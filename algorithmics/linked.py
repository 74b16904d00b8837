"""Singly linked lists and the operations defined on them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional, TypeVar


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list."""

    val: int = 0
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


_Node = TypeVar("_Node", ListNode, RandomNode)


def _iter_nodes(head: Optional[_Node]) -> Iterator[_Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    return [node.val for node in _iter_nodes(head)]


def partition_list(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Return a new list with every value below ``x`` ahead of the rest.

    Relative order inside both halves is kept; the input is left untouched.
    """
    values = list_to_values(head)
    smaller = [value for value in values if value < x]
    larger = [value for value in values if value >= x]
    return list_from_values(smaller + larger)


def reverse_between(head: Optional[ListNode], left: int, right: int) -> Optional[ListNode]:
    """Reverse, in place, the nodes at 1-based positions ``left`` to ``right``."""
    if left < 1 or right < left:
        raise ValueError(f"invalid range {left}..{right}")
    if head is None or left == right:
        return head
    length = sum(1 for _ in _iter_nodes(head))
    if right > length:
        raise ValueError(f"position {right} is past the end of a list of {length}")

    dummy = ListNode(0, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    current = prev.next
    for _ in range(right - left):
        moved = current.next
        current.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes carry random pointers."""
    copies = {node: RandomNode(node.val) for node in _iter_nodes(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split a list into ``k`` new lists whose lengths differ by at most one.

    Longer parts come first; parts beyond the list's length are None.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    values = list_to_values(head)
    size, extra = divmod(len(values), k)
    remaining = iter(values)
    return [
        list_from_values(islice(remaining, size + (1 if index < extra else 0)))
        for index in range(k)
    ]