"""Locate the loop in a singly linked chain of nodes, with and without extra storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["Node", "Loop", "find_loop_hash", "find_loop_race", "race_meeting"]


@dataclass(eq=False)
class Node:
    """One link of a chain; ``next`` may point back to an earlier node."""

    data: Any = 0
    next: Optional[Node] = field(default=None, repr=False)


@dataclass(frozen=True)
class Loop:
    """A loop in a chain.

    ``origin`` is the node whose ``next`` closes the loop and ``destination``
    is the node it points back to, the first node of the loop.
    """

    origin: Node
    destination: Node


def find_loop_hash(head: Node) -> Optional[Loop]:
    """Find the loop by remembering every node visited; None if the chain ends."""
    seen: set[Node] = set()
    prev: Optional[Node] = None
    node = head
    while node not in seen and node.next is not None:
        seen.add(node)
        prev = node
        node = node.next
    if node.next is None or prev is None:
        return None
    return Loop(origin=prev, destination=node)


def race_meeting(head: Node) -> Optional[tuple[int, Node]]:
    """Race a one-step and a two-step pointer from ``head``.

    Return the number of moves made and the node where they met, or None if
    the fast pointer runs off the end of the chain.
    """
    slow: Node = head
    fast: Optional[Node] = head
    moves = 0
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
        moves += 1
        if slow is fast:
            return moves, slow
    return None


def find_loop_race(head: Node) -> Optional[Loop]:
    """Find the loop with two pointers and no extra storage; None if the chain ends."""
    meeting = race_meeting(head)
    if meeting is None:
        return None
    _, fast = meeting
    slow = head
    while slow is not fast:
        assert slow.next is not None and fast.next is not None
        slow = slow.next
        fast = fast.next
    start = slow
    origin = start
    while origin.next is not start:
        assert origin.next is not None
        origin = origin.next
    return Loop(origin=origin, destination=start)