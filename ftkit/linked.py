"""A minimal singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell holding ``content`` and a link to the next cell."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node.content
            node = node.next


def lst_new(content: Any) -> Node:
    """Return a new node holding ``content`` with no successor."""
    return Node(content)


def lst_add_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` in front of ``head`` and return the new head.

    A missing ``node`` leaves the list as it is. When the list is empty,
    ``node`` becomes the head with its own link unchanged.
    """
    if node is None:
        return head
    if head is not None:
        node.next = head
    return node