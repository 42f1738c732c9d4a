"""Linked-list problems: merging, reversing, reordering and arithmetic."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from algoplay.listnode import ListNode
from algoplay.stack import Stack


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _values(head: Optional[ListNode]) -> list[int]:
    return [node.val for node in _nodes(head)]


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists into one ascending list.

    Nodes are copied until one list runs out; the rest of the other list
    is then linked on as it is.
    """
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next = ListNode(first.val)
            first = first.next
        else:
            tail.next = ListNode(second.val)
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge ascending lists by pairwise divide and conquer."""
    if not lists:
        return None

    def merge_range(left: int, right: int) -> Optional[ListNode]:
        if left == right:
            return lists[right]
        mid = (left + right) // 2
        return merge_two_lists(merge_range(left, mid), merge_range(mid + 1, right))

    return merge_range(0, len(lists) - 1)


def merge_k_lists_sequential(
    lists: Sequence[Optional[ListNode]],
) -> Optional[ListNode]:
    """Merge ascending lists one after another into a running result."""
    result: Optional[ListNode] = None
    for current in lists:
        result = current if result is None else merge_two_lists(result, current)
    return result


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every complete group of ``k`` nodes.

    The reversed groups are new nodes; any trailing incomplete group keeps
    its original nodes. A list shorter than ``k`` is returned unchanged.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    nodes = list(_nodes(head))
    full = len(nodes) // k * k
    if full == 0:
        return head

    reversed_values: list[int] = []
    for start in range(0, full, k):
        stack = Stack(k)
        for node in nodes[start:start + k]:
            stack.push(node.val)
        while len(stack):
            reversed_values.append(stack.pop())

    new_head = ListNode.from_values(reversed_values)
    *_, tail = _nodes(new_head)
    tail.next = nodes[full] if full < len(nodes) else None
    return new_head


def reorder_list(head: Optional[ListNode]) -> None:
    """Rewrite values in place as first, last, second, second-last, ..."""
    values = _values(head)
    front, back = 0, len(values) - 1
    for position, node in enumerate(_nodes(head)):
        if front > back:
            break
        if position % 2 == 1:
            node.val = values[back]
            back -= 1
        else:
            node.val = values[front]
            front += 1


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Return a new list without the ``n``-th node from the end.

    If ``n`` exceeds the length, None is returned.
    """
    values = _values(head)
    remove_index = len(values) - n
    if remove_index < 0:
        return None
    return ListNode.from_values(
        value for index, value in enumerate(values) if index != remove_index
    )


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return a new list rotated ``k`` places to the right."""
    if k == 0 or head is None:
        return head
    values = _values(head)
    length = len(values)
    start = (length - k % length) % length
    return ListNode.from_values(values[start:] + values[:start])


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap the values of each adjacent pair in place and return the head."""
    nodes = _nodes(head)
    for first in nodes:
        second = next(nodes, None)
        if second is None:
            break
        first.val, second.val = second.val, first.val
    return head


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    if l1 is None and l2 is None:
        return None
    dummy = ListNode()
    tail = dummy
    carry = False
    while l1 is not None or l2 is not None or carry:
        total = 0
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        if carry:
            total += 1
        carry = total >= 10
        if carry:
            total -= 10
        tail.next = ListNode(total)
        tail = tail.next
    return dummy.next