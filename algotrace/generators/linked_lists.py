"""In-place reversal of a singly linked list."""

from __future__ import annotations

from algotrace.constants import (
    EMPHASIS_STEP_DURATION,
    MAX_LINKED_LIST_LENGTH,
    REVERSE_LINKED_LIST,
)
from algotrace.generators._base import (
    TraceBuilder,
    check_int_list,
    ids,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import LinkedListSnapshot, ListNode, ReversingMeta
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

LINKED_LIST = "linkedList"

REVERSE_LIST_STYLES = frozenset({"previous", "current", "next", "processing", "match"})


def _pointer_highlights(meta: ReversingMeta) -> dict:
    return {
        LINKED_LIST: [
            ids("previous", [meta.prev] if meta.prev else []),
            ids("current", [meta.current] if meta.current else []),
            ids("next", [meta.next] if meta.next else []),
        ]
    }


def _pointer_variables(lst: LinkedListSnapshot) -> dict:
    meta = lst.reversing_meta

    def value(node_id: str | None):
        return lst.node(node_id).value if node_id else None

    return {"prev": value(meta.prev), "current": value(meta.current), "next": value(meta.next)}


@returns_empty_on_invalid_input
def generate_reverse_linked_list_steps(values: list[int]) -> list[Step]:
    """Reverse the list built from *values* by re-pointing each ``next`` link."""
    items = check_int_list(REVERSE_LINKED_LIST, values, 1, MAX_LINKED_LIST_LENGTH)
    node_ids = [f"n{i}" for i in range(len(items))]
    lst = LinkedListSnapshot(
        nodes=[
            ListNode(id=node_id, value=value, next=node_ids[i + 1] if i + 1 < len(items) else None)
            for i, (node_id, value) in enumerate(zip(node_ids, items))
        ],
        head=node_ids[0],
    )
    meta = lst.reversing_meta

    trace = TraceBuilder(
        REVERSE_LINKED_LIST,
        {LINKED_LIST: (DataStructureKind.LINKED_LIST, "Linked List")},
        REVERSE_LIST_STYLES,
    )
    trace.emit(
        StepType.INITIALIZATION,
        f"Reverse the list {' -> '.join(map(str, items))} -> null",
        {LINKED_LIST: lst},
        {LINKED_LIST: [ids("match", [lst.head])]},
        variables={"length": len(items)},
    )

    meta.prev, meta.current = None, lst.head
    trace.emit(
        StepType.POINTER_INITIALIZATION,
        "prev = null, current = head",
        {LINKED_LIST: lst},
        _pointer_highlights(meta),
        StepContext(operation=Operation.WRITE),
        _pointer_variables(lst),
    )

    iteration = 0
    while meta.current is not None:
        iteration += 1
        current = lst.node(meta.current)
        trace.emit(
            StepType.LOOP_CONDITION,
            f"current ({current.value}) is not null, keep going",
            {LINKED_LIST: lst},
            _pointer_highlights(meta),
            StepContext(loop_type=LoopType.WHILE, iteration_number=iteration),
            _pointer_variables(lst),
        )

        meta.next = current.next
        trace.emit(
            StepType.POINTER_UPDATE,
            "next = current.next"
            + (f" ({lst.node(meta.next).value})" if meta.next else " (null)"),
            {LINKED_LIST: lst},
            _pointer_highlights(meta),
            StepContext(operation=Operation.READ, iteration_number=iteration),
            _pointer_variables(lst),
        )

        current.next = meta.prev
        lst.reversed_links.append(current.id)
        highlights = _pointer_highlights(meta)
        highlights[LINKED_LIST].append(ids("processing", [current.id]))
        trace.emit(
            StepType.LINK_REVERSAL,
            f"current.next = prev: {current.value} now points to "
            + (str(lst.node(meta.prev).value) if meta.prev else "null"),
            {LINKED_LIST: lst},
            highlights,
            StepContext(operation=Operation.WRITE, iteration_number=iteration),
            _pointer_variables(lst),
        )

        meta.prev, meta.current = current.id, meta.next
        trace.emit(
            StepType.NODE_TRAVERSAL,
            "prev = current, current = next",
            {LINKED_LIST: lst},
            _pointer_highlights(meta),
            StepContext(operation=Operation.WRITE, iteration_number=iteration),
            _pointer_variables(lst),
        )

    trace.emit(
        StepType.LOOP_CONDITION,
        "current is null, every link has been reversed",
        {LINKED_LIST: lst},
        _pointer_highlights(meta),
        StepContext(loop_type=LoopType.WHILE, iteration_number=iteration + 1),
        _pointer_variables(lst),
    )

    lst.head = meta.prev
    meta.next = None
    reversed_values = []
    cursor = lst.head
    while cursor is not None:
        node = lst.node(cursor)
        reversed_values.append(node.value)
        cursor = node.next
    trace.emit(
        StepType.RETURN,
        f"Return prev as the new head: {' -> '.join(map(str, reversed_values))} -> null",
        {LINKED_LIST: lst},
        {LINKED_LIST: [ids("match", [n.id for n in lst.nodes])]},
        variables={"head": lst.node(lst.head).value, "result": reversed_values},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
