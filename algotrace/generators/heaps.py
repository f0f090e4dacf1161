"""K largest elements with a bounded min-heap.

The heap is an explicit array; every push, pop and sift swap is its own
step so the heap property can be watched being restored.
"""

from __future__ import annotations

from algotrace.constants import EMPHASIS_STEP_DURATION, K_LARGEST_ELEMENTS, MAX_ARRAY_LENGTH
from algotrace.generators._base import (
    TraceBuilder,
    check_int,
    check_int_list,
    indices,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import HeapSnapshot
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

HEAP = "heap"
INPUT = "inputArray"

K_LARGEST_STYLES = frozenset(
    {"current", "processing", "compare", "swap", "active", "match", "invalid"}
)


class _MinHeapTracer:
    """Array-backed min-heap that records each structural change."""

    def __init__(self, trace: TraceBuilder, heap: HeapSnapshot, source: list[int]):
        self.trace = trace
        self.heap = heap
        self.source = source

    @property
    def elements(self) -> list[int]:
        return self.heap.elements

    def state(self) -> dict:
        self.heap.size = len(self.heap.elements)
        return {HEAP: self.heap, INPUT: self.source}

    def _input_highlight(self) -> list:
        i = self.heap.current_input_index
        return [indices("current", [i])] if i is not None else []

    def push(self, value: int, operation: Operation | None = None) -> None:
        self.elements.append(value)
        last = len(self.elements) - 1
        verb = "Insert" if operation is None else "Replace the old minimum: insert"
        self.trace.emit(
            StepType.HEAP_PUSH,
            f"{verb} {value} at heap index {last}",
            self.state(),
            {HEAP: [indices("processing", [last])], INPUT: self._input_highlight()},
            StepContext(operation=operation or Operation.WRITE, data_structure="heap"),
            {"value": value, "heapSize": len(self.elements)},
        )
        self._sift_up(last)

    def pop(self) -> int:
        removed = self.elements[0]
        last = self.elements.pop()
        if self.elements:
            self.elements[0] = last
        self.trace.emit(
            StepType.HEAP_POP,
            f"Remove the minimum {removed}"
            + (f"; move {last} to the root" if self.elements else ""),
            self.state(),
            {
                HEAP: [indices("processing", [0] if self.elements else [])],
                INPUT: self._input_highlight(),
            },
            StepContext(operation=Operation.WRITE, data_structure="heap"),
            {"removed": removed, "heapSize": len(self.elements)},
        )
        self._sift_down(0)
        return removed

    def _swap(self, a: int, b: int) -> None:
        self.elements[a], self.elements[b] = self.elements[b], self.elements[a]

    def _sift_up(self, idx: int) -> None:
        while idx > 0:
            parent = (idx - 1) // 2
            if self.elements[parent] <= self.elements[idx]:
                return
            self._swap(parent, idx)
            self.trace.emit(
                StepType.HEAP_SIFT_UP,
                f"{self.elements[parent]} < parent {self.elements[idx]}: "
                f"swap indices {idx} and {parent}",
                self.state(),
                {HEAP: [indices("swap", [parent, idx])], INPUT: self._input_highlight()},
                StepContext(operation=Operation.WRITE, data_structure="heap"),
                {"index": parent, "heapSize": len(self.elements)},
            )
            idx = parent

    def _sift_down(self, idx: int) -> None:
        n = len(self.elements)
        while True:
            smallest = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if child < n and self.elements[child] < self.elements[smallest]:
                    smallest = child
            if smallest == idx:
                return
            self._swap(idx, smallest)
            self.trace.emit(
                StepType.HEAP_SIFT_DOWN,
                f"Child {self.elements[idx]} < {self.elements[smallest]}: "
                f"swap indices {idx} and {smallest}",
                self.state(),
                {HEAP: [indices("swap", [idx, smallest])], INPUT: self._input_highlight()},
                StepContext(operation=Operation.WRITE, data_structure="heap"),
                {"index": smallest, "heapSize": n},
            )
            idx = smallest


@returns_empty_on_invalid_input
def generate_k_largest_steps(values: list[int], k: int) -> list[Step]:
    """The *k* largest entries of *values*, kept in a min-heap of size *k*."""
    arr = check_int_list(K_LARGEST_ELEMENTS, values, 1, MAX_ARRAY_LENGTH)
    check_int(K_LARGEST_ELEMENTS, "k", k, 1, len(arr))

    trace = TraceBuilder(
        K_LARGEST_ELEMENTS,
        {
            HEAP: (DataStructureKind.HEAP, "Min-Heap"),
            INPUT: (DataStructureKind.ARRAY, "Input Array"),
        },
        K_LARGEST_STYLES,
    )
    heap = HeapSnapshot(capacity=k, input_array=list(arr), k_value=k)
    tracer = _MinHeapTracer(trace, heap, arr)

    trace.emit(
        StepType.INITIALIZATION,
        f"Find the {k} largest of {len(arr)} element(s)",
        tracer.state(),
        variables={"k": k, "n": len(arr)},
    )
    trace.emit(
        StepType.HEAP_INITIALIZATION,
        f"Create an empty min-heap with capacity {k}; its root is always the smallest kept element",
        tracer.state(),
        context=StepContext(operation=Operation.WRITE, data_structure="heap"),
        variables={"k": k, "heapSize": 0},
    )

    for i, value in enumerate(arr):
        heap.current_input_index = i
        trace.emit(
            StepType.LOOP_START,
            f"Next input element: index {i}",
            tracer.state(),
            {INPUT: [indices("current", [i])]},
            StepContext(loop_type=LoopType.OUTER, iteration_number=i),
            {"i": i, "heapSize": len(heap.elements)},
        )
        trace.emit(
            StepType.COMPARISON,
            f"current = {value}",
            tracer.state(),
            {INPUT: [indices("current", [i])]},
            StepContext(operation=Operation.READ, iteration_number=i),
            {"i": i, "current": value, "heapSize": len(heap.elements)},
        )
        has_room = len(heap.elements) < k
        trace.emit(
            StepType.HEAP_SIZE_CHECK,
            f"Heap size {len(heap.elements)}/{k}: "
            + ("there is room, insert directly" if has_room else "heap is full"),
            tracer.state(),
            {
                HEAP: [indices("active", range(len(heap.elements)))],
                INPUT: [indices("current", [i])],
            },
            StepContext(operation=Operation.COMPARE, data_structure="heap"),
            {"i": i, "heapSize": len(heap.elements), "k": k},
        )
        if has_room:
            tracer.push(value)
            continue

        root = heap.elements[0]
        trace.emit(
            StepType.HEAP_COMPARE,
            f"Compare {value} with the heap minimum {root}",
            tracer.state(),
            {HEAP: [indices("compare", [0])], INPUT: [indices("compare", [i])]},
            StepContext(operation=Operation.COMPARE, data_structure="heap"),
            {"current": value, "heapMin": root},
        )
        if value > root:
            tracer.pop()
            tracer.push(value, Operation.REPLACE)
        else:
            trace.emit(
                StepType.HEAP_SKIP,
                f"{value} <= {root}: it cannot be among the {k} largest, skip it",
                tracer.state(),
                {HEAP: [indices("compare", [0])], INPUT: [indices("invalid", [i])]},
                StepContext(operation=Operation.COMPARE, data_structure="heap"),
                {"current": value, "heapMin": root},
            )

    heap.current_input_index = None
    heap.result = sorted(heap.elements, reverse=True)
    trace.emit(
        StepType.HEAP_RESULT_FOUND,
        f"The heap holds the {k} largest elements: {heap.result}",
        tracer.state(),
        {HEAP: [indices("match", range(len(heap.elements)))]},
        StepContext(operation=Operation.READ, data_structure="heap"),
        {"result": heap.result},
        duration=EMPHASIS_STEP_DURATION,
    )
    trace.emit(
        StepType.RETURN,
        f"Returning {heap.result} (largest first)",
        tracer.state(),
        {HEAP: [indices("match", range(len(heap.elements)))]},
        variables={"result": heap.result},
    )
    return trace.finish()
