"""Step model: one immutable snapshot of algorithm state per observable transition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from algotrace.constants import DEFAULT_STEP_DELAY, DEFAULT_STEP_DURATION
from algotrace.snapshot_types import (
    GraphSnapshot,
    HeapSnapshot,
    LinkedListSnapshot,
    RecursionTreeSnapshot,
    TreeSnapshot,
    serialize_value,
)


class StepType(str, Enum):
    """Classification of a step; closed per algorithm, open across the system."""

    # shared
    INITIALIZATION = "initialization"
    LOOP_START = "loop_start"
    LOOP_CONDITION = "loop_condition"
    COMPARISON = "comparison"
    ASSIGNMENT = "assignment"
    RETURN = "return"
    RETURN_FOUND = "return_found"
    RETURN_NOT_FOUND = "return_not_found"

    # sorting
    SWAP = "swap"
    NO_SWAP = "no_swap"
    PASS_COMPLETE = "pass_complete"

    # pointers
    POINTER_INITIALIZATION = "pointer_initialization"
    POINTER_MOVE_LEFT = "pointer_move_left"
    POINTER_MOVE_RIGHT = "pointer_move_right"
    POINTER_UPDATE = "pointer_update"
    LINK_REVERSAL = "link_reversal"
    NODE_TRAVERSAL = "node_traversal"

    # dynamic programming
    DP_TABLE_INITIALIZATION = "dp_table_initialization"
    DP_AMOUNT_PROCESSING = "dp_amount_processing"
    DP_COIN_CONSIDERATION = "dp_coin_consideration"
    DP_SUBPROBLEM_LOOKUP = "dp_subproblem_lookup"
    DP_COMPARISON = "dp_comparison"
    DP_TABLE_UPDATE = "dp_table_update"
    DP_OPTIMAL_SOLUTION_FOUND = "dp_optimal_solution_found"
    DP_PATH_RECONSTRUCTION = "dp_path_reconstruction"
    DP_NO_SOLUTION = "dp_no_solution"

    # graphs
    GRAPH_NODE_VISIT = "graph_node_visit"
    GRAPH_EDGE_EXPLORE = "graph_edge_explore"
    GRAPH_CYCLE_DETECTED = "graph_cycle_detected"
    GRAPH_BACKTRACK = "graph_backtrack"

    # recursion
    RECURSIVE_CALL = "recursive_call"
    RECURSIVE_RETURN = "recursive_return"
    BASE_CASE_CHECK = "base_case_check"
    BASE_CASE_REACHED = "base_case_reached"
    CALL_STACK_PUSH = "call_stack_push"
    CALL_STACK_POP = "call_stack_pop"

    # heaps
    HEAP_INITIALIZATION = "heap_initialization"
    HEAP_SIZE_CHECK = "heap_size_check"
    HEAP_PUSH = "heap_push"
    HEAP_POP = "heap_pop"
    HEAP_COMPARE = "heap_compare"
    HEAP_SIFT_UP = "heap_sift_up"
    HEAP_SIFT_DOWN = "heap_sift_down"
    HEAP_SKIP = "heap_skip"
    HEAP_RESULT_FOUND = "heap_result_found"

    # stacks
    CHARACTER_ACCESS = "character_access"
    CHARACTER_CHECK = "character_check"
    STACK_PUSH = "stack_push"
    STACK_PEEK = "stack_peek"
    STACK_POP = "stack_pop"
    VALIDATION_SUCCESS = "validation_success"
    VALIDATION_FAILURE = "validation_failure"

    # trees and queues
    TREE_TRAVERSAL = "tree_traversal"
    QUEUE_ENQUEUE = "queue_enqueue"
    QUEUE_DEQUEUE = "queue_dequeue"
    QUEUE_PEEK = "queue_peek"
    LEVEL_COMPLETE = "level_complete"

    # greedy
    GREEDY_INSIGHT = "greedy_insight"
    GREEDY_SELECTION = "greedy_selection"
    PAIR_COMPARISON = "pair_comparison"
    FORMULA_DERIVATION = "formula_derivation"
    DECISION_TREE = "decision_tree"
    COST_CALCULATION = "cost_calculation"
    ELEMENT_REMOVAL = "element_removal"
    OPTIMALITY_PROOF = "optimality_proof"

    # strings
    STRING_COMPARISON = "string_comparison"
    STRING_ITERATION = "string_iteration"
    HASH_MAP_CREATION = "hash_map_creation"
    FREQUENCY_COUNT = "frequency_count"
    HASH_MAP_COMPARISON = "hash_map_comparison"


class DataStructureKind(str, Enum):
    ARRAY = "array"
    LINKED_LIST = "linked_list"
    TREE = "tree"
    GRAPH = "graph"
    HEAP = "heap"
    STACK = "stack"
    CALL_STACK = "call_stack"
    HASH_MAP = "hash_map"
    QUEUE = "queue"


class HighlightKind(str, Enum):
    INDICES = "indices"
    IDS = "ids"


class LoopType(str, Enum):
    OUTER = "outer"
    INNER = "inner"
    WHILE = "while"
    RECURSIVE = "recursive"


class Operation(str, Enum):
    READ = "read"
    WRITE = "write"
    COMPARE = "compare"
    REPLACE = "replace"


# Payload type accepted for each variant.
_PAYLOAD_TYPES: dict[DataStructureKind, tuple[type, ...]] = {
    DataStructureKind.ARRAY: (list,),
    DataStructureKind.LINKED_LIST: (LinkedListSnapshot,),
    DataStructureKind.TREE: (TreeSnapshot, RecursionTreeSnapshot),
    DataStructureKind.GRAPH: (GraphSnapshot,),
    DataStructureKind.HEAP: (HeapSnapshot,),
    DataStructureKind.STACK: (list,),
    DataStructureKind.CALL_STACK: (list,),
    DataStructureKind.HASH_MAP: (dict,),
    DataStructureKind.QUEUE: (list,),
}


@dataclass(frozen=True)
class DataStructureState:
    """Tagged snapshot of one logical data structure."""

    kind: DataStructureKind
    data: Any
    label: str | None = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.data, expected):
            names = ", ".join(t.__name__ for t in expected)
            raise TypeError(
                f"{self.kind.value} payload must be {names}, got {type(self.data).__name__}"
            )

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"kind": self.kind.value, "data": serialize_value(self.data)}
        if self.label is not None:
            d["metadata"] = {"label": self.label}
        return d


@dataclass(frozen=True)
class HighlightInfo:
    """A style-tagged subset of indices or node ids within one snapshot."""

    kind: HighlightKind
    values: list
    style: str
    color: str | None = None
    intensity: float | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "kind": self.kind.value,
            "values": list(self.values),
            "style": self.style,
        }
        if self.color is not None:
            d["color"] = self.color
        if self.intensity is not None:
            d["intensity"] = self.intensity
        return d


@dataclass(frozen=True)
class StepContext:
    """Attributes that only disambiguate line resolution; never drive semantics."""

    loop_type: LoopType | None = None
    operation: Operation | None = None
    data_structure: str | None = None
    pass_number: int | None = None
    iteration_number: int | None = None
    character_index: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {}
        if self.loop_type is not None:
            d["loopType"] = self.loop_type.value
        if self.operation is not None:
            d["operation"] = self.operation.value
        if self.data_structure is not None:
            d["dataStructure"] = self.data_structure
        if self.pass_number is not None:
            d["passNumber"] = self.pass_number
        if self.iteration_number is not None:
            d["iterationNumber"] = self.iteration_number
        if self.character_index is not None:
            d["characterIndex"] = self.character_index
        d.update(serialize_value(self.extra))
        return d


@dataclass(frozen=True)
class Timing:
    duration: int = DEFAULT_STEP_DURATION
    delay: int = DEFAULT_STEP_DELAY

    def to_dict(self) -> dict:
        return {"duration": self.duration, "delay": self.delay}


@dataclass(frozen=True)
class Step:
    """One immutable snapshot in a trace."""

    id: int
    step_type: StepType
    data_structures: dict[str, DataStructureState]
    highlights: dict[str, list[HighlightInfo]]
    explanation: str
    step_context: StepContext | None = None
    variables: dict[str, Any] = field(default_factory=dict)
    timing: Timing = field(default_factory=Timing)

    def data(self, name: str) -> Any:
        """Payload of the named data structure."""
        return self.data_structures[name].data

    def styles(self, name: str) -> list[str]:
        return [h.style for h in self.highlights.get(name, [])]

    def highlighted(self, name: str, style: str) -> list:
        """All values highlighted with *style* on structure *name*, in order."""
        return [v for h in self.highlights.get(name, []) if h.style == style for v in h.values]

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "id": self.id,
            "stepType": self.step_type.value,
            "dataStructures": {k: v.to_dict() for k, v in self.data_structures.items()},
            "highlights": {k: [h.to_dict() for h in hs] for k, hs in self.highlights.items()},
            "explanation": self.explanation,
            "variables": serialize_value(self.variables),
            "timing": self.timing.to_dict(),
        }
        if self.step_context is not None:
            d["stepContext"] = self.step_context.to_dict()
        return d
