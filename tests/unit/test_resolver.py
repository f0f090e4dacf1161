"""Tests for the line mapping registry and resolver."""

import logging

import pytest

from algotrace.line_mapping import parse_line_mapping, span
from algotrace.resolver import LineResolver, MissReason, candidate_keys
from algotrace.trace_types import LoopType, Operation, Step, StepContext, StepType


def _resolver(**tables) -> LineResolver:
    resolver = LineResolver()
    for algorithm_id, raw in tables.items():
        resolver.register_algorithm(algorithm_id, parse_line_mapping(raw))
    return resolver


CONTEXTUAL = {
    "comparison": {"javascript": [7], "python": [7]},
    "comparison_outer": {"javascript": [4], "python": [4]},
    "comparison_compare": {"javascript": [8], "python": [8]},
    "comparison_array": {"javascript": [9], "python": [9]},
}


class TestCandidateKeys:
    def test_bare_key_without_context(self):
        assert candidate_keys("swap", None) == ["swap"]

    def test_precedence_order(self):
        ctx = StepContext(loop_type=LoopType.OUTER, operation=Operation.COMPARE, data_structure="array")
        assert candidate_keys("comparison", ctx) == [
            "comparison_outer",
            "comparison_compare",
            "comparison_array",
            "comparison",
        ]

    def test_unset_dimensions_are_skipped(self):
        ctx = StepContext(data_structure="heap", pass_number=2)
        assert candidate_keys("heap_push", ctx) == ["heap_push_heap", "heap_push"]


class TestResolve:
    def test_range_expands(self):
        resolver = _resolver(demo={"comparison": {"python": {"start": 4, "end": 6}}})
        assert resolver.get_highlighted_lines("demo", "comparison", "python") == [4, 5, 6]

    def test_range_primary_line(self):
        resolver = LineResolver()
        resolver.register_algorithm("demo", {"swap": {"go": span(9, 11, primary=10)}})
        assert resolver.get_primary_line("demo", "swap", "go") == 10

    def test_loop_type_beats_bare_key(self):
        resolver = _resolver(demo=CONTEXTUAL)
        ctx = StepContext(loop_type=LoopType.OUTER)
        assert resolver.get_highlighted_lines("demo", "comparison", "javascript", ctx) == [4]

    def test_loop_type_beats_operation_and_data_structure(self):
        resolver = _resolver(demo=CONTEXTUAL)
        ctx = StepContext(loop_type=LoopType.OUTER, operation=Operation.COMPARE, data_structure="array")
        assert resolver.resolve("demo", "comparison", "python", ctx).key == "comparison_outer"

    def test_operation_beats_data_structure(self):
        resolver = _resolver(demo=CONTEXTUAL)
        ctx = StepContext(operation=Operation.COMPARE, data_structure="array")
        assert resolver.get_highlighted_lines("demo", "comparison", "python", ctx) == [8]

    def test_falls_back_to_bare_key(self):
        resolver = _resolver(demo=CONTEXTUAL)
        ctx = StepContext(loop_type=LoopType.INNER)
        result = resolver.resolve("demo", "comparison", "python", ctx)
        assert result.key == "comparison"
        assert result.lines == [7]

    def test_accepts_step_type_enum(self):
        resolver = _resolver(demo=CONTEXTUAL)
        assert resolver.get_highlighted_lines("demo", StepType.COMPARISON, "python") == [7]

    def test_resolve_step_uses_step_context(self):
        resolver = _resolver(demo=CONTEXTUAL)
        step = Step(
            id=0,
            step_type=StepType.COMPARISON,
            data_structures={},
            highlights={},
            explanation="",
            step_context=StepContext(loop_type=LoopType.OUTER),
        )
        assert resolver.resolve_step("demo", step, "python").lines == [4]


class TestGracefulMiss:
    def test_unregistered_algorithm(self, caplog):
        resolver = LineResolver()
        with caplog.at_level(logging.WARNING, logger="algotrace.resolver"):
            lines = resolver.get_highlighted_lines("unregistered-id", "initialization", "javascript")
        assert lines == []
        assert "unregistered-id" in caplog.text

    def test_unmapped_step(self):
        resolver = _resolver(demo=CONTEXTUAL)
        result = resolver.resolve("demo", "swap", "python")
        assert result.miss == MissReason.UNMAPPED_STEP
        assert result.lines == []
        assert result.primary is None

    def test_unmapped_language(self):
        resolver = _resolver(demo=CONTEXTUAL)
        result = resolver.resolve("demo", "comparison", "rust")
        assert result.miss == MissReason.UNMAPPED_LANGUAGE
        assert not result.resolved

    def test_primary_line_of_miss_is_none(self):
        assert LineResolver().get_primary_line("nope", "return", "go") is None


class TestRegistry:
    def test_demo_scenario(self):
        resolver = _resolver(demo={"initialization": {"javascript": [1, 2]}})
        assert resolver.get_highlighted_lines("demo", "initialization", "javascript") == [1, 2]
        assert resolver.get_highlighted_lines("demo", "initialization", "python") == []

    def test_last_registration_wins(self):
        resolver = _resolver(demo={"initialization": {"javascript": [1]}})
        resolver.register_algorithm("demo", parse_line_mapping({"initialization": {"javascript": [5]}}))
        assert resolver.get_highlighted_lines("demo", "initialization", "javascript") == [5]
        assert resolver.get_all_registered_algorithms() == ["demo"]

    def test_registration_order_is_kept(self):
        resolver = _resolver(b={}, a={})
        assert resolver.get_all_registered_algorithms() == ["b", "a"]
        assert resolver.is_registered("a")
        assert not resolver.is_registered("c")

    def test_instances_are_independent(self):
        first = _resolver(demo={"initialization": {"javascript": [1]}})
        second = LineResolver()
        assert first.is_registered("demo")
        assert not second.is_registered("demo")

    def test_returned_lines_are_copies(self):
        resolver = _resolver(demo={"initialization": {"javascript": [1, 2]}})
        resolver.get_highlighted_lines("demo", "initialization", "javascript").append(99)
        assert resolver.get_highlighted_lines("demo", "initialization", "javascript") == [1, 2]
