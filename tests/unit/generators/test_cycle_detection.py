"""Tests for the undirected DFS cycle detection trace generator."""

import pytest

from algotrace.api import generate_trace
from algotrace.generators.graphs import CALL_STACK, GRAPH, generate_cycle_detection_steps
from algotrace.snapshot_types import FramePhase
from algotrace.trace_types import StepType

from tests.unit.generators.conftest import of_type

NODES = ["A", "B", "C", "D", "E"]
CYCLIC_EDGES = [("A", "B"), ("B", "C"), ("B", "D"), ("D", "E"), ("C", "E")]


class TestCycleFound:
    def test_reports_cycle(self):
        final = generate_cycle_detection_steps(NODES, CYCLIC_EDGES)[-1]
        assert final.step_type == StepType.RETURN
        assert final.variables["hasCycle"] is True
        assert final.variables["cycle"] == ["B", "C", "E", "D"]

    def test_cycle_edges_close_the_loop(self):
        steps = generate_cycle_detection_steps(NODES, CYCLIC_EDGES)
        detected = of_type(steps, StepType.GRAPH_CYCLE_DETECTED)
        assert len(detected) == 1
        assert detected[0].data(GRAPH).cycle_edges == ["B-C", "C-E", "D-E", "B-D"]

    def test_parent_edge_is_not_a_cycle(self):
        steps = generate_cycle_detection_steps(["A", "B"], [("A", "B")])
        assert of_type(steps, StepType.GRAPH_CYCLE_DETECTED) == []
        assert steps[-1].variables["hasCycle"] is False

    def test_call_stack_mirrors_current_path(self):
        steps = generate_cycle_detection_steps(NODES, CYCLIC_EDGES)
        detected = of_type(steps, StepType.GRAPH_CYCLE_DETECTED)[0]
        frames = detected.data(CALL_STACK)
        assert [f.node for f in frames] == detected.data(GRAPH).current_path
        assert [f.phase for f in frames[:-1]] == [FramePhase.WAITING] * (len(frames) - 1)
        assert frames[-1].phase == FramePhase.ACTIVE


class TestAcyclic:
    def test_path_has_no_cycle(self):
        steps = generate_cycle_detection_steps(["A", "B", "C"], [("A", "B"), ("B", "C")])
        final = steps[-1]
        assert final.variables == {"hasCycle": False, "components": 1}
        assert final.data(CALL_STACK) == []

    def test_backtracks_every_node(self):
        steps = generate_cycle_detection_steps(["A", "B", "C"], [("A", "B"), ("B", "C")])
        backtracked = [s.variables["node"] for s in of_type(steps, StepType.GRAPH_BACKTRACK)]
        assert backtracked == ["C", "B", "A"]

    def test_counts_components(self):
        steps = generate_cycle_detection_steps(["A", "B", "C"], [("A", "B")])
        assert steps[-1].variables["components"] == 2
        assert len(of_type(steps, StepType.LOOP_CONDITION)) == 3

    def test_isolated_node(self):
        steps = generate_cycle_detection_steps(["A"], [])
        assert steps[-1].variables["hasCycle"] is False
        assert steps[-1].data(GRAPH).visited == ["A"]


class TestCycleDetectionInvalidInput:
    @pytest.mark.parametrize(
        "nodes,edges",
        [
            ([], []),
            (["A"], [("A", "A")]),
            (["A", "B"], [("A", "C")]),
            (["A", "B"], [("A", "B"), ("B", "A")]),
            (["A", "A"], []),
            ([str(i) for i in range(9)], []),
            (["A", "B"], [("A",)]),
            (["A", "B-C", "A-B", "C"], [("A", "B-C"), ("A-B", "C")]),
        ],
    )
    def test_out_of_domain_returns_empty(self, nodes, edges):
        assert generate_cycle_detection_steps(nodes, edges) == []

    def test_hyphenated_node_ids_are_rejected_at_api(self):
        payload = {"nodes": ["A", "B-C", "A-B", "C"], "edges": [["A", "B-C"], ["A-B", "C"]]}
        assert generate_trace("cycle-detection", payload) == []


class TestEdgeIds:
    def test_edge_ids_are_unique(self):
        steps = generate_cycle_detection_steps(NODES, CYCLIC_EDGES)
        edge_ids = [e.id for e in steps[0].data(GRAPH).edges]
        assert len(set(edge_ids)) == len(edge_ids)
        assert edge_ids == ["A-B", "B-C", "B-D", "D-E", "C-E"]
