"""Properties every generator must satisfy on example and failure-path inputs."""

import json

import pytest

from algotrace.api import generate_trace, list_algorithms
from algotrace.constants import SUPPORTED_LANGUAGES
from algotrace.inputs import EXAMPLE_INPUTS
from algotrace.line_maps import build_default_resolver
from algotrace.trace_types import StepType

from tests.unit.generators.conftest import assert_sequential_ids

TERMINAL_TYPES: dict[str, set[StepType]] = {
    "binary-search": {StepType.RETURN_FOUND, StepType.RETURN_NOT_FOUND},
    "linear-search": {StepType.RETURN_FOUND, StepType.RETURN_NOT_FOUND},
    "two-sum": {StepType.RETURN_FOUND, StepType.RETURN_NOT_FOUND},
    "anagram-detection": {StepType.RETURN_FOUND, StepType.RETURN_NOT_FOUND},
    "balanced-parentheses": {StepType.VALIDATION_SUCCESS, StepType.VALIDATION_FAILURE},
}

OUT_OF_DOMAIN: dict[str, dict] = {
    "bubble-sort": {"values": []},
    "binary-search": {"values": [2, 1], "target": 1},
    "linear-search": {"values": [], "target": 1},
    "two-sum": {"values": [1], "target": 1},
    "coin-change": {"coins": [0], "amount": 3},
    "cycle-detection": {"nodes": ["A"], "edges": [["A", "A"]]},
    "k-largest-elements": {"values": [1, 2], "k": 3},
    "reverse-linked-list": {"values": list(range(11))},
    "factorial": {"n": 9},
    "balanced-parentheses": {"text": "(x)"},
    "in-order-traversal": {"nodes": [{"id": "a", "value": 1}], "root": "b"},
    "bfs-traversal": {"nodes": [], "root": "a"},
    "min-cost-array": {"values": [0]},
    "anagram-detection": {"first": "a" * 21, "second": "a"},
}

# In-domain inputs that take the failure or degenerate branch of each algorithm.
FAILURE_PATH_INPUTS: dict[str, dict] = {
    "bubble-sort": {"values": [1, 2, 3]},
    "binary-search": {"values": [2, 5, 8], "target": 4},
    "linear-search": {"values": [3, 1], "target": 9},
    "two-sum": {"values": [1, 2, 3], "target": 100},
    "coin-change": {"coins": [2], "amount": 3},
    "cycle-detection": {"nodes": ["A", "B", "C"], "edges": [["A", "B"]]},
    "k-largest-elements": {"values": [5, 4, 3, 2, 1], "k": 2},
    "reverse-linked-list": {"values": [7]},
    "factorial": {"n": 0},
    "balanced-parentheses": {"text": "(]"},
    "in-order-traversal": {"nodes": [], "root": None},
    "bfs-traversal": {"nodes": [], "root": None},
    "min-cost-array": {"values": [5]},
    "anagram-detection": {"first": "abc", "second": "abd"},
}

DECLARED_STYLES: dict[str, set[str]] = {
    "bubble-sort": {"compare", "swap", "sorted", "match"},
    "binary-search": {"active", "compare", "visited", "match", "invalid"},
    "linear-search": {"active", "compare", "visited", "match", "invalid"},
    "two-sum": {"active", "compare", "match", "invalid"},
    "coin-change": {"current", "compare", "processing", "match", "invalid"},
    "cycle-detection": {"current", "visited", "path", "explore", "cycle", "backtrack"},
    "k-largest-elements": {"current", "processing", "compare", "swap", "active", "match", "invalid"},
    "reverse-linked-list": {"previous", "current", "next", "processing", "match"},
    "factorial": {"active", "processing", "match"},
    "balanced-parentheses": {"current", "processing", "compare", "match", "invalid"},
    "in-order-traversal": {"current", "visited", "processing", "match"},
    "bfs-traversal": {"current", "visited", "processing", "active", "match"},
    "min-cost-array": {"active", "compare", "processing", "invalid", "match"},
    "anagram-detection": {"current", "processing", "compare", "match", "invalid"},
}

ALGORITHMS = list_algorithms()


@pytest.fixture(params=ALGORITHMS)
def algorithm_id(request):
    return request.param


@pytest.fixture
def steps(algorithm_id):
    return generate_trace(algorithm_id, EXAMPLE_INPUTS[algorithm_id])


class TestTraceShape:
    def test_non_empty(self, steps):
        assert steps

    def test_ids_are_sequential(self, steps):
        assert_sequential_ids(steps)

    def test_starts_with_initialization(self, steps):
        assert steps[0].step_type == StepType.INITIALIZATION

    def test_ends_with_terminal_step(self, algorithm_id, steps):
        expected = TERMINAL_TYPES.get(algorithm_id, {StepType.RETURN})
        assert steps[-1].step_type in expected

    def test_highlights_are_never_empty(self, steps):
        for step in steps:
            for infos in step.highlights.values():
                assert infos
                assert all(info.values for info in infos)

    def test_styles_are_declared(self, algorithm_id, steps):
        used = {info.style for step in steps for infos in step.highlights.values() for info in infos}
        assert used <= DECLARED_STYLES[algorithm_id]

    def test_json_serializable(self, steps):
        decoded = json.loads(json.dumps([step.to_dict() for step in steps]))
        assert decoded[0]["stepType"] == "initialization"


class TestDeterminismAndIsolation:
    def test_repeated_runs_are_identical(self, algorithm_id, steps):
        again = generate_trace(algorithm_id, EXAMPLE_INPUTS[algorithm_id])
        assert [s.to_dict() for s in again] == [s.to_dict() for s in steps]

    def test_consecutive_steps_share_no_payload(self, steps):
        for earlier, later in zip(steps, steps[1:]):
            for name in set(earlier.data_structures) & set(later.data_structures):
                assert earlier.data(name) is not later.data(name)

    def test_payload_does_not_leak_into_trace(self, algorithm_id):
        payload = json.loads(json.dumps(EXAMPLE_INPUTS[algorithm_id]))
        steps = generate_trace(algorithm_id, payload)
        assert payload == EXAMPLE_INPUTS[algorithm_id]
        assert steps


class TestLineResolution:
    @pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
    def test_every_step_resolves(self, algorithm_id, steps, language):
        resolver = build_default_resolver()
        for step in steps:
            result = resolver.resolve_step(algorithm_id, step, language)
            assert result.resolved, f"{step.step_type.value} unmapped in {language}"
            assert result.lines
            assert result.primary in result.lines


class TestOutOfDomain:
    def test_returns_empty_trace(self, algorithm_id):
        assert generate_trace(algorithm_id, OUT_OF_DOMAIN[algorithm_id]) == []


class TestFailurePaths:
    @pytest.fixture
    def failure_steps(self, algorithm_id):
        return generate_trace(algorithm_id, FAILURE_PATH_INPUTS[algorithm_id])

    def test_ends_with_terminal_step(self, algorithm_id, failure_steps):
        assert failure_steps[0].step_type == StepType.INITIALIZATION
        assert failure_steps[-1].step_type in TERMINAL_TYPES.get(algorithm_id, {StepType.RETURN})
        assert_sequential_ids(failure_steps)

    @pytest.mark.parametrize(
        "algorithm_id,step_type",
        [
            ("binary-search", StepType.RETURN_NOT_FOUND),
            ("linear-search", StepType.RETURN_NOT_FOUND),
            ("two-sum", StepType.RETURN_NOT_FOUND),
            ("anagram-detection", StepType.RETURN_NOT_FOUND),
            ("balanced-parentheses", StepType.VALIDATION_FAILURE),
            ("coin-change", StepType.DP_NO_SOLUTION),
            ("k-largest-elements", StepType.HEAP_SKIP),
            ("cycle-detection", StepType.GRAPH_BACKTRACK),
        ],
    )
    def test_reaches_failure_branch(self, algorithm_id, step_type):
        steps = generate_trace(algorithm_id, FAILURE_PATH_INPUTS[algorithm_id])
        assert step_type in {s.step_type for s in steps}

    @pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
    def test_every_step_resolves(self, algorithm_id, failure_steps, language):
        resolver = build_default_resolver()
        for step in failure_steps:
            result = resolver.resolve_step(algorithm_id, step, language)
            assert result.resolved, f"{step.step_type.value} unmapped in {language}"
            assert result.primary in result.lines
