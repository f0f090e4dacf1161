"""Tests for the step model and its camelCase serialization."""

import math

import pytest

from algotrace.snapshot_types import CallFrame, FramePhase, HeapSnapshot, serialize_value
from algotrace.trace_types import (
    DataStructureKind,
    DataStructureState,
    HighlightInfo,
    HighlightKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
    Timing,
)


def _step(**overrides) -> Step:
    fields = dict(
        id=0,
        step_type=StepType.COMPARISON,
        data_structures={"arr": DataStructureState(kind=DataStructureKind.ARRAY, data=[3, 1])},
        highlights={
            "arr": [
                HighlightInfo(kind=HighlightKind.INDICES, values=[0, 1], style="compare"),
                HighlightInfo(kind=HighlightKind.INDICES, values=[1], style="sorted"),
            ]
        },
        explanation="Comparing 3 and 1",
    )
    fields.update(overrides)
    return Step(**fields)


class TestDataStructureState:
    def test_rejects_mismatched_payload(self):
        with pytest.raises(TypeError, match="heap payload"):
            DataStructureState(kind=DataStructureKind.HEAP, data=[1, 2])

    def test_accepts_variant_payload(self):
        state = DataStructureState(kind=DataStructureKind.HEAP, data=HeapSnapshot(capacity=2))
        assert state.data.capacity == 2

    def test_to_dict_includes_label_metadata(self):
        state = DataStructureState(kind=DataStructureKind.ARRAY, data=[1], label="Array")
        assert state.to_dict() == {"kind": "array", "data": [1], "metadata": {"label": "Array"}}

    def test_to_dict_omits_missing_label(self):
        state = DataStructureState(kind=DataStructureKind.STACK, data=[])
        assert "metadata" not in state.to_dict()


class TestStepContext:
    def test_to_dict_omits_unset_fields(self):
        ctx = StepContext(loop_type=LoopType.OUTER, pass_number=1)
        assert ctx.to_dict() == {"loopType": "outer", "passNumber": 1}

    def test_to_dict_flattens_extra(self):
        ctx = StepContext(operation=Operation.READ, extra={"side": "left"})
        assert ctx.to_dict() == {"operation": "read", "side": "left"}


class TestStep:
    def test_data_accessor(self):
        assert _step().data("arr") == [3, 1]

    def test_highlighted_filters_by_style(self):
        step = _step()
        assert step.highlighted("arr", "compare") == [0, 1]
        assert step.highlighted("arr", "match") == []
        assert step.styles("arr") == ["compare", "sorted"]

    def test_default_timing(self):
        assert _step().timing == Timing(duration=1000, delay=0)

    def test_to_dict_uses_camel_case(self):
        d = _step(variables={"i": 0}).to_dict()
        assert d["stepType"] == "comparison"
        assert d["dataStructures"]["arr"]["data"] == [3, 1]
        assert d["highlights"]["arr"][0] == {"kind": "indices", "values": [0, 1], "style": "compare"}
        assert d["variables"] == {"i": 0}
        assert d["timing"] == {"duration": 1000, "delay": 0}
        assert "stepContext" not in d

    def test_to_dict_includes_context_when_present(self):
        d = _step(step_context=StepContext(loop_type=LoopType.INNER)).to_dict()
        assert d["stepContext"] == {"loopType": "inner"}

    def test_step_is_frozen(self):
        with pytest.raises(AttributeError):
            _step().explanation = "changed"


class TestSerializeValue:
    def test_dataclass_fields_become_camel_case(self):
        frame = CallFrame(id="f-0", node=3, parent_id=None, phase=FramePhase.WAITING)
        assert serialize_value(frame) == {
            "id": "f-0",
            "node": 3,
            "phase": "waiting",
            "parentId": None,
            "depth": 0,
            "returnValue": None,
        }

    def test_nested_containers(self):
        assert serialize_value({"a": [FramePhase.ACTIVE, (1, 2)]}) == {"a": ["active", [1, 2]]}

    def test_non_finite_floats_become_none(self):
        assert serialize_value([0, math.inf, -math.inf, math.nan, 1.5]) == [0, None, None, None, 1.5]
