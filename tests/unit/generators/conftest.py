"""Shared helpers for the generator test suite."""

from algotrace.trace_types import Step, StepType


def types_of(steps: list[Step]) -> list[StepType]:
    """Return the step types of *steps* in trace order."""
    return [step.step_type for step in steps]


def of_type(steps: list[Step], step_type: StepType) -> list[Step]:
    """Return all steps of *step_type*."""
    return [step for step in steps if step.step_type == step_type]


def assert_sequential_ids(steps: list[Step]) -> None:
    assert [step.id for step in steps] == list(range(len(steps)))
