"""Pure functions for computing statistics over step traces."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from algotrace.trace_types import Step


@dataclass(frozen=True)
class TraceSummary:
    step_count: int
    step_types: dict[str, int]
    first_step_type: str | None
    last_step_type: str | None
    total_duration_ms: int


def count_step_types(steps: list[Step]) -> dict[str, int]:
    """Return a frequency map of step type names in the given trace.

    Args:
        steps: A generated trace.

    Returns:
        A dict mapping step type strings to their occurrence counts.
        Empty dict for an empty trace.
    """
    return dict(Counter(step.step_type.value for step in steps))


def summarize_trace(steps: list[Step]) -> TraceSummary:
    return TraceSummary(
        step_count=len(steps),
        step_types=count_step_types(steps),
        first_step_type=steps[0].step_type.value if steps else None,
        last_step_type=steps[-1].step_type.value if steps else None,
        total_duration_ms=sum(s.timing.duration + s.timing.delay for s in steps),
    )
