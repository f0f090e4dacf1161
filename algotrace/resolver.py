"""Line Mapping Registry & Resolver.

Answers "which source lines correspond to this step, in this language".
A resolver instance is created empty, populated with one
``register_algorithm`` call per algorithm, and read thereafter. Lookups
never raise: every miss degrades to an empty result and a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from algotrace.line_mapping import LineMappingTable, entry_lines, entry_primary
from algotrace.trace_types import Step, StepContext

logger = logging.getLogger(__name__)


class MissReason(str, Enum):
    UNREGISTERED_ALGORITHM = "unregistered_algorithm"
    UNMAPPED_STEP = "unmapped_step"
    UNMAPPED_LANGUAGE = "unmapped_language"


@dataclass(frozen=True)
class LineResolution:
    """Outcome of one lookup. ``miss`` is None on success."""

    key: str
    lines: list[int] = field(default_factory=list)
    primary: int | None = None
    miss: MissReason | None = None

    @property
    def resolved(self) -> bool:
        return self.miss is None

    @classmethod
    def missed(cls, key: str, reason: MissReason) -> LineResolution:
        return cls(key=key, miss=reason)


# Candidate compound keys, tried in this order. A dimension whose value
# is None contributes no candidate.
_CONTEXT_KEY_BUILDERS: tuple[tuple[str, Callable[[StepContext], str | None]], ...] = (
    ("loop_type", lambda ctx: ctx.loop_type.value if ctx.loop_type else None),
    ("operation", lambda ctx: ctx.operation.value if ctx.operation else None),
    ("data_structure", lambda ctx: ctx.data_structure),
)


def candidate_keys(step_type: str, context: StepContext | None) -> list[str]:
    """Step keys to try for *step_type* under *context*, most specific first.

    The bare step type is always the last candidate.
    """
    keys: list[str] = []
    if context is not None:
        for _dimension, build in _CONTEXT_KEY_BUILDERS:
            suffix = build(context)
            if suffix:
                keys.append(f"{step_type}_{suffix}")
    keys.append(step_type)
    return keys


class LineResolver:
    """Registry of line mapping tables keyed by algorithm id."""

    def __init__(self) -> None:
        self._tables: dict[str, LineMappingTable] = {}

    def register_algorithm(self, algorithm_id: str, table: LineMappingTable) -> None:
        """Register *table* for *algorithm_id*; a later call replaces it."""
        if algorithm_id in self._tables:
            logger.debug("Replacing line mapping for %s", algorithm_id)
        self._tables[algorithm_id] = table

    def is_registered(self, algorithm_id: str) -> bool:
        return algorithm_id in self._tables

    def get_all_registered_algorithms(self) -> list[str]:
        return list(self._tables)

    def resolve(
        self,
        algorithm_id: str,
        step_type: str,
        language: str,
        context: StepContext | None = None,
    ) -> LineResolution:
        step_type = getattr(step_type, "value", step_type)
        table = self._tables.get(algorithm_id)
        if table is None:
            logger.warning("No line mapping registered for algorithm %s", algorithm_id)
            return LineResolution.missed(step_type, MissReason.UNREGISTERED_ALGORITHM)

        key = next((k for k in candidate_keys(step_type, context) if k in table), None)
        if key is None:
            logger.warning("No line mapping for step %s in %s", step_type, algorithm_id)
            return LineResolution.missed(step_type, MissReason.UNMAPPED_STEP)

        entry = table[key].get(language)
        if entry is None:
            logger.warning(
                "No %s line mapping for step %s in %s", language, key, algorithm_id
            )
            return LineResolution.missed(key, MissReason.UNMAPPED_LANGUAGE)

        return LineResolution(key=key, lines=entry_lines(entry), primary=entry_primary(entry))

    def get_highlighted_lines(
        self,
        algorithm_id: str,
        step_type: str,
        language: str,
        context: StepContext | None = None,
    ) -> list[int]:
        return self.resolve(algorithm_id, step_type, language, context).lines

    def get_primary_line(
        self,
        algorithm_id: str,
        step_type: str,
        language: str,
        context: StepContext | None = None,
    ) -> int | None:
        return self.resolve(algorithm_id, step_type, language, context).primary

    def resolve_step(self, algorithm_id: str, step: Step, language: str) -> LineResolution:
        return self.resolve(algorithm_id, step.step_type, language, step.step_context)
