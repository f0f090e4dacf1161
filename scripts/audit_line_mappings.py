"""Audit line mapping coverage across every algorithm and language.

Pass 1 (Static table coverage):
    For each bundled table, lists step keys missing one or more of the
    supported languages.

Pass 2 (Runtime resolution):
    Runs each generator on its example input and resolves every emitted
    step in every language. Any step that falls through to an empty
    highlight is reported with the key that was tried.
"""

from __future__ import annotations

import dataclasses
import logging

from algotrace.api import generate_trace, list_algorithms
from algotrace.constants import SUPPORTED_LANGUAGES
from algotrace.inputs import EXAMPLE_INPUTS
from algotrace.line_mapping import missing_languages
from algotrace.line_maps import LINE_MAPPINGS, build_default_resolver

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AuditResult:
    algorithm: str
    step_count: int
    table_keys: int
    keys_used: frozenset[str]
    static_gaps: dict[str, list[str]]
    runtime_misses: list[tuple[str, str, str]]  # (language, key, reason)


def audit_algorithm(algorithm_id: str) -> AuditResult:
    resolver = build_default_resolver()
    table = LINE_MAPPINGS.get(algorithm_id, {})
    steps = generate_trace(algorithm_id, EXAMPLE_INPUTS[algorithm_id])

    keys_used: set[str] = set()
    misses: list[tuple[str, str, str]] = []
    for language in SUPPORTED_LANGUAGES:
        for step in steps:
            result = resolver.resolve_step(algorithm_id, step, language)
            if result.resolved:
                keys_used.add(result.key)
            else:
                misses.append((language, result.key, result.miss.value))

    return AuditResult(
        algorithm=algorithm_id,
        step_count=len(steps),
        table_keys=len(table),
        keys_used=frozenset(keys_used),
        static_gaps=missing_languages(table),
        runtime_misses=sorted(set(misses)),
    )


def main():
    results = [audit_algorithm(algorithm_id) for algorithm_id in list_algorithms()]

    logger.info("")
    logger.info("  %-22s %5s %5s %5s %5s %5s", "Algorithm", "Steps", "Keys", "Used", "Gaps", "Miss")
    logger.info("  %s", "-" * 52)
    for r in results:
        logger.info(
            "  %-22s %5d %5d %5d %5d %5d",
            r.algorithm,
            r.step_count,
            r.table_keys,
            len(r.keys_used),
            len(r.static_gaps),
            len(r.runtime_misses),
        )

    incomplete = [r for r in results if r.static_gaps or r.runtime_misses]
    if not incomplete:
        logger.info("")
        logger.info("  All steps resolve in all %d languages.", len(SUPPORTED_LANGUAGES))
        return

    for r in incomplete:
        logger.info("")
        logger.info("=== %s ===", r.algorithm)
        for key, languages in sorted(r.static_gaps.items()):
            logger.info("  %-28s missing: %s", key, ", ".join(languages))
        for language, key, reason in r.runtime_misses:
            logger.info("  %-10s %-28s %s", language, key, reason)


if __name__ == "__main__":
    main()
