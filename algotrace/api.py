"""Composable API functions for generating and annotating traces.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .generators import SUPPORTED_ALGORITHMS, get_generator
from .inputs import INPUT_MODELS
from .line_maps import build_default_resolver
from .resolver import LineResolver
from .trace_types import Step

logger = logging.getLogger(__name__)


def list_algorithms() -> list[str]:
    return list(SUPPORTED_ALGORITHMS)


def generate_trace(algorithm_id: str, payload: dict[str, Any]) -> list[Step]:
    """Validate *payload* and run the generator for *algorithm_id*.

    Args:
        algorithm_id: One of ``list_algorithms()``.
        payload: Generator arguments by name, e.g. ``{"values": [3, 1, 2]}``.

    Returns:
        The full trace, or an empty list when the payload is malformed or
        outside the algorithm's supported domain.

    Raises:
        ValueError: if *algorithm_id* is unknown.
    """
    generator = get_generator(algorithm_id)
    model = INPUT_MODELS[algorithm_id]
    if not isinstance(payload, dict):
        logger.info("Rejected input for %s: payload must be an object", algorithm_id)
        return []
    try:
        parsed = model(**payload)
    except ValidationError as exc:
        logger.info(
            "Rejected input for %s: %d validation error(s)", algorithm_id, exc.error_count()
        )
        return []
    logger.info("Generating %s trace", algorithm_id)
    return generator(*parsed.to_args())


def annotate_trace(
    algorithm_id: str,
    steps: list[Step],
    language: str,
    resolver: LineResolver | None = None,
) -> list[tuple[Step, list[int]]]:
    """Pair each step with the source lines to highlight in *language*.

    Args:
        algorithm_id: The algorithm the trace was generated for.
        steps: A generated trace.
        language: Target code listing language (e.g. "python").
        resolver: Registry to query; defaults to one holding every bundled table.

    Returns:
        ``(step, lines)`` pairs in trace order. Unmapped steps get ``[]``.
    """
    resolver = resolver or build_default_resolver()
    return [(step, resolver.resolve_step(algorithm_id, step, language).lines) for step in steps]


def dump_trace(steps: list[Step], indent: int = 2) -> str:
    """Render a trace as JSON using the camelCase step schema."""
    return json.dumps([step.to_dict() for step in steps], indent=indent, allow_nan=False)
