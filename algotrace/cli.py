"""Command-line entry point: generate a trace and print it."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import annotate_trace, dump_trace, generate_trace, list_algorithms
from .constants import SUPPORTED_LANGUAGES
from .inputs import EXAMPLE_INPUTS
from .trace_stats import summarize_trace


def _load_payload(raw: str) -> dict:
    if raw.startswith("@"):
        with open(raw[1:]) as f:
            return json.load(f)
    return json.loads(raw)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Step-by-step algorithm traces with source line highlights")
    parser.add_argument("algorithm", nargs="?",
                        help="Algorithm id (see --list)")
    parser.add_argument("--input", "-i", default=None,
                        help="JSON payload, or @path to a JSON file (default: built-in example)")
    parser.add_argument("--language", "-l", default="python",
                        choices=SUPPORTED_LANGUAGES,
                        help="Code listing language for --lines (default: python)")
    parser.add_argument("--lines", action="store_true",
                        help="Print one line per step with its highlighted source lines")
    parser.add_argument("--summary", action="store_true",
                        help="Print step type counts instead of the full trace")
    parser.add_argument("--list", action="store_true",
                        help="List the available algorithms")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s"
    )

    if args.list or not args.algorithm:
        for algorithm_id in list_algorithms():
            print(algorithm_id)
        return 0

    if args.algorithm not in list_algorithms():
        parser.error(f"unknown algorithm {args.algorithm!r}")

    if args.input is None:
        payload = EXAMPLE_INPUTS[args.algorithm]
        print(f"No input provided. Using built-in example: {json.dumps(payload)}",
              file=sys.stderr)
    else:
        payload = _load_payload(args.input)

    steps = generate_trace(args.algorithm, payload)
    if not steps:
        print("Nothing to visualize: input is outside the supported domain", file=sys.stderr)
        return 1

    if args.summary:
        summary = summarize_trace(steps)
        print(f"═══ {args.algorithm}: {summary.step_count} steps ═══")
        for step_type, count in sorted(summary.step_types.items()):
            print(f"  {step_type:<28} {count}")
        return 0

    if args.lines:
        for step, lines in annotate_trace(args.algorithm, steps, args.language):
            print(f"{step.id:>4}  {step.step_type.value:<26} {str(lines):<16} {step.explanation}")
        return 0

    print(dump_trace(steps))
    return 0


if __name__ == "__main__":
    sys.exit(main())
