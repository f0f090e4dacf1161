"""Source line mapping for recursive factorial."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

FACTORIAL_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [1], "cpp": [4], "python": [1], "java": [2], "rust": [1],
            "typescript": [1], "go": [5],
        },
        "base_case_check": {
            "javascript": [3], "cpp": [6], "python": [3], "java": [4], "rust": [3],
            "typescript": [3], "go": [7],
        },
        "base_case_reached": {
            "javascript": [4], "cpp": [7], "python": [4], "java": [5], "rust": [4],
            "typescript": [4], "go": [8],
        },
        "recursive_call": {
            "javascript": [7], "cpp": [10], "python": [7], "java": [8], "rust": [7],
            "typescript": [7], "go": [11],
        },
        "recursive_return": {
            "javascript": [7], "cpp": [10], "python": [7], "java": [8], "rust": [7],
            "typescript": [7], "go": [11],
        },
        "return": {
            "javascript": [7], "cpp": [10], "python": [7], "java": [8], "rust": [7],
            "typescript": [7], "go": [11],
        },
        "call_stack_push": {
            "javascript": [1], "cpp": [4], "python": [1], "java": [2], "rust": [1],
            "typescript": [1], "go": [5],
        },
        "call_stack_pop": {
            "javascript": [7, 8], "cpp": [10, 11], "python": [7], "java": [8, 9],
            "rust": [7, 8], "typescript": [7, 8], "go": [11, 12],
        },
    }
)
