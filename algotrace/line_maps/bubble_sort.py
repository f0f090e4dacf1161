"""Source line mapping for bubble sort."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

BUBBLE_SORT_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [2], "cpp": [4], "python": [2], "java": [3], "rust": [2],
            "typescript": [2], "go": [4],
        },
        "loop_start_outer": {
            "javascript": [4], "cpp": [5], "python": [4], "java": [5], "rust": [4],
            "typescript": [4], "go": [6],
        },
        "loop_start_inner": {
            "javascript": [6], "cpp": [7], "python": [6], "java": [7], "rust": [6],
            "typescript": [6], "go": [8],
        },
        "comparison": {
            "javascript": [7], "cpp": [8], "python": [7], "java": [8], "rust": [7],
            "typescript": [7], "go": [9],
        },
        "swap": {
            "javascript": [8], "cpp": [9, 10, 11], "python": [8], "java": [9, 10, 11],
            "rust": [8], "typescript": [8], "go": [10],
        },
        "no_swap": {
            "javascript": [7], "cpp": [8], "python": [7], "java": [8], "rust": [7],
            "typescript": [7], "go": [9],
        },
        "pass_complete": {
            "javascript": [4], "cpp": [5], "python": [4], "java": [5], "rust": [4],
            "typescript": [4], "go": [6],
        },
        "return": {
            "javascript": [15], "cpp": [16], "python": [13], "java": [16], "rust": [15],
            "typescript": [15], "go": [16],
        },
    }
)
