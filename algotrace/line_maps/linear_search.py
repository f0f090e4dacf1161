"""Source line mapping for linear search."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

LINEAR_SEARCH_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [2], "cpp": [5], "python": [2], "java": [3], "rust": [2],
            "typescript": [2], "go": [4],
        },
        "loop_start": {
            "javascript": [2], "cpp": [5], "python": [2], "java": [3], "rust": [2],
            "typescript": [2], "go": [4],
        },
        "comparison": {
            "javascript": [3], "cpp": [6], "python": [3], "java": [4], "rust": [3],
            "typescript": [3], "go": [5],
        },
        "assignment": {
            "javascript": [2], "cpp": [5], "python": [2], "java": [3], "rust": [2],
            "typescript": [2], "go": [4],
        },
        "return_found": {
            "javascript": [4], "cpp": [7], "python": [4], "java": [5], "rust": [4],
            "typescript": [4], "go": [6],
        },
        "return_not_found": {
            "javascript": [7], "cpp": [10], "python": [5], "java": [8], "rust": [7],
            "typescript": [7], "go": [9],
        },
        "return": {
            "javascript": [4, 7], "cpp": [7, 10], "python": [4, 6], "java": [5, 8],
            "rust": [4, 7], "typescript": [4, 7], "go": [6, 9],
        },
    }
)
