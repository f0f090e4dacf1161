"""Source line mapping for binary search."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

BINARY_SEARCH_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [2, 3], "cpp": [5, 6], "python": [2, 3], "java": [3, 4],
            "rust": [2, 3], "typescript": [2, 3], "go": [4, 5],
        },
        "loop_condition": {
            "javascript": [5], "cpp": [8], "python": [5], "java": [6], "rust": [5],
            "typescript": [5], "go": [7],
        },
        "comparison": {
            "javascript": [6, 8, 10], "cpp": [9, 11, 13], "python": [6, 8, 10],
            "java": [7, 9, 11], "rust": [6, 8, 10], "typescript": [6, 8, 10], "go": [8, 10, 12],
        },
        "assignment": {
            "javascript": [9, 11], "cpp": [14, 16], "python": [11, 13], "java": [12, 14],
            "rust": [11, 14], "typescript": [9, 11], "go": [13, 15],
        },
        "return": {
            "javascript": [9, 15], "cpp": [12, 19], "python": [9, 15], "java": [10, 17],
            "rust": [9, 18], "typescript": [9, 15], "go": [11, 18],
        },
        "return_found": {
            "javascript": [9], "cpp": [12], "python": [9], "java": [10], "rust": [9],
            "typescript": [9], "go": [11],
        },
        "return_not_found": {
            "javascript": [15], "cpp": [19], "python": [15], "java": [17], "rust": [18],
            "typescript": [15], "go": [18],
        },
    }
)
