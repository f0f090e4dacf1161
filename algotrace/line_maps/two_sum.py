"""Source line mapping for two-sum with two pointers."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

TWO_SUM_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [3, 4], "cpp": span(6, 9), "python": [2, 3], "java": span(4, 8),
            "rust": span(2, 5), "typescript": [3, 4], "go": span(8, 15),
        },
        "pointer_initialization": {
            "javascript": [6, 7], "cpp": [12, 13], "python": [5, 6], "java": [12, 13],
            "rust": [9, 10], "typescript": [7, 8], "go": [18, 19],
        },
        "loop_condition": {
            "javascript": [9], "cpp": [14], "python": [8], "java": [13], "rust": [10],
            "typescript": [9], "go": [20],
        },
        "comparison": {
            "javascript": [10, 12], "cpp": [16, 18], "python": [9, 11], "java": [16, 18],
            "rust": [13, 15], "typescript": [11, 13], "go": [22, 24],
        },
        "pointer_move_left": {
            "javascript": [15], "cpp": [21], "python": [14], "java": [21], "rust": [18],
            "typescript": [16], "go": [27],
        },
        "pointer_move_right": {
            "javascript": [17], "cpp": [23], "python": [16], "java": [23], "rust": [20],
            "typescript": [18], "go": [29],
        },
        "return_found": {
            "javascript": [13], "cpp": [19], "python": [12], "java": [19], "rust": [16],
            "typescript": [14], "go": [25],
        },
        "return_not_found": {
            "javascript": [21], "cpp": [27], "python": [18], "java": [27], "rust": [24],
            "typescript": [22], "go": [33],
        },
    }
)
