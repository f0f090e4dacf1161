"""Source line mapping for in-place linked list reversal."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

REVERSE_LINKED_LIST_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [9], "cpp": [15], "python": [7], "java": [11], "rust": [19],
            "typescript": [12], "go": [9],
        },
        "pointer_initialization": {
            "javascript": span(11, 13), "cpp": span(17, 19), "python": span(9, 11),
            "java": span(13, 15), "rust": span(21, 22), "typescript": span(14, 16),
            "go": span(11, 13),
        },
        "loop_condition": {
            "javascript": [16], "cpp": [22], "python": [14], "java": [18], "rust": [25],
            "typescript": [19], "go": [16],
        },
        "pointer_update": {
            "javascript": [18], "cpp": [24], "python": [16], "java": [20], "rust": [27],
            "typescript": [21], "go": [18],
        },
        "link_reversal": {
            "javascript": [21], "cpp": [27], "python": [19], "java": [23], "rust": [30],
            "typescript": [24], "go": [21],
        },
        "node_traversal": {
            "javascript": [24, 25], "cpp": [30, 31], "python": [22, 23], "java": [26, 27],
            "rust": [33, 34], "typescript": [27, 28], "go": [24, 25],
        },
        "return": {
            "javascript": [29], "cpp": [35], "python": [26], "java": [31], "rust": [38],
            "typescript": [32], "go": [29],
        },
    }
)
