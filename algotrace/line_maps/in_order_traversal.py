"""Source line mapping for in-order traversal."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

IN_ORDER_TRAVERSAL_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [9, 10], "cpp": [13, 16], "python": [8, 10], "java": [16, 19],
            "rust": [22, 25], "typescript": [9, 11], "go": [9, 14],
        },
        "recursive_call": {
            "javascript": [9], "cpp": [16], "python": [10], "java": [19], "rust": [25],
            "typescript": [11], "go": [14],
        },
        "base_case_check": {
            "javascript": [11, 12, 13], "cpp": [17, 18, 19], "python": [11, 12],
            "java": [20, 21, 22], "rust": [26], "typescript": [12, 13, 14], "go": [15, 16, 17],
        },
        "base_case_reached": {
            "javascript": [12], "cpp": [18], "python": [12], "java": [21], "rust": [26],
            "typescript": [13], "go": [16],
        },
        "tree_traversal": {
            "javascript": [15, 17, 20], "cpp": [21, 24, 27], "python": [14, 17, 20],
            "java": [24, 27, 30], "rust": [29, 32, 35], "typescript": [16, 19, 22],
            "go": [19, 22, 25],
        },
        "tree_traversal_write": {
            "javascript": [17], "cpp": [24], "python": [17], "java": [27], "rust": [32],
            "typescript": [19], "go": [22],
        },
        "recursive_return": {
            "javascript": [25], "cpp": [13], "python": [23], "java": [15], "rust": [23],
            "typescript": [26], "go": [11],
        },
        "return": {
            "javascript": [25], "cpp": [13], "python": [23], "java": [15], "rust": [23],
            "typescript": [26], "go": [11],
        },
    }
)
