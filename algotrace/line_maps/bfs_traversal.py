"""Source line mapping for level-order traversal."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

BFS_TRAVERSAL_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": span(9, 12), "cpp": span(11, 17), "python": span(8, 12),
            "java": span(11, 17), "rust": span(25, 31), "typescript": span(9, 14),
            "go": span(10, 16),
        },
        "queue_peek": {
            "javascript": [15, 16], "cpp": [20, 21, 22], "python": [15, 16], "java": [20, 21],
            "rust": [34, 35, 36], "typescript": [17, 18], "go": [19, 20, 21],
        },
        "queue_dequeue": {
            "javascript": [16, 18], "cpp": [21, 22, 24], "python": [16, 18], "java": [21, 23],
            "rust": [35, 36, 38], "typescript": [18, 20], "go": [20, 21, 23],
        },
        "tree_traversal": {
            "javascript": [18], "cpp": [24], "python": [18], "java": [23], "rust": [38],
            "typescript": [20], "go": [23],
        },
        "queue_enqueue": {
            "javascript": [20, 21, 23, 24], "cpp": span(26, 31), "python": span(20, 23),
            "java": span(25, 30), "rust": span(40, 45), "typescript": span(22, 27),
            "go": span(25, 30),
        },
        "level_complete": {
            "javascript": [15], "cpp": [20], "python": [15], "java": [20], "rust": [34],
            "typescript": [17], "go": [19],
        },
        "return": {
            "javascript": [27], "cpp": [34], "python": [25], "java": [33], "rust": [49],
            "typescript": [30], "go": [33],
        },
    }
)
