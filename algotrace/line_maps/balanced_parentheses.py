"""Source line mapping for the balanced brackets check."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

BALANCED_PARENTHESES_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [1, 2, 3], "cpp": [7, 8, 9], "python": [1, 2, 3], "java": span(3, 8),
            "rust": span(4, 9), "typescript": [1, 2, 3], "go": [5, 6, 7],
        },
        "character_access": {
            "javascript": [5, 6], "cpp": [11, 12], "python": [5, 6], "java": [10, 11],
            "rust": [11], "typescript": [5, 6], "go": [9],
        },
        "character_check": {
            "javascript": [8, 12], "cpp": [14, 18], "python": [8, 12], "java": [13, 17],
            "rust": [13, 19], "typescript": [8, 12], "go": [11, 15],
        },
        "stack_push": {
            "javascript": [9], "cpp": [15], "python": [9], "java": [14], "rust": [14],
            "typescript": [9], "go": [12],
        },
        "stack_peek": {
            "javascript": [15], "cpp": [21, 22], "python": [16], "java": [20], "rust": [24],
            "typescript": [15], "go": [19, 20],
        },
        "stack_pop": {
            "javascript": [15, 16], "cpp": [21, 22, 23], "python": [16, 17], "java": [20, 21],
            "rust": span(24, 28), "typescript": [15, 16], "go": span(19, 23),
        },
        "validation_success": {
            "javascript": [21], "cpp": [26], "python": [20], "java": [25], "rust": [33],
            "typescript": [21], "go": [27],
        },
        "validation_failure": {
            "javascript": [13, 16], "cpp": [19, 23], "python": [13, 14, 17, 18],
            "java": [18, 21], "rust": [20, 21, 22, 25, 26, 27, 28], "typescript": [13, 16],
            "go": [16, 17, 18, 21, 22, 23],
        },
    }
)
