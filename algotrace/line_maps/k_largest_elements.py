"""Source line mapping for k largest elements with a min-heap."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

K_LARGEST_ELEMENTS_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [2], "cpp": [6], "python": [3], "java": [4], "rust": [4],
            "typescript": [2], "go": [35],
        },
        "heap_initialization": {
            "javascript": [4], "cpp": [8], "python": [6], "java": [6], "rust": [6],
            "typescript": [4], "go": span(37, 38),
        },
        "loop_start": {
            "javascript": [6], "cpp": [10], "python": [8], "java": [8], "rust": [8],
            "typescript": [6], "go": [40],
        },
        "comparison": {
            "javascript": [7], "cpp": [11], "python": [9], "java": [9], "rust": [8],
            "typescript": [7], "go": [41],
        },
        "heap_size_check": {
            "javascript": [10], "cpp": [14], "python": [12], "java": [12], "rust": [10],
            "typescript": [10], "go": [44],
        },
        "heap_push": {
            "javascript": [11], "cpp": [15], "python": [13], "java": [13], "rust": [11],
            "typescript": [11], "go": [45],
        },
        "heap_push_replace": {
            "javascript": [16], "cpp": [20], "python": [16], "java": [18], "rust": [17],
            "typescript": [16], "go": [50],
        },
        "heap_sift_up": {
            "javascript": span(65, 66), "cpp": [15], "python": [13], "java": [13],
            "rust": [11], "typescript": span(68, 69), "go": [45],
        },
        "heap_sift_down": {
            "javascript": span(89, 90), "cpp": [19], "python": [16], "java": [17],
            "rust": [16], "typescript": span(92, 93), "go": [49],
        },
        "heap_compare": {
            "javascript": [14], "cpp": [18], "python": [15], "java": [16], "rust": [14, 15],
            "typescript": [14], "go": [48],
        },
        "heap_pop": {
            "javascript": [15], "cpp": [19], "python": [16], "java": [17], "rust": [16],
            "typescript": [15], "go": [49],
        },
        "heap_skip": {
            "javascript": [14], "cpp": [18], "python": [15], "java": [16], "rust": [15],
            "typescript": [14], "go": [48],
        },
        "heap_result_found": {
            "javascript": [21], "cpp": [32, 33], "python": [19], "java": [23, 24],
            "rust": [27, 28], "typescript": [21], "go": [61, 62],
        },
        "return": {
            "javascript": [21], "cpp": [33], "python": [19], "java": [25], "rust": [28],
            "typescript": [21], "go": [62],
        },
    }
)
