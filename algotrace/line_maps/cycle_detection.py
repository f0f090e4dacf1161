"""Source line mapping for cycle detection."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping

CYCLE_DETECTION_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [14], "cpp": [35], "python": [15], "java": [24], "rust": [31],
            "typescript": [24], "go": [26],
        },
        "loop_condition": {
            "javascript": [16, 17], "cpp": [37, 39], "python": [17, 18], "java": [26, 27],
            "rust": [33, 34], "typescript": [26, 27], "go": [28, 29],
        },
        "graph_node_visit": {
            "javascript": [25], "cpp": [15], "python": [26], "java": [44], "rust": [52],
            "typescript": [44], "go": [41],
        },
        "graph_edge_explore": {
            "javascript": [27, 28], "cpp": [17], "python": [28], "java": [46, 47],
            "rust": [54, 55], "typescript": [46, 47], "go": [43],
        },
        "recursive_call": {
            "javascript": [30, 31], "cpp": [19, 20], "python": [30, 31], "java": [49, 50],
            "rust": [57, 58], "typescript": [49, 50], "go": [45, 46],
        },
        "graph_cycle_detected": {
            "javascript": [35, 36], "cpp": [25, 26], "python": [34, 35], "java": [54, 55],
            "rust": [62, 63], "typescript": [54, 55], "go": [50, 51],
        },
        "graph_backtrack": {
            "javascript": [39], "cpp": [29], "python": [37], "java": [58], "rust": [67],
            "typescript": [58], "go": [54],
        },
        "return": {
            "javascript": [22], "cpp": [46], "python": [22], "java": [35], "rust": [42],
            "typescript": [35], "go": [34],
        },
    }
)
