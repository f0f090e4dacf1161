"""Source line mapping for coin change."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

COIN_CHANGE_LINES = parse_line_mapping(
    {
        "dp_table_initialization": {
            "javascript": [2, 3], "cpp": [7, 8], "python": [2, 3], "java": [4, 5],
            "rust": [4, 5], "typescript": [2, 3], "go": [7, 9],
        },
        "dp_amount_processing": {
            "javascript": [5], "cpp": [10], "python": [5], "java": [7], "rust": [7],
            "typescript": [5], "go": [11],
        },
        "dp_coin_consideration": {
            "javascript": [6], "cpp": [11], "python": [6], "java": [8], "rust": [8],
            "typescript": [6], "go": [12],
        },
        "dp_subproblem_lookup": {
            "javascript": [7, 8], "cpp": [12], "python": [7, 8], "java": [9], "rust": [10],
            "typescript": [7, 8], "go": [13],
        },
        "dp_comparison": {
            "javascript": span(9, 12), "cpp": span(13, 16), "python": [9, 10, 11],
            "java": span(10, 13), "rust": [11, 12, 13], "typescript": span(9, 12),
            "go": [14, 15, 16],
        },
        "dp_table_update": {
            "javascript": span(9, 12), "cpp": span(13, 16), "python": [9, 10, 11],
            "java": span(10, 13), "rust": [11, 12, 13], "typescript": span(9, 12),
            "go": [14, 15, 16],
        },
        "dp_optimal_solution_found": {
            "javascript": [17], "cpp": [20], "python": [13], "java": [17], "rust": [17],
            "typescript": [17], "go": [20, 21, 22],
        },
        "dp_path_reconstruction": {
            "javascript": [17], "cpp": [20], "python": [13], "java": [17], "rust": [17],
            "typescript": [17], "go": [20, 21, 22],
        },
        "dp_no_solution": {
            "javascript": [17], "cpp": [20], "python": [13], "java": [17], "rust": [17],
            "typescript": [17], "go": [20, 21],
        },
        "return": {
            "javascript": [17], "cpp": [20], "python": [13], "java": [17], "rust": [17],
            "typescript": [17], "go": [22],
        },
        "initialization": {
            "javascript": [1], "cpp": [6], "python": [1], "java": [3], "rust": [1],
            "typescript": [1], "go": [6],
        },
    }
)
