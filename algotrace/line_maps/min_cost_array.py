"""Source line mapping for the minimum cost array reduction."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

MIN_COST_ARRAY_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [1], "cpp": [4], "python": [1], "java": [4], "rust": [1],
            "typescript": [1], "go": [7],
        },
        "base_case_check": {
            "javascript": [2, 3, 4], "cpp": [5, 6, 7], "python": [2, 3], "java": [5, 6, 7],
            "rust": [2, 3, 4], "typescript": [2, 3, 4], "go": [8, 9, 10],
        },
        "greedy_insight": {
            "javascript": [7], "cpp": [10], "python": [6], "java": [10], "rust": [7],
            "typescript": [7], "go": span(13, 18),
        },
        "formula_derivation": {
            "javascript": [11], "cpp": [13], "python": [9], "java": [13], "rust": [10],
            "typescript": [10], "go": [21],
        },
        "decision_tree": {
            "javascript": [7, 11], "cpp": [10, 13], "python": [6, 9], "java": [10, 13],
            "rust": [7, 10], "typescript": [7, 10], "go": [13, 14, 15, 16, 17, 18, 21],
        },
        "greedy_selection": {
            "javascript": [7], "cpp": [10], "python": [6], "java": [10], "rust": [7],
            "typescript": [7], "go": span(13, 18),
        },
        "cost_calculation": {
            "javascript": [11], "cpp": [13], "python": [9], "java": [13], "rust": [10],
            "typescript": [10], "go": [21],
        },
        "pair_comparison": {
            "javascript": [7, 11], "cpp": [10, 13], "python": [6, 9], "java": [10, 13],
            "rust": [7, 10], "typescript": [7, 10], "go": [13, 14, 15, 16, 17, 18, 21],
        },
        "element_removal": {
            "javascript": [11], "cpp": [13], "python": [9], "java": [13], "rust": [10],
            "typescript": [10], "go": [21],
        },
        "optimality_proof": {
            "javascript": [13], "cpp": [15], "python": [11], "java": [15], "rust": [12],
            "typescript": [12], "go": [23],
        },
        "return": {
            "javascript": [13], "cpp": [15], "python": [11], "java": [15], "rust": [12],
            "typescript": [12], "go": [23],
        },
    }
)
