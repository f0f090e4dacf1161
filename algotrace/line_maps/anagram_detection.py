"""Source line mapping for anagram detection."""

from __future__ import annotations

from algotrace.line_mapping import parse_line_mapping, span

ANAGRAM_DETECTION_LINES = parse_line_mapping(
    {
        "initialization": {
            "javascript": [2, 3], "cpp": span(6, 9), "python": [2, 3], "java": [4, 5],
            "rust": [3, 4], "typescript": [2, 3], "go": [4, 5],
        },
        "string_comparison": {
            "javascript": [5, 6, 7], "cpp": [11, 12, 13], "python": [5, 6, 7],
            "java": [7, 8, 9], "rust": [7, 8, 9], "typescript": [5, 6, 7], "go": [7, 8, 9],
        },
        "hash_map_creation": {
            "javascript": [10], "cpp": [15], "python": [9], "java": [11], "rust": [12],
            "typescript": [9], "go": [12],
        },
        "string_iteration": {
            "javascript": [11], "cpp": [16], "python": [10], "java": [12], "rust": [13],
            "typescript": [10], "go": [13],
        },
        "character_access": {
            "javascript": [12], "cpp": [16], "python": [10], "java": [13], "rust": [13],
            "typescript": [11], "go": [13],
        },
        "frequency_count": {
            "javascript": [13], "cpp": [17], "python": [11], "java": [14], "rust": [14],
            "typescript": [12], "go": [14],
        },
        "hash_map_comparison": {
            "javascript": span(17, 21), "cpp": span(20, 24), "python": span(14, 17),
            "java": span(17, 21), "rust": span(17, 20), "typescript": span(15, 20),
            "go": span(17, 20),
        },
        "return_found": {
            "javascript": [24], "cpp": [26], "python": [19], "java": [24], "rust": [23],
            "typescript": [23], "go": [23],
        },
        "return_not_found": {
            "javascript": [6, 20], "cpp": [12, 23], "python": [6, 16], "java": [8, 20],
            "rust": [8, 19], "typescript": [6, 19], "go": [8, 19],
        },
    }
)
