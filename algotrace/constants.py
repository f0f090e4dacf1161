"""Named constants: input caps, languages, algorithm ids, playback defaults."""

from __future__ import annotations

# ── Input caps (keep traces small enough to render) ─────────────────

MAX_ARRAY_LENGTH = 15
MAX_ABS_VALUE = 999

MAX_COIN_DENOMINATIONS = 6
MAX_COIN_VALUE = 100
MAX_COIN_AMOUNT = 100

MAX_GRAPH_NODES = 8
MAX_GRAPH_EDGES = 12

MAX_LINKED_LIST_LENGTH = 10
MAX_FACTORIAL_N = 8
MAX_TREE_NODES = 15
MAX_STRING_LENGTH = 20

BRACKET_PAIRS: dict[str, str] = {")": "(", "]": "[", "}": "{"}
OPENING_BRACKETS = frozenset(BRACKET_PAIRS.values())

# ── Target languages of the code listings ───────────────────────────

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "javascript",
    "cpp",
    "python",
    "java",
    "rust",
    "typescript",
    "go",
)

# ── Algorithm ids ───────────────────────────────────────────────────

BUBBLE_SORT = "bubble-sort"
BINARY_SEARCH = "binary-search"
LINEAR_SEARCH = "linear-search"
TWO_SUM = "two-sum"
COIN_CHANGE = "coin-change"
CYCLE_DETECTION = "cycle-detection"
K_LARGEST_ELEMENTS = "k-largest-elements"
REVERSE_LINKED_LIST = "reverse-linked-list"
FACTORIAL = "factorial"
BALANCED_PARENTHESES = "balanced-parentheses"
IN_ORDER_TRAVERSAL = "in-order-traversal"
BFS_TRAVERSAL = "bfs-traversal"
MIN_COST_ARRAY = "min-cost-array"
ANAGRAM_DETECTION = "anagram-detection"

# ── Playback pacing (milliseconds) ──────────────────────────────────

DEFAULT_STEP_DURATION = 1000
DEFAULT_STEP_DELAY = 0
EMPHASIS_STEP_DURATION = 2000
