"""Anagram detection by comparing character frequency maps."""

from __future__ import annotations

from algotrace.constants import ANAGRAM_DETECTION, EMPHASIS_STEP_DURATION, MAX_STRING_LENGTH
from algotrace.generators._base import (
    TraceBuilder,
    ids,
    indices,
    require,
    returns_empty_on_invalid_input,
)
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

STRING_1 = "string1"
STRING_2 = "string2"
FREQ_1 = "frequencyMap1"
FREQ_2 = "frequencyMap2"

ANAGRAM_STYLES = frozenset({"current", "processing", "compare", "match", "invalid"})


def _normalize(text: str) -> str:
    return "".join(text.lower().split())


@returns_empty_on_invalid_input
def generate_anagram_steps(first: str, second: str) -> list[Step]:
    """Decide whether *first* and *second* are anagrams, ignoring case and spaces."""
    for name, text in (("first", first), ("second", second)):
        require(isinstance(text, str), ANAGRAM_DETECTION, f"{name} must be a string")
        require(
            len(text) <= MAX_STRING_LENGTH,
            ANAGRAM_DETECTION,
            f"{name} must have at most {MAX_STRING_LENGTH} characters",
        )

    s1, s2 = list(_normalize(first)), list(_normalize(second))
    freq1: dict[str, int] = {}
    freq2: dict[str, int] = {}
    trace = TraceBuilder(
        ANAGRAM_DETECTION,
        {
            STRING_1: (DataStructureKind.ARRAY, "String 1"),
            STRING_2: (DataStructureKind.ARRAY, "String 2"),
            FREQ_1: (DataStructureKind.HASH_MAP, "Frequencies of String 1"),
            FREQ_2: (DataStructureKind.HASH_MAP, "Frequencies of String 2"),
        },
        ANAGRAM_STYLES,
    )

    def state() -> dict:
        return {STRING_1: s1, STRING_2: s2, FREQ_1: freq1, FREQ_2: freq2}

    def verdict(found: bool, explanation: str, highlights: dict | None = None) -> list[Step]:
        trace.emit(
            StepType.RETURN_FOUND if found else StepType.RETURN_NOT_FOUND,
            explanation,
            state(),
            highlights,
            variables={"isAnagram": found},
            duration=EMPHASIS_STEP_DURATION,
        )
        return trace.finish()

    trace.emit(
        StepType.INITIALIZATION,
        f'Are "{first}" and "{second}" anagrams? Compare lowercase letters, ignoring spaces',
        state(),
        variables={"string1": "".join(s1), "string2": "".join(s2)},
    )

    same_length = len(s1) == len(s2)
    trace.emit(
        StepType.STRING_COMPARISON,
        f"Lengths {len(s1)} and {len(s2)}: "
        + ("equal, keep going" if same_length else "different, they cannot be anagrams"),
        state(),
        {
            STRING_1: [indices("compare" if same_length else "invalid", range(len(s1)))],
            STRING_2: [indices("compare" if same_length else "invalid", range(len(s2)))],
        },
        StepContext(operation=Operation.COMPARE),
        {"length1": len(s1), "length2": len(s2)},
    )
    if not same_length:
        return verdict(False, "Different lengths: not anagrams")

    trace.emit(
        StepType.HASH_MAP_CREATION,
        "Create one empty frequency map per string",
        state(),
        context=StepContext(operation=Operation.WRITE, data_structure="hash_map"),
        variables={"distinct1": 0, "distinct2": 0},
    )

    for number, (name, chars, freq, freq_name) in enumerate(
        ((STRING_1, s1, freq1, FREQ_1), (STRING_2, s2, freq2, FREQ_2)), start=1
    ):
        trace.emit(
            StepType.STRING_ITERATION,
            f"Count the characters of string {number}",
            state(),
            {name: [indices("processing", range(len(chars)))]},
            StepContext(loop_type=LoopType.OUTER, iteration_number=number),
            {"string": number, "length": len(chars)},
        )
        for i, ch in enumerate(chars):
            trace.emit(
                StepType.CHARACTER_ACCESS,
                f"String {number}: read '{ch}' at position {i}",
                state(),
                {name: [indices("current", [i])]},
                StepContext(operation=Operation.READ, character_index=i, iteration_number=number),
                {"string": number, "i": i, "char": ch},
            )
            freq[ch] = freq.get(ch, 0) + 1
            trace.emit(
                StepType.FREQUENCY_COUNT,
                f"'{ch}' now appears {freq[ch]} time(s) in string {number}",
                state(),
                {name: [indices("current", [i])], freq_name: [ids("processing", [ch])]},
                StepContext(
                    operation=Operation.WRITE, data_structure="hash_map", character_index=i
                ),
                {"string": number, "char": ch, "count": freq[ch]},
            )

    for key in sorted(set(freq1) | set(freq2)):
        count1, count2 = freq1.get(key, 0), freq2.get(key, 0)
        equal = count1 == count2
        style = "match" if equal else "invalid"
        trace.emit(
            StepType.HASH_MAP_COMPARISON,
            f"'{key}': {count1} in string 1, {count2} in string 2"
            + ("" if equal else ": counts differ"),
            state(),
            {
                FREQ_1: [ids(style, [key] if key in freq1 else [])],
                FREQ_2: [ids(style, [key] if key in freq2 else [])],
            },
            StepContext(operation=Operation.COMPARE, data_structure="hash_map"),
            {"char": key, "count1": count1, "count2": count2},
        )
        if not equal:
            return verdict(False, f"'{key}' occurs a different number of times: not anagrams")

    return verdict(
        True,
        "Every character occurs equally often: the strings are anagrams",
        {FREQ_1: [ids("match", list(freq1))], FREQ_2: [ids("match", list(freq2))]},
    )
