"""Balanced brackets check with an explicit stack."""

from __future__ import annotations

from algotrace.constants import (
    BALANCED_PARENTHESES,
    BRACKET_PAIRS,
    EMPHASIS_STEP_DURATION,
    MAX_STRING_LENGTH,
    OPENING_BRACKETS,
)
from algotrace.generators._base import (
    TraceBuilder,
    indices,
    require,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import StackElement
from algotrace.trace_types import (
    DataStructureKind,
    Operation,
    Step,
    StepContext,
    StepType,
)

INPUT = "input"
STACK = "stack"

BALANCED_STYLES = frozenset({"current", "processing", "compare", "match", "invalid"})


@returns_empty_on_invalid_input
def generate_balanced_parentheses_steps(text: str) -> list[Step]:
    """Check that every bracket in *text* is closed in the right order."""
    require(isinstance(text, str), BALANCED_PARENTHESES, "input must be a string")
    require(
        len(text) <= MAX_STRING_LENGTH,
        BALANCED_PARENTHESES,
        f"input must have at most {MAX_STRING_LENGTH} characters",
    )
    require(
        all(ch in OPENING_BRACKETS or ch in BRACKET_PAIRS for ch in text),
        BALANCED_PARENTHESES,
        "input may only contain ()[]{}",
    )

    chars = list(text)
    stack: list[StackElement] = []
    trace = TraceBuilder(
        BALANCED_PARENTHESES,
        {
            INPUT: (DataStructureKind.ARRAY, "Input"),
            STACK: (DataStructureKind.STACK, "Stack"),
        },
        BALANCED_STYLES,
    )

    def state() -> dict:
        return {INPUT: chars, STACK: stack}

    def top_highlight(style: str) -> list:
        return [indices(style, [len(stack) - 1])] if stack else []

    def fail(explanation: str, index: int | None) -> list[Step]:
        trace.emit(
            StepType.VALIDATION_FAILURE,
            explanation,
            state(),
            {
                INPUT: [indices("invalid", [index] if index is not None else [])],
                STACK: top_highlight("invalid"),
            },
            variables={"isValid": False, "stackSize": len(stack)},
            duration=EMPHASIS_STEP_DURATION,
        )
        return trace.finish()

    trace.emit(
        StepType.INITIALIZATION,
        f'Check whether "{text}" is balanced using a stack of open brackets',
        state(),
        variables={"length": len(chars), "stackSize": 0},
    )

    for i, ch in enumerate(chars):
        done = list(range(i))
        trace.emit(
            StepType.CHARACTER_ACCESS,
            f"Read '{ch}' at position {i}",
            state(),
            {INPUT: [indices("current", [i]), indices("match", done)]},
            StepContext(operation=Operation.READ, character_index=i),
            {"i": i, "char": ch, "stackSize": len(stack)},
        )
        opening = ch in OPENING_BRACKETS
        trace.emit(
            StepType.CHARACTER_CHECK,
            f"'{ch}' is an " + ("opening bracket" if opening else "closing bracket"),
            state(),
            {INPUT: [indices("current", [i]), indices("match", done)]},
            StepContext(operation=Operation.COMPARE, character_index=i),
            {"i": i, "char": ch, "isOpening": opening},
        )
        if opening:
            stack.append(StackElement(value=ch, index=i))
            trace.emit(
                StepType.STACK_PUSH,
                f"Push '{ch}' onto the stack",
                state(),
                {INPUT: [indices("processing", [i])], STACK: top_highlight("processing")},
                StepContext(operation=Operation.WRITE, data_structure="stack", character_index=i),
                {"i": i, "char": ch, "stackSize": len(stack)},
            )
            continue

        if not stack:
            return fail(f"'{ch}' at position {i} has no opening bracket to match", i)

        top = stack[-1]
        expected = BRACKET_PAIRS[ch]
        trace.emit(
            StepType.STACK_PEEK,
            f"Top of stack is '{top.value}'; '{ch}' needs '{expected}'",
            state(),
            {INPUT: [indices("compare", [i])], STACK: top_highlight("compare")},
            StepContext(operation=Operation.READ, data_structure="stack", character_index=i),
            {"i": i, "char": ch, "top": top.value, "expected": expected},
        )
        if top.value != expected:
            return fail(f"Mismatch: '{top.value}' cannot be closed by '{ch}'", i)

        stack.pop()
        trace.emit(
            StepType.STACK_POP,
            f"'{top.value}' matches '{ch}': pop it",
            state(),
            {INPUT: [indices("match", [top.index, i])]},
            StepContext(operation=Operation.WRITE, data_structure="stack", character_index=i),
            {"i": i, "char": ch, "stackSize": len(stack)},
        )

    if stack:
        leftover = "".join(e.value for e in stack)
        return fail(f"Unclosed bracket(s) left on the stack: {leftover}", stack[-1].index)

    trace.emit(
        StepType.VALIDATION_SUCCESS,
        "Every bracket was matched and the stack is empty: balanced",
        state(),
        {INPUT: [indices("match", range(len(chars)))]},
        variables={"isValid": True, "stackSize": 0},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
