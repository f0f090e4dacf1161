"""Line Mapping Table: step key -> language -> source line references."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, model_validator

from algotrace.constants import SUPPORTED_LANGUAGES


class LineRange(BaseModel):
    """Inclusive block of source lines with an optional focus line."""

    start: int
    end: int
    primary: int | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> LineRange:
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"invalid line range {self.start}..{self.end}")
        if self.primary is not None and not self.start <= self.primary <= self.end:
            raise ValueError(f"primary line {self.primary} outside {self.start}..{self.end}")
        return self

    def expand(self) -> list[int]:
        return list(range(self.start, self.end + 1))

    def primary_line(self) -> int:
        return self.primary if self.primary is not None else self.start


def span(start: int, end: int, primary: int | None = None) -> LineRange:
    return LineRange(start=start, end=end, primary=primary)


LineEntry = Union[list[int], LineRange]

# step key -> language -> entry
LineMappingTable = dict[str, dict[str, LineEntry]]


def _parse_entry(step_key: str, language: str, raw: Any) -> LineEntry:
    if isinstance(raw, LineRange):
        return raw
    if isinstance(raw, dict):
        return LineRange(**raw)
    if isinstance(raw, (list, tuple)):
        if not raw:
            raise ValueError(f"empty line list for {step_key!r}/{language}")
        if not all(isinstance(n, int) and n >= 1 for n in raw):
            raise ValueError(f"line numbers must be positive ints for {step_key!r}/{language}")
        return list(raw)
    raise ValueError(f"unsupported line entry for {step_key!r}/{language}: {raw!r}")


def parse_line_mapping(raw: dict[str, dict[str, Any]]) -> LineMappingTable:
    """Validate a table written as plain data.

    Entries are either a list of line numbers or a
    ``{"start": a, "end": b, "primary": p}`` range. Raises ``ValueError``
    on malformed entries (pydantic's ``ValidationError`` is a subclass).
    """
    return {
        step_key: {
            language: _parse_entry(step_key, language, entry)
            for language, entry in per_language.items()
        }
        for step_key, per_language in raw.items()
    }


def entry_lines(entry: LineEntry) -> list[int]:
    """Concrete lines for an entry: lists verbatim, ranges expanded."""
    if isinstance(entry, LineRange):
        return entry.expand()
    return list(entry)


def entry_primary(entry: LineEntry) -> int:
    if isinstance(entry, LineRange):
        return entry.primary_line()
    return entry[0]


def missing_languages(table: LineMappingTable) -> dict[str, list[str]]:
    """Step keys whose entry lacks one or more supported languages."""
    gaps = {
        step_key: [lang for lang in SUPPORTED_LANGUAGES if lang not in per_language]
        for step_key, per_language in table.items()
    }
    return {k: v for k, v in gaps.items() if v}
