"""Error taxonomy for trace generation."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Caller-supplied input lies outside an algorithm's supported domain.

    Raised by the validation helpers and converted to an empty trace at
    the generator boundary; it never escapes a public generator.
    """

    def __init__(self, algorithm_id: str, reason: str):
        self.algorithm_id = algorithm_id
        self.reason = reason
        super().__init__(f"{algorithm_id}: {reason}")
