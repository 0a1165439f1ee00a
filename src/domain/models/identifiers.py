"""Value objects for problem identification."""

import re
from dataclasses import dataclass

from domain.exceptions import ProblemIdFormatError

PROBLEM_ID_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Luogu problem (P1001, CF1234A, AT_abc123_a, ...)."""

    problem_id: str

    def __str__(self) -> str:
        """String representation."""
        return self.problem_id

    @classmethod
    def parse(cls, raw: object) -> "ProblemIdentifier":
        """Validate a raw identifier and wrap it."""
        if not isinstance(raw, str) or not PROBLEM_ID_PATTERN.fullmatch(raw):
            raise ProblemIdFormatError(raw)
        return cls(problem_id=raw)
