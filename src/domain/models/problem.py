"""Domain model for an extracted problem."""

from dataclasses import dataclass, field
from typing import Any

from .identifiers import ProblemIdentifier

UNKNOWN_TITLE = "unknown title"
NO_DESCRIPTION = "no description"
NO_INPUT_FORMAT = "no input format"
NO_OUTPUT_FORMAT = "no output format"
NO_LIMIT = "no constraints"
UNKNOWN_DIFFICULTY = "unknown difficulty"


@dataclass(frozen=True)
class Sample:
    """One sample test case."""

    input: str
    output: str


@dataclass(frozen=True)
class ProblemRecord:
    """Structured data extracted from a problem page."""

    title: str = UNKNOWN_TITLE
    description: str = NO_DESCRIPTION
    input_format: str = NO_INPUT_FORMAT
    output_format: str = NO_OUTPUT_FORMAT
    limit: str = NO_LIMIT
    difficulty_num: int | None = None
    difficulty: str = UNKNOWN_DIFFICULTY
    tags: tuple[str, ...] = ()
    samples: tuple[Sample, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "difficultyNum": self.difficulty_num,
            "difficulty": self.difficulty,
            "tags": list(self.tags),
            "description": self.description,
            "inputFormat": self.input_format,
            "outputFormat": self.output_format,
            "samples": [{"input": s.input, "output": s.output} for s in self.samples],
            "limit": self.limit,
        }


@dataclass(frozen=True)
class FetchedProblem:
    """A problem record together with where it came from."""

    identifier: ProblemIdentifier
    url: str
    record: ProblemRecord = field(default_factory=ProblemRecord)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.identifier.problem_id, "url": self.url, **self.record.to_dict()}
