"""Pydantic schemas for problem API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from domain.models import FetchedProblem


class SampleResponse(BaseModel):
    """One sample test case."""

    input: str
    output: str


class ProblemResponse(BaseModel):
    """Response containing problem information."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    url: str  # Page the record was extracted from
    title: str
    difficulty_num: int | None = Field(default=None, alias="difficultyNum")
    difficulty: str
    tags: list[str]
    description: str
    input_format: str = Field(alias="inputFormat")
    output_format: str = Field(alias="outputFormat")
    samples: list[SampleResponse]
    limit: str

    @classmethod
    def from_fetched(cls, fetched: FetchedProblem) -> "ProblemResponse":
        return cls.model_validate(fetched.to_dict())


class ErrorResponse(BaseModel):
    """Flat error body returned by REST endpoints."""

    error: str
