from api.schemas.problem import ErrorResponse, ProblemResponse, SampleResponse

__all__ = ["ErrorResponse", "ProblemResponse", "SampleResponse"]
