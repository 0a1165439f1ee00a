"""Render a problem record as a readable Markdown document."""

from domain.models.problem import NO_LIMIT, ProblemRecord

NONE_TEXT = "none"


def _block(heading: str, body: str) -> str:
    return f"## {heading}\n\n{body or NONE_TEXT}"


def _fenced(text: str) -> str:
    return f"```\n{text}\n```"


def format_problem(record: ProblemRecord, problem_id: str, url: str) -> str:
    """
    Render ``record`` for tool output.

    Layout: title, metadata, link, description, input format, output format,
    one block per sample, then constraints when there are any.
    """
    tags = ", ".join(record.tags) if record.tags else NONE_TEXT

    blocks = [
        f"# {problem_id} {record.title}",
        f"**Difficulty:** {record.difficulty} | **Tags:** {tags}",
        f"**Link:** {url}",
        _block("Description", record.description),
        _block("Input Format", record.input_format),
        _block("Output Format", record.output_format),
    ]

    for number, sample in enumerate(record.samples, start=1):
        blocks.append(
            f"## Sample {number}\n\n"
            f"Input:\n\n{_fenced(sample.input)}\n\n"
            f"Output:\n\n{_fenced(sample.output)}"
        )

    if record.limit and record.limit != NO_LIMIT:
        blocks.append(_block("Constraints", record.limit))

    return "\n\n".join(blocks) + "\n"
