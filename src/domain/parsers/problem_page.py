"""Parser for Luogu problem pages."""

import html
import json
import re
from typing import Any

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from loguru import logger

from domain.models.problem import (
    NO_DESCRIPTION,
    NO_INPUT_FORMAT,
    NO_LIMIT,
    NO_OUTPUT_FORMAT,
    UNKNOWN_DIFFICULTY,
    UNKNOWN_TITLE,
    ProblemRecord,
    Sample,
)
from domain.parsers.lookups import as_code, map_difficulty, map_tag
from domain.parsers.text import normalize


class ProblemPageParser:
    """
    Extracts a ProblemRecord from a raw problem page.

    The embedded ``lentille-context`` JSON payload is preferred. Every field the
    payload does not provide falls back to the ``<h2>``-labelled sections of the
    rendered page, and finally to a fixed sentinel. Parsing never raises.
    """

    PAYLOAD_SCRIPT_ID = "lentille-context"
    SECTION_HEADING = "h2"
    SKIPPED_TAGS = ("script", "style")

    DESCRIPTION_LABELS = ("题目描述", "Description")
    INPUT_FORMAT_LABELS = ("输入格式", "Input Format")
    OUTPUT_FORMAT_LABELS = ("输出格式", "Output Format")
    LIMIT_LABELS = ("说明/提示", "Hint")

    INPUT_SAMPLE_PATTERN = re.compile(r"^(?:输入样例|input sample)\s*#?\s*(\d+)$", re.IGNORECASE)
    OUTPUT_SAMPLE_PATTERN = re.compile(r"^(?:输出样例|output sample)\s*#?\s*(\d+)$", re.IGNORECASE)

    def parse(self, document: str | None) -> ProblemRecord:
        """Parse a problem page into a ProblemRecord."""
        soup = self._make_soup(document or "")
        problem = self._extract_payload(soup)
        content = problem.get("content")
        if not isinstance(content, dict):
            content = {}

        difficulty_num = None
        difficulty = UNKNOWN_DIFFICULTY
        if "difficulty" in problem:
            difficulty_num = as_code(problem["difficulty"])
            difficulty = map_difficulty(problem["difficulty"])

        record = ProblemRecord(
            title=self._resolve(problem.get("title"), self._extract_title(soup), UNKNOWN_TITLE),
            description=self._resolve(
                content.get("description"),
                self._extract_section(soup, self.DESCRIPTION_LABELS),
                NO_DESCRIPTION,
            ),
            input_format=self._resolve(
                content.get("formatI"),
                self._extract_section(soup, self.INPUT_FORMAT_LABELS),
                NO_INPUT_FORMAT,
            ),
            output_format=self._resolve(
                content.get("formatO"),
                self._extract_section(soup, self.OUTPUT_FORMAT_LABELS),
                NO_OUTPUT_FORMAT,
            ),
            limit=self._resolve(
                content.get("hint"),
                self._extract_section(soup, self.LIMIT_LABELS),
                NO_LIMIT,
            ),
            difficulty_num=difficulty_num,
            difficulty=difficulty,
            tags=self._extract_tags(problem),
            samples=self._extract_samples(problem, soup),
        )

        logger.debug(
            f"Parsed problem page: title={record.title!r}, "
            f"{len(record.samples)} sample(s), {len(record.tags)} tag(s)"
        )
        return record

    def _make_soup(self, document: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(document, "lxml")
        except Exception as e:
            logger.warning(f"Failed to build document tree, treating page as empty: {e}")
            return BeautifulSoup("", "lxml")

    def _extract_payload(self, soup: BeautifulSoup) -> dict[str, Any]:
        """Return the nested problem object of the embedded payload, or {}."""
        script = soup.find("script", id=self.PAYLOAD_SCRIPT_ID)
        if not script:
            logger.debug("No embedded payload found, using section fallback")
            return {}

        try:
            payload = json.loads(script.string)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Malformed embedded payload, using section fallback: {e}")
            return {}

        data = payload.get("data") if isinstance(payload, dict) else None
        problem = data.get("problem") if isinstance(data, dict) else None
        if not isinstance(problem, dict):
            logger.warning("Embedded payload has no problem object, using section fallback")
            return {}

        return problem

    @staticmethod
    def _resolve(primary: object, fallback: str, sentinel: str) -> str:
        if isinstance(primary, (str, int, float)) and not isinstance(primary, bool):
            text = normalize(str(primary))
            if text:
                return text
        return fallback or sentinel

    def _extract_title(self, soup: BeautifulSoup) -> str:
        try:
            heading = soup.find("h1")
            return normalize(heading.get_text()) if heading else ""
        except Exception as e:
            logger.warning(f"Failed to extract title: {e}")
            return ""

    def _extract_section(self, soup: BeautifulSoup, labels: tuple[str, ...]) -> str:
        """Text under the first heading whose text is one of ``labels``."""
        try:
            for heading in soup.find_all(self.SECTION_HEADING):
                if self._heading_text(heading) in labels:
                    return self._collect_section(heading)
            return ""
        except Exception as e:
            logger.warning(f"Failed to extract section {labels[0]!r}: {e}")
            return ""

    @staticmethod
    def _heading_text(heading: Tag) -> str:
        return " ".join(heading.get_text().split())

    def _collect_section(self, heading: Tag) -> str:
        """Normalized text between ``heading`` and the next heading of the same level."""
        parts = []
        for sibling in heading.next_siblings:
            if isinstance(sibling, Comment):
                continue
            if isinstance(sibling, Tag):
                if sibling.name == heading.name:
                    break
                if sibling.name in self.SKIPPED_TAGS:
                    continue
                if sibling.find(heading.name) is not None:
                    # Next heading is wrapped in a container: keep only what precedes it.
                    parts.extend(self._text_before(sibling, heading.name))
                    break
                parts.append(str(sibling))
            elif isinstance(sibling, NavigableString):
                # Re-escape bare text so "<" in prose is not mistaken for markup.
                parts.append(html.escape(str(sibling), quote=False))

        return html.unescape(normalize("".join(parts)))

    def _text_before(self, container: Tag, name: str) -> list[str]:
        """Escaped text nodes of ``container`` that come before its first ``name`` tag."""
        parts = []
        for node in container.descendants:
            if isinstance(node, Tag):
                if node.name == name:
                    break
                continue
            if isinstance(node, Comment) or node.parent.name in self.SKIPPED_TAGS:
                continue
            parts.append(html.escape(str(node), quote=False))
        return parts

    def _extract_tags(self, problem: dict[str, Any]) -> tuple[str, ...]:
        tag_ids = problem.get("tags")
        if not isinstance(tag_ids, list):
            return ()
        return tuple(map_tag(tag_id) for tag_id in tag_ids)

    def _extract_samples(self, problem: dict[str, Any], soup: BeautifulSoup) -> tuple[Sample, ...]:
        samples = problem.get("samples")
        if isinstance(samples, list):
            return tuple(
                Sample(input=normalize(pair[0]), output=normalize(pair[1]))
                for pair in samples
                if isinstance(pair, (list, tuple)) and len(pair) >= 2
            )

        try:
            return self._extract_samples_from_sections(soup)
        except Exception as e:
            logger.warning(f"Failed to extract samples: {e}")
            return ()

    def _extract_samples_from_sections(self, soup: BeautifulSoup) -> tuple[Sample, ...]:
        """Pair "input sample N" headings with the "output sample N" heading after them."""
        headings = soup.find_all(self.SECTION_HEADING)

        outputs: dict[str, int] = {}
        for position, heading in enumerate(headings):
            match = self.OUTPUT_SAMPLE_PATTERN.match(self._heading_text(heading))
            if match:
                outputs.setdefault(match.group(1), position)

        samples = []
        for position, heading in enumerate(headings):
            match = self.INPUT_SAMPLE_PATTERN.match(self._heading_text(heading))
            if not match:
                continue

            output_position = outputs.get(match.group(1))
            if output_position is None or output_position < position:
                logger.debug(f"Input sample {match.group(1)} has no matching output sample")
                continue

            samples.append(
                Sample(
                    input=self._collect_section(heading),
                    output=self._collect_section(headings[output_position]),
                )
            )

        return tuple(samples)


def extract(document: str | None) -> ProblemRecord:
    """Convenience function to extract a problem record from a page."""
    return ProblemPageParser().parse(document)
