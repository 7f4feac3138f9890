"""Page layout for the profile report.

The layout is computed as a list of positioned text blocks before anything is
drawn, which keeps cursor arithmetic testable without a PDF reader:
- A single 600x800 page with a 50 point left margin
- A running vertical cursor starting 50 points below the top edge
- Multi-line section bodies advance the cursor by
  ``LINE_SPACING * (lines + 1) + SECTION_GAP`` so blocks never overlap
"""

from dataclasses import dataclass
from typing import Optional

from ghreport.models import AggregateRecord
from ghreport.pdf.fonts import drawable_text, text_width
from ghreport.report.summaries import (
    evaluate_experience,
    evaluate_repo_impact,
    evaluate_tech_stack,
)

PAGE_SIZE = (600, 800)
MARGIN_X = 50
MARGIN_TOP = 50
LINE_SPACING = 24
TITLE_SPACING = 30
SECTION_GAP = 30

TITLE = "GitHub Profile Report"
TITLE_SIZE = 24
HEADING_SIZE = 20
BODY_SIZE = 18
NOT_AVAILABLE = "N/A"

Color = tuple[float, float, float]
BLACK: Color = (0, 0, 0)
TITLE_COLOR: Color = (0, 0.53, 0.71)
HEADING_COLOR: Color = (0.2, 0.2, 0.2)


@dataclass(frozen=True)
class TextBlock:
    """A run of lines drawn from baseline ``y`` downward."""

    lines: tuple[str, ...]
    x: float
    y: float
    size: float
    color: Color = BLACK
    leading: float = LINE_SPACING

    @property
    def bottom(self) -> float:
        """Baseline of the last line."""
        return self.y - self.leading * (len(self.lines) - 1)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _display(value: Optional[object]) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def wrap_text(text: str, size: float, max_width: float) -> tuple[str, ...]:
    """Split ``text`` on newlines, then wrap each line to ``max_width``.

    Words are measured across font runs, so mixed-script lines wrap at their
    drawn width. A single word wider than ``max_width`` keeps its own line.
    """
    lines: list[str] = []
    for raw_line in text.split("\n"):
        current = ""
        for word in raw_line.split():
            candidate = f"{current} {word}" if current else word
            if current and text_width(candidate, size) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return tuple(lines)


def profile_fields(record: AggregateRecord) -> list[str]:
    profile = record.profile
    return [
        f"Name: {_display(profile.name)}",
        f"Username: {_display(profile.login)}",
        f"Public Repos: {_display(profile.public_repos)}",
        f"Followers: {_display(profile.followers)}",
        f"Following: {_display(profile.following)}",
    ]


def report_sections(record: AggregateRecord) -> list[tuple[str, str]]:
    """Section headings paired with their summary text, in page order."""
    return [
        ("Tech Stack Evaluation:", evaluate_tech_stack(record.repos)),
        ("Experience Evaluation:", evaluate_experience(record.repos)),
        ("Repository Impact:", evaluate_repo_impact(record.repos)),
    ]


def plan_report_layout(record: AggregateRecord) -> list[TextBlock]:
    """Position every text block of the report on the page.

    Args:
        record: Profile and repositories to report on

    Returns:
        Text blocks in drawing order, top to bottom
    """
    width, height = PAGE_SIZE
    max_width = width - 2 * MARGIN_X
    blocks: list[TextBlock] = []

    y = height - MARGIN_TOP
    blocks.append(
        TextBlock((TITLE,), MARGIN_X, y, TITLE_SIZE, TITLE_COLOR, TITLE_SPACING)
    )
    y -= TITLE_SPACING

    fields = profile_fields(record)
    for index, field_text in enumerate(fields):
        blocks.append(TextBlock((drawable_text(field_text),), MARGIN_X, y, BODY_SIZE))
        if index < len(fields) - 1:
            y -= LINE_SPACING

    y -= SECTION_GAP
    for heading, body in report_sections(record):
        blocks.append(TextBlock((heading,), MARGIN_X, y, HEADING_SIZE, HEADING_COLOR))
        y -= LINE_SPACING

        lines = wrap_text(drawable_text(body), BODY_SIZE, max_width)
        blocks.append(TextBlock(lines, MARGIN_X, y, BODY_SIZE))
        y -= LINE_SPACING * (len(lines) + 1) + SECTION_GAP

    return blocks
