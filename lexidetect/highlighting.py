"""Module resolving overlapping critical sections for display."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from lexidetect.data_models import CriticalSection


class TextSegment(BaseModel):
    """A piece of the analysed text, flagged or not."""

    text: str
    section: CriticalSection | None = None

    model_config = ConfigDict(frozen=True)


def resolve_overlaps(sections: Iterable[CriticalSection]) -> list[CriticalSection]:
    """
    Drop sections overlapping sections that start earlier.

    Sections are taken in the order of their starts. A section starting before
    the end of the last taken section is skipped, i.e. the first one wins.

    Args:
        sections (Iterable[CriticalSection]): Possibly overlapping sections.

    Returns:
        list[CriticalSection]: Non-overlapping sections sorted by their starts.
    """
    resolved = []
    cursor = 0
    for section in sorted(sections, key=lambda section: section.start):
        if section.start < cursor:
            continue
        resolved.append(section)
        cursor = section.end
    return resolved


def segment_text(
    text: str, sections: Iterable[CriticalSection]
) -> list[TextSegment]:
    """
    Partition a text into plain and flagged segments.

    Args:
        text (str): The analysed text.
        sections (Iterable[CriticalSection]): Critical sections of the text.

    Returns:
        list[TextSegment]: Segments in the order of the text. Their texts joined
            together are equal to the original text.
    """
    segments = []
    cursor = 0
    for section in resolve_overlaps(sections):
        if section.start > cursor:
            segments.append(TextSegment(text=text[cursor : section.start]))
        segments.append(TextSegment(text=section.text, section=section))
        cursor = section.end
    if cursor < len(text):
        segments.append(TextSegment(text=text[cursor:]))
    return segments
