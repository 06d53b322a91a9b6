from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.summarize.dispatcher import SummaryFormat, select_format
from app.summarize.extractors import Fragments, extract_fragments
from app.summarize.renderers import render


class ProcessingError(Exception):
    """Raised when summarization fails unexpectedly; carries the original failure's message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class SummaryResult:
    """A rendered report plus the format that was chosen and the fragments it was built from."""

    summary: str
    format: SummaryFormat
    fragments: Fragments


def summarize_detailed(
    transcript: str,
    instructions: Optional[str] = "",
    today: Optional[date] = None,
) -> SummaryResult:
    """Extract speakers, topics, numbers and action items from the transcript, pick a format from the instructions and render it.
    Any unexpected failure is re-raised as ProcessingError("AI processing failed: ..."); there is no retry and no partial result.
    Why available: The API needs the chosen format and fragments alongside the text; summarize() returns only the text."""
    try:
        fragments = extract_fragments(transcript)
        fmt = select_format(instructions)
        summary = render(fmt, fragments, today=today)
    except Exception as e:
        raise ProcessingError(f"AI processing failed: {e}") from e
    return SummaryResult(summary=summary, format=fmt, fragments=fragments)


def summarize(transcript: str, instructions: Optional[str] = "") -> str:
    """Plain blocking entry point: transcript + instructions -> report text. Raises ProcessingError."""
    return summarize_detailed(transcript, instructions).summary


def word_count(text: str) -> int:
    """Number of whitespace-separated words in a report (0 for empty text)."""
    return len((text or "").split())
