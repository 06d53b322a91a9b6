import re
from typing import List, Tuple

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

EMPTY_TRANSCRIPT_MESSAGE = "Please provide a valid meeting transcript before generating a summary."
SHORT_TRANSCRIPT_MESSAGE = "Transcript is too short. Please provide more content for better summarization."
NO_RECIPIENTS_MESSAGE = "Please provide valid email addresses before sending."


def check_transcript(text: str, min_chars: int) -> Tuple[bool, str]:
    """Return (ok, feedback) for a transcript after trimming: empty and too-short transcripts are rejected; an accepted one reports its character count.
    Why available: Same rule the form shows inline and the API enforces before summarizing."""
    t = (text or "").strip()
    if not t:
        return False, EMPTY_TRANSCRIPT_MESSAGE
    if len(t) < min_chars:
        return False, SHORT_TRANSCRIPT_MESSAGE
    return True, f"Ready for processing ({len(t)} characters)"


def parse_recipients(raw: str) -> List[str]:
    """Split a comma-separated recipients field, trimming each entry and dropping blanks."""
    return [e.strip() for e in (raw or "").split(",") if e.strip()]


def check_recipients(emails: List[str]) -> Tuple[bool, str]:
    """Return (ok, feedback) for parsed recipients. Every address must look like local@domain.tld."""
    if not emails:
        return False, NO_RECIPIENTS_MESSAGE
    invalid = [e for e in emails if not EMAIL_RE.match(e)]
    if invalid:
        return False, f"Invalid email addresses: {', '.join(invalid)}"
    return True, f"{len(emails)} valid recipient(s)"
