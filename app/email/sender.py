"""
Simulated email delivery for finished summaries.
Nothing leaves the process: a send waits for a random delay, logs the event and returns the confirmation text.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from app.observability.events import log_event
from app.utils.latency import NO_DELAY, simulate_delay

DEFAULT_SUBJECT = "Meeting Summary"
PREVIEW_PLACEHOLDER = "[Summary will appear here]"


@dataclass
class EmailPreview:
    subject: str
    body: str


def resolve_subject(subject: Optional[str]) -> str:
    return (subject or "").strip() or DEFAULT_SUBJECT


def build_preview(subject: Optional[str], summary: Optional[str]) -> EmailPreview:
    """Build what the recipient would see: subject (defaults to "Meeting Summary") and the summary text, or a placeholder while there is none."""
    return EmailPreview(subject=resolve_subject(subject), body=summary or PREVIEW_PLACEHOLDER)


async def send_summary_email(
    recipients: List[str],
    subject: Optional[str],
    summary: str,
    delay_range: Tuple[float, float] = NO_DELAY,
) -> str:
    """Pretend to send the summary to already-validated recipients and return the confirmation message.
    Why available: Backs POST /email/send; keeps the form flow complete without a mail server."""
    await simulate_delay(delay_range)
    log_event(
        "email_simulated",
        recipients=len(recipients),
        subject=resolve_subject(subject),
        summary_chars=len(summary or ""),
    )
    return f"Summary successfully sent to {len(recipients)} recipient(s): {', '.join(recipients)}"
