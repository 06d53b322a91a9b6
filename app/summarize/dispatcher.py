from enum import Enum
from typing import FrozenSet, List, Optional, Tuple


class SummaryFormat(str, Enum):
    """The five report templates a summary can be rendered with."""

    BULLET = "bullet"
    ACTION_ITEMS = "action_items"
    METRICS = "metrics"
    DECISIONS = "decisions"
    COMPREHENSIVE = "comprehensive"


# Evaluated top to bottom, first hit wins. Any keyword of a group is enough.
FORMAT_RULES: List[Tuple[FrozenSet[str], SummaryFormat]] = [
    (frozenset({"bullet", "executive"}), SummaryFormat.BULLET),
    (frozenset({"action", "deadline"}), SummaryFormat.ACTION_ITEMS),
    (frozenset({"metric", "data"}), SummaryFormat.METRICS),
    (frozenset({"decision", "next step"}), SummaryFormat.DECISIONS),
]

DEFAULT_FORMAT = SummaryFormat.COMPREHENSIVE


def select_format(instructions: Optional[str]) -> SummaryFormat:
    """Pick the report format from the user's instructions via case-insensitive substring tests against FORMAT_RULES; falls back to comprehensive (also for empty instructions).
    Why available: Only the instruction text steers the template; the transcript never does."""
    text = (instructions or "").lower()
    for keywords, fmt in FORMAT_RULES:
        if any(k in text for k in keywords):
            return fmt
    return DEFAULT_FORMAT
