"""
Heuristic fragment extraction from raw meeting transcripts.
Each extractor is a pure function of the transcript string and degrades to an empty list instead of raising.
"""
import re
from dataclasses import dataclass, field
from itertools import islice
from typing import List


SPEAKER_RE = re.compile(r"(\w+):")

# Vocabulary order is the output order.
TOPIC_VOCABULARY = (
    "sales",
    "revenue",
    "marketing",
    "targets",
    "campaign",
    "deals",
    "supply chain",
    "delivery",
    "customer",
    "support",
    "meeting",
    "quarterly",
    "performance",
)

# ASCII digits only
NUMBER_RE = re.compile(r"\$?\d+(?:,\d+)*(?:\.\d+)?[%MK]?", re.ASCII)
MAX_NUMBERS = 10

MODAL_PHRASES = ("can you", "will", "I'll", "let's", "need to", "should")
ACTION_RE = re.compile(
    r"(\w+)[:,]?\s*(" + "|".join(re.escape(p) for p in MODAL_PHRASES) + r")([^.!?]*[.!?])",
    re.IGNORECASE,
)
MAX_ACTION_ITEMS = 5


@dataclass(frozen=True)
class ActionItem:
    """One commitment found in the transcript. `action` is the modal phrase plus the rest of the sentence, verbatim (untrimmed)."""

    person: str
    action: str


@dataclass
class Fragments:
    """The four extractor outputs for one transcript, as consumed by the renderers."""

    speakers: List[str] = field(default_factory=list)
    topics: List[str] = field(default_factory=list)
    numbers: List[str] = field(default_factory=list)
    action_items: List[ActionItem] = field(default_factory=list)


def extract_speakers(transcript: str) -> List[str]:
    """Return distinct `Name:` labels (colon stripped) in first-appearance order. Dedup is case-sensitive.
    Why available: Feeds the participants line of the bullet and comprehensive reports."""
    try:
        labels = SPEAKER_RE.findall(transcript)
    except Exception:
        return []
    return list(dict.fromkeys(labels))


def extract_topics(transcript: str) -> List[str]:
    """Return the vocabulary terms that occur (case-insensitive substring) anywhere in the transcript, in vocabulary order."""
    try:
        lowered = transcript.lower()
    except Exception:
        return []
    return [topic for topic in TOPIC_VOCABULARY if topic in lowered]


def extract_numbers(transcript: str) -> List[str]:
    """Return the first MAX_NUMBERS currency / percentage / magnitude tokens (e.g. $2.3M, 15%, $500K, 1,200) in transcript order, unmodified."""
    try:
        return [m.group(0) for m in islice(NUMBER_RE.finditer(transcript), MAX_NUMBERS)]
    except Exception:
        return []


def extract_action_items(transcript: str) -> List[ActionItem]:
    """Scan left to right for `<word>[:,]? <modal phrase> ... <.!?>` and return at most MAX_ACTION_ITEMS records.
    person is the word right before the modal phrase; action is the modal phrase concatenated with the rest of the sentence.
    Why available: Drives the action-item sections of every report format except metrics."""
    try:
        return [
            ActionItem(person=m.group(1), action=m.group(2) + m.group(3))
            for m in islice(ACTION_RE.finditer(transcript), MAX_ACTION_ITEMS)
        ]
    except Exception:
        return []


def extract_fragments(transcript: str) -> Fragments:
    """Run all four extractors (independently of each other) and bundle their outputs."""
    return Fragments(
        speakers=extract_speakers(transcript),
        topics=extract_topics(transcript),
        numbers=extract_numbers(transcript),
        action_items=extract_action_items(transcript),
    )
