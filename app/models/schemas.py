from pydantic import BaseModel, Field
from typing import List, Optional

from app.summarize.dispatcher import SummaryFormat


class SummarizeRequest(BaseModel):
    """Request body for /summarize and /regenerate. Why available: Carries the two form fields the summarizer needs."""

    transcript: str = Field(..., description="Meeting transcript, 'Speaker: utterance' segments")
    instructions: str = Field("", description="Free-text instructions; keywords choose the report format")


class ActionItemOut(BaseModel):
    """One extracted action item. action is verbatim from the transcript (not trimmed)."""

    person: str
    action: str


class SummarizeResponse(BaseModel):
    """Response for /summarize and /regenerate: report text, chosen format, word count and the extracted fragments. Why available: UI shows the text and word count; clients can inspect what was extracted."""

    summary: str
    format: SummaryFormat
    word_count: int = Field(..., ge=0)
    speakers: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    numbers: List[str] = Field(default_factory=list)
    action_items: List[ActionItemOut] = Field(default_factory=list)


class EmailPreviewRequest(BaseModel):
    subject: Optional[str] = Field(None, description="Email subject; defaults to 'Meeting Summary'")
    summary: Optional[str] = Field(None, description="Summary text as currently edited by the user")


class EmailPreviewResponse(BaseModel):
    subject: str
    body: str


class SendEmailRequest(BaseModel):
    """Request body for /email/send. Why available: Mirrors the form's recipients (comma-separated), subject and edited summary."""

    recipients: str = Field(..., description="Comma-separated email addresses")
    subject: Optional[str] = Field(None, description="Email subject; defaults to 'Meeting Summary'")
    summary: str = Field(..., description="Summary text to send")


class SendEmailResponse(BaseModel):
    recipients: List[str]
    subject: str
    message: str


class DemoResponse(BaseModel):
    """Response for GET /demo: sample transcript and suggested instructions (first one is the default)."""

    transcript: str
    instructions: List[str]


class LimitsResponse(BaseModel):
    """Response for GET /limits. Why available: Lets the UI validate the transcript and size its timeouts before calling the API."""

    min_transcript_chars: int = Field(..., description="Minimum trimmed transcript length")
    simulate_latency: bool = Field(..., description="Whether simulated AI latency is enabled")
    processing_timeout_seconds: float = Field(..., description="Timeout for /summarize")
    regenerate_timeout_seconds: float = Field(..., description="Timeout for /regenerate")
    template_version: str = Field(..., description="Report template version in use")
