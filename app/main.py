from typing import Tuple
from fastapi import FastAPI, HTTPException, Request

from app.core.config import settings
from app.models.schemas import (
    ActionItemOut,
    DemoResponse,
    EmailPreviewRequest,
    EmailPreviewResponse,
    LimitsResponse,
    SendEmailRequest,
    SendEmailResponse,
    SummarizeRequest,
    SummarizeResponse,
)

from app.demo.sample import SAMPLE_TRANSCRIPT, SUGGESTED_INSTRUCTIONS
from app.email.sender import build_preview, resolve_subject, send_summary_email
from app.guardrails.errors import as_http_error
from app.guardrails.validation import check_recipients, check_transcript, parse_recipients
from app.observability.events import log_event
from app.observability.middleware import RequestTimingMiddleware, get_request_id
from app.summarize.engine import SummaryResult, summarize_detailed, word_count
from app.utils.latency import NO_DELAY, simulate_processing


# -------------------------
# App setup
# -------------------------

app = FastAPI(title="Meeting Notes Summarizer")
app.add_middleware(RequestTimingMiddleware)

PROCESSING_TIMEOUT_MESSAGE = "Processing timeout - please try again"
REGENERATION_TIMEOUT_MESSAGE = "Regeneration timeout - please try again"


def _delay(low: float, high: float) -> Tuple[float, float]:
    """Return the configured delay window, or no delay when SIMULATE_LATENCY is off."""
    return (low, high) if settings.simulate_latency else NO_DELAY


def _validated_inputs(req: SummarizeRequest) -> Tuple[str, str]:
    """Trim both form fields and reject empty or too-short transcripts with 400.
    Why available: Shared by /summarize and /regenerate so both apply the form's transcript rule."""
    ok, feedback = check_transcript(req.transcript, settings.min_transcript_chars)
    if not ok:
        raise HTTPException(status_code=400, detail=feedback)
    return req.transcript.strip(), (req.instructions or "").strip()


def _to_response(result: SummaryResult) -> SummarizeResponse:
    f = result.fragments
    return SummarizeResponse(
        summary=result.summary,
        format=result.format,
        word_count=word_count(result.summary),
        speakers=f.speakers,
        topics=f.topics,
        numbers=f.numbers,
        action_items=[ActionItemOut(person=a.person, action=a.action) for a in f.action_items],
    )


async def _run_summary(
    request: Request,
    req: SummarizeRequest,
    *,
    delay_range: Tuple[float, float],
    timeout_seconds: float,
    timeout_message: str,
    verb: str,
) -> SummarizeResponse:
    """Validate, run the summarizer behind the simulated latency / timeout race, log and map errors to HTTP."""
    transcript, instructions = _validated_inputs(req)
    rid = get_request_id(request)
    try:
        result = await simulate_processing(
            lambda: summarize_detailed(transcript, instructions),
            delay_range=delay_range,
            timeout_seconds=timeout_seconds,
            timeout_message=timeout_message,
        )
    except Exception as e:
        log_event("summary_failed", request_id=rid, verb=verb, error=str(e))
        raise as_http_error(e, verb=verb)

    log_event(
        "summary_generated",
        request_id=rid,
        verb=verb,
        format=result.format.value,
        transcript_chars=len(transcript),
        speakers=len(result.fragments.speakers),
        action_items=len(result.fragments.action_items),
    )
    return _to_response(result)


# -------------------------
# Root
# -------------------------

@app.get("/")
def root():
    """Returns a minimal welcome payload with app name and docs URL.
    Why available: Gives clients a simple root endpoint to confirm the API is running."""
    return {"app": "Meeting Notes Summarizer", "docs": "/docs"}


@app.get("/health")
def health():
    """Returns 200 OK with status. Used by probes to check if the API is up."""
    return {"status": "ok"}


# -------------------------
# Limits and demo data (for UI / clients)
# -------------------------

@app.get("/limits", response_model=LimitsResponse)
def limits():
    """Returns the transcript minimum, timeouts and template version.
    Why available: Lets the UI validate input and show the same numbers the API enforces."""
    return LimitsResponse(
        min_transcript_chars=settings.min_transcript_chars,
        simulate_latency=settings.simulate_latency,
        processing_timeout_seconds=settings.processing_timeout_seconds,
        regenerate_timeout_seconds=settings.regenerate_timeout_seconds,
        template_version=settings.template_version,
    )


@app.get("/demo", response_model=DemoResponse)
def demo():
    """Returns the sample quarterly-review transcript and the suggested instructions."""
    return DemoResponse(transcript=SAMPLE_TRANSCRIPT, instructions=list(SUGGESTED_INSTRUCTIONS))


# -------------------------
# Summarize / regenerate
# -------------------------

@app.post("/summarize", response_model=SummarizeResponse)
async def summarize_endpoint(request: Request, req: SummarizeRequest):
    """Summarizes a transcript with the format chosen from the instructions. 400 on invalid transcript, 504 on simulated timeout, 500 on processing failure.
    Why available: Core feature behind the form's Generate button."""
    return await _run_summary(
        request,
        req,
        delay_range=_delay(settings.processing_delay_min_seconds, settings.processing_delay_max_seconds),
        timeout_seconds=settings.processing_timeout_seconds,
        timeout_message=PROCESSING_TIMEOUT_MESSAGE,
        verb="generating",
    )


@app.post("/regenerate", response_model=SummarizeResponse)
async def regenerate_endpoint(request: Request, req: SummarizeRequest):
    """Same as /summarize with the shorter regenerate delay and timeout."""
    return await _run_summary(
        request,
        req,
        delay_range=_delay(settings.regenerate_delay_min_seconds, settings.regenerate_delay_max_seconds),
        timeout_seconds=settings.regenerate_timeout_seconds,
        timeout_message=REGENERATION_TIMEOUT_MESSAGE,
        verb="regenerating",
    )


# -------------------------
# Email (simulated)
# -------------------------

@app.post("/email/preview", response_model=EmailPreviewResponse)
def email_preview(req: EmailPreviewRequest):
    """Returns the subject and body a recipient would see for the current summary."""
    preview = build_preview(req.subject, req.summary)
    return EmailPreviewResponse(subject=preview.subject, body=preview.body)


@app.post("/email/send", response_model=SendEmailResponse)
async def email_send(req: SendEmailRequest):
    """Validates recipients and simulates sending the summary. 400 when recipients are missing or invalid.
    Why available: Completes the review-then-share flow of the form without a mail server."""
    recipients = parse_recipients(req.recipients)
    ok, feedback = check_recipients(recipients)
    if not ok:
        raise HTTPException(status_code=400, detail=feedback)

    message = await send_summary_email(
        recipients,
        req.subject,
        req.summary,
        delay_range=_delay(settings.email_delay_min_seconds, settings.email_delay_max_seconds),
    )
    return SendEmailResponse(recipients=recipients, subject=resolve_subject(req.subject), message=message)
