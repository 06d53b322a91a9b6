# Main (Home) page content for the Meeting Notes Summarizer form.
import os

import requests
import streamlit as st

from app.demo.sample import SUGGESTED_INSTRUCTIONS
from app.email.sender import DEFAULT_SUBJECT, PREVIEW_PLACEHOLDER
from app.guardrails.validation import (
    EMPTY_TRANSCRIPT_MESSAGE,
    NO_RECIPIENTS_MESSAGE,
    check_recipients,
    check_transcript,
    parse_recipients,
)

API_BASE = os.getenv("API_BASE", "http://localhost:8000")

# Mirrors the API default; GET /limits overrides when reachable.
DEFAULT_MIN_TRANSCRIPT_CHARS = 50


def post_json(path: str, payload: dict, timeout: float = 30):
    """POST JSON payload to API path."""
    url = f"{API_BASE}{path}"
    return requests.post(url, json=payload, timeout=timeout)


def get_json(path: str, timeout: float = 10):
    """GET API path and return parsed JSON, or None when the API is unreachable or errors."""
    try:
        r = requests.get(f"{API_BASE}{path}", timeout=timeout)
    except requests.exceptions.RequestException:
        return None
    return r.json() if r.status_code == 200 else None


def _error_detail(r) -> str:
    """Return the API's error detail, or a generic message if the body is not JSON."""
    try:
        detail = r.json().get("detail")
    except ValueError:
        detail = None
    return detail if isinstance(detail, str) and detail else "Something went wrong."


def _set_status(message: str, kind: str = "info") -> None:
    st.session_state.status = (message, kind)


def _show_status() -> None:
    """Render the last status banner (info / success / error) once, then clear it."""
    status = st.session_state.pop("status", None)
    if not status:
        return
    message, kind = status
    {"success": st.success, "error": st.error}.get(kind, st.info)(message)


def transcript_feedback(text: str, min_chars: int) -> tuple:
    """Return (ok, feedback, kind) for the transcript field; empty input gives no feedback."""
    if not (text or "").strip():
        return False, "", "info"
    ok, feedback = check_transcript(text, min_chars)
    return ok, feedback, "success" if ok else "error"


def recipients_feedback(raw: str) -> tuple:
    """Return (ok, feedback, emails) for the comma-separated recipients field; empty input gives no feedback."""
    emails = parse_recipients(raw)
    if not emails:
        return False, "", emails
    ok, feedback = check_recipients(emails)
    return ok, feedback, emails


def _summarize(path: str, timeout: float, success_message: str, error_prefix: str) -> None:
    """Call /summarize or /regenerate with the current form fields and store the result in session state."""
    payload = {
        "transcript": (st.session_state.get("transcript_input") or "").strip(),
        "instructions": (st.session_state.get("instructions_input") or "").strip(),
    }
    try:
        r = post_json(path, payload, timeout=timeout)
    except requests.exceptions.RequestException as e:
        _set_status(f"{error_prefix}{e}", "error")
        return
    if r.status_code != 200:
        _set_status(f"{error_prefix}{_error_detail(r)}", "error")
        return
    data = r.json()
    st.session_state.summary_output = data.get("summary", "")
    st.session_state.summary_format = data.get("format", "")
    st.session_state.has_summary = True
    _set_status(success_message, "success")


def _on_generate(min_chars: int, timeout: float) -> None:
    ok, _, _ = transcript_feedback(st.session_state.get("transcript_input", ""), min_chars)
    if not ok:
        _set_status(EMPTY_TRANSCRIPT_MESSAGE, "error")
        return
    _summarize(
        "/summarize",
        timeout,
        "Summary generated successfully! You can now edit it or share via email.",
        "Error generating summary: ",
    )


def _on_regenerate(timeout: float) -> None:
    _summarize(
        "/regenerate",
        timeout,
        "Summary regenerated with fresh AI processing!",
        "Error regenerating summary: ",
    )


def _on_chip(instruction: str) -> None:
    st.session_state.instructions_input = instruction
    _set_status("Instruction selected: " + instruction, "info")


def _on_demo(demo: dict) -> None:
    st.session_state.transcript_input = demo.get("transcript", "")
    instructions = demo.get("instructions") or SUGGESTED_INSTRUCTIONS
    st.session_state.instructions_input = instructions[0]
    _set_status('Demo data loaded! Click "Generate Summary" to see AI processing in action.', "info")


def _on_clear() -> None:
    for key in ("transcript_input", "instructions_input", "summary_output", "email_recipients", "email_subject"):
        st.session_state[key] = ""
    st.session_state.has_summary = False
    st.session_state.summary_format = ""
    _set_status("All data cleared successfully.", "info")


def _on_send() -> None:
    ok, _, emails = recipients_feedback(st.session_state.get("email_recipients", ""))
    if not ok:
        _set_status(NO_RECIPIENTS_MESSAGE, "error")
        return
    payload = {
        "recipients": ", ".join(emails),
        "subject": st.session_state.get("email_subject") or None,
        "summary": st.session_state.get("summary_output", ""),
    }
    try:
        r = post_json("/email/send", payload)
    except requests.exceptions.RequestException as e:
        _set_status(f"Error sending email: {e}", "error")
        return
    if r.status_code != 200:
        _set_status(f"Error sending email: {_error_detail(r)}", "error")
        return
    _set_status(r.json().get("message", "Summary sent."), "success")
    st.session_state.email_recipients = ""
    st.session_state.email_subject = ""


def run_main() -> None:
    """Render the Home page (transcript form, summary editor, email share)."""
    st.set_page_config(page_title="Meeting Notes Summarizer", layout="wide", initial_sidebar_state="collapsed")
    st.title("📝 AI Meeting Notes Summarizer")
    st.caption("Paste a transcript, describe the summary you want, review it and share it by email.")

    for key in ("transcript_input", "instructions_input", "summary_output", "email_recipients", "email_subject"):
        st.session_state.setdefault(key, "")
    st.session_state.setdefault("has_summary", False)

    limits = get_json("/limits") or {}
    min_chars = int(limits.get("min_transcript_chars") or DEFAULT_MIN_TRANSCRIPT_CHARS)
    # HTTP timeout must outlast the API's own simulated timeout
    gen_timeout = float(limits.get("processing_timeout_seconds") or 8) + 5
    regen_timeout = float(limits.get("regenerate_timeout_seconds") or 5) + 5
    demo = get_json("/demo") or {}

    _show_status()

    # -------------------------
    # Transcript + instructions
    # -------------------------
    st.subheader("Meeting transcript")
    transcript = st.text_area(
        "Transcript",
        key="transcript_input",
        height=220,
        placeholder="John: Good morning everyone... Sarah: Thanks John...",
        label_visibility="collapsed",
    )
    ok, feedback, kind = transcript_feedback(transcript, min_chars)
    if feedback:
        (st.caption if kind == "success" else st.error)(feedback)

    st.subheader("Instructions")
    st.text_input(
        "Instructions",
        key="instructions_input",
        placeholder="e.g. Summarize in bullet points for executives",
        label_visibility="collapsed",
    )
    chips = demo.get("instructions") or SUGGESTED_INSTRUCTIONS
    chip_cols = st.columns(len(chips))
    for i, (col, chip) in enumerate(zip(chip_cols, chips)):
        col.button(chip, key=f"chip_{i}", on_click=_on_chip, args=(chip,), use_container_width=True)

    c1, c2, c3 = st.columns(3)
    c1.button(
        "✨ Generate Summary",
        key="generate_btn",
        type="primary",
        disabled=not ok,
        on_click=_on_generate,
        args=(min_chars, gen_timeout),
    )
    c2.button("Load demo", key="demo_btn", on_click=_on_demo, args=(demo,))
    c3.button("Clear", key="clear_btn", on_click=_on_clear)

    if not st.session_state.get("has_summary"):
        return

    # -------------------------
    # Summary (editable)
    # -------------------------
    st.subheader("Summary")
    fmt = st.session_state.get("summary_format")
    if fmt:
        st.caption(f"Format: {fmt}")
    summary = st.text_area("Summary", key="summary_output", height=360, label_visibility="collapsed")
    st.caption(f"{len(summary.split())} words")
    st.button("🔄 Regenerate", key="regenerate_btn", on_click=_on_regenerate, args=(regen_timeout,))

    # -------------------------
    # Email (simulated)
    # -------------------------
    st.subheader("Share via email")
    recipients_raw = st.text_input(
        "Recipients",
        key="email_recipients",
        placeholder="alice@example.com, bob@example.com",
    )
    r_ok, r_feedback, _ = recipients_feedback(recipients_raw)
    if r_feedback:
        (st.caption if r_ok else st.error)(r_feedback)
    subject = st.text_input("Subject", key="email_subject", placeholder=DEFAULT_SUBJECT)

    with st.expander("Email preview", expanded=False):
        st.markdown(f"**Subject:** {subject or DEFAULT_SUBJECT}")
        st.text(summary or PREVIEW_PLACEHOLDER)

    st.button("📧 Send Email", key="send_email_btn", disabled=not r_ok, on_click=_on_send)
