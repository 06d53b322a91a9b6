"""Tests for the simulated latency wrapper and the simulated email sender."""
import asyncio

import pytest
from app.email.sender import (
    DEFAULT_SUBJECT,
    PREVIEW_PLACEHOLDER,
    build_preview,
    send_summary_email,
)
from app.utils.latency import ProcessingTimeout, pick_delay, simulate_processing


def test_pick_delay_within_range():
    for _ in range(20):
        assert 0.1 <= pick_delay((0.1, 0.2)) <= 0.2
    assert pick_delay((0.0, 0.0)) == 0.0


def test_simulate_processing_returns_result():
    assert asyncio.run(simulate_processing(lambda: "done", timeout_seconds=1)) == "done"


def test_simulate_processing_times_out():
    with pytest.raises(ProcessingTimeout) as exc:
        asyncio.run(
            simulate_processing(
                lambda: "late",
                delay_range=(0.5, 0.5),
                timeout_seconds=0.05,
                timeout_message="Regeneration timeout - please try again",
            )
        )
    assert str(exc.value) == "Regeneration timeout - please try again"


def test_simulate_processing_propagates_errors():
    def fail():
        raise ValueError("bad")

    with pytest.raises(ValueError):
        asyncio.run(simulate_processing(fail, timeout_seconds=1))


def test_build_preview_defaults():
    preview = build_preview(None, "")
    assert preview.subject == DEFAULT_SUBJECT == "Meeting Summary"
    assert preview.body == PREVIEW_PLACEHOLDER == "[Summary will appear here]"


def test_build_preview_with_values():
    preview = build_preview("Q3 review", "# Summary")
    assert preview.subject == "Q3 review"
    assert preview.body == "# Summary"


def test_send_summary_email_message(capsys):
    msg = asyncio.run(send_summary_email(["a@x.com", "b@y.org"], None, "# Summary"))
    assert msg == "Summary successfully sent to 2 recipient(s): a@x.com, b@y.org"
    assert '"event": "email_simulated"' in capsys.readouterr().out
