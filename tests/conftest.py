import json
import os
import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so `import app...` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time; tests must not wait for simulated latency.
os.environ.setdefault("SIMULATE_LATENCY", "false")

SCENARIO_A_TRANSCRIPT = "John: I'll send the report by Friday. Mary: Thanks John."


@pytest.fixture
def sample_transcript() -> str:
    from app.demo.sample import SAMPLE_TRANSCRIPT

    return SAMPLE_TRANSCRIPT


def _render_api_log(entry: dict) -> str:
    """HTML block (collapsible request / response) for one logged API call."""
    title = entry.get("title", "API Call")
    blocks = []
    for label in ("request", "response"):
        payload = json.dumps(entry.get(label, {}), indent=2, ensure_ascii=False, sort_keys=True)
        blocks.append(
            f'<details style="margin:6px 0;"><summary><b>{label.title()}</b></summary>'
            f'<pre style="background:#0b1020;color:#cfe3ff;padding:10px;border-radius:8px;overflow:auto;">{payload}</pre>'
            "</details>"
        )
    return f'<div style="font-family: ui-monospace, Menlo, Consolas, monospace;"><h4 style="margin:8px 0;">{title}</h4>{"".join(blocks)}</div>'


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach API request/response payloads recorded on item._api_logs to the pytest-html report.
    Without pytest-html installed this is a no-op.
    """
    outcome = yield
    rep = outcome.get_result()

    api_logs = getattr(item, "_api_logs", None)
    if rep.when != "call" or not api_logs:
        return

    try:
        from pytest_html import extras as html_extras
    except ImportError:
        return

    extras = getattr(rep, "extras", [])
    extras.extend(html_extras.html(_render_api_log(entry)) for entry in api_logs)
    rep.extras = extras
