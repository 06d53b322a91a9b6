"""
Report renderers: one pure function per summary format.
Fixed wording comes from the versioned YAML templates; only the extracted fragments and the date stamp vary.
"""
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from app.summarize.dispatcher import SummaryFormat
from app.summarize.extractors import ActionItem, Fragments
from app.templates.loader import fill_template, load_template


def date_stamp(today: Optional[date] = None) -> str:
    """Format a date as M/D/YYYY without zero padding (e.g. 3/7/2025). Defaults to the current local date."""
    d = today or date.today()
    return f"{d.month}/{d.day}/{d.year}"


def _action_lines(item_template: str, action_items: Sequence[ActionItem], numbered: bool = False) -> List[str]:
    """Render one line per action item; the action text is trimmed here, once per render."""
    lines = []
    for index, item in enumerate(action_items, start=1):
        values = {"PERSON": item.person, "ACTION": item.action.strip()}
        if numbered:
            values["INDEX"] = str(index)
        lines.append(fill_template(item_template, values))
    return lines


def render_bullet_summary(
    speakers: Sequence[str],
    topics: Sequence[str],
    numbers: Sequence[str],
    action_items: Sequence[ActionItem],
    today: Optional[date] = None,
) -> str:
    """Executive summary: all participants, first 5 topics, first 3 metrics (line left empty when there are none), fixed discussion points, one bullet per action item, fixed next steps."""
    tpl = load_template(SummaryFormat.BULLET.value)
    key_metrics = fill_template(tpl["key_metrics"], {"NUMBERS": ", ".join(numbers[:3])}) if numbers else ""
    return fill_template(
        tpl["body"],
        {
            "DATE": date_stamp(today),
            "PARTICIPANTS": ", ".join(speakers),
            "TOPICS": ", ".join(topics[:5]),
            "KEY_METRICS": key_metrics,
            "ACTION_ITEMS": "\n".join(_action_lines(tpl["item"], action_items)),
        },
    )


def render_action_items_summary(
    action_items: Sequence[ActionItem],
    today: Optional[date] = None,
) -> str:
    """Numbered action items separated by blank lines, followed by the fixed timeline and priority blocks."""
    tpl = load_template(SummaryFormat.ACTION_ITEMS.value)
    return fill_template(
        tpl["body"],
        {
            "DATE": date_stamp(today),
            "ACTION_ITEMS": "\n\n".join(_action_lines(tpl["item"], action_items, numbered=True)),
        },
    )


def render_metrics_summary(numbers: Sequence[str], topics: Sequence[str]) -> str:
    """KPI line with every extracted number (or the fallback line), then the fixed growth / challenge / insight sections.
    topics is accepted for signature parity with the other renderers; the metrics template does not print it."""
    tpl = load_template(SummaryFormat.METRICS.value)
    if numbers:
        kpi = fill_template(tpl["kpi"], {"NUMBERS": ", ".join(numbers)})
    else:
        kpi = tpl["kpi_fallback"]
    return fill_template(tpl["body"], {"KPI": kpi})


def render_decisions_summary(action_items: Sequence[ActionItem], topics: Sequence[str]) -> str:
    tpl = load_template(SummaryFormat.DECISIONS.value)
    focus_topics = list(topics[:3]) or [""]
    return fill_template(
        tpl["body"],
        {
            "ACTION_ITEMS": "\n".join(_action_lines(tpl["item"], action_items)),
            "FOCUS_AREAS": "\n".join(fill_template(tpl["focus_area"], {"TOPIC": t}) for t in focus_topics),
        },
    )


def render_comprehensive_summary(
    speakers: Sequence[str],
    topics: Sequence[str],
    numbers: Sequence[str],
    action_items: Sequence[ActionItem],
    today: Optional[date] = None,
) -> str:
    """Default report: overview (all participants, first 5 topics), fixed discussion paragraph, first 5 metrics or the fallback line, numbered action items, fixed outcomes and closing sentence.
    Why available: Used whenever the instructions match no keyword group, including empty instructions."""
    tpl = load_template(SummaryFormat.COMPREHENSIVE.value)
    metrics = ", ".join(numbers[:5]) if numbers else tpl["metrics_fallback"]
    return fill_template(
        tpl["body"],
        {
            "DATE": date_stamp(today),
            "PARTICIPANTS": ", ".join(speakers),
            "TOPICS": ", ".join(topics[:5]),
            "METRICS": metrics,
            "ACTION_ITEMS": "\n".join(_action_lines(tpl["item"], action_items, numbered=True)),
        },
    )


RENDERERS: Dict[SummaryFormat, Callable[[Fragments, Optional[date]], str]] = {
    SummaryFormat.BULLET: lambda f, today: render_bullet_summary(
        f.speakers, f.topics, f.numbers, f.action_items, today=today
    ),
    SummaryFormat.ACTION_ITEMS: lambda f, today: render_action_items_summary(f.action_items, today=today),
    SummaryFormat.METRICS: lambda f, today: render_metrics_summary(f.numbers, f.topics),
    SummaryFormat.DECISIONS: lambda f, today: render_decisions_summary(f.action_items, f.topics),
    SummaryFormat.COMPREHENSIVE: lambda f, today: render_comprehensive_summary(
        f.speakers, f.topics, f.numbers, f.action_items, today=today
    ),
}


def render(fmt: SummaryFormat, fragments: Fragments, today: Optional[date] = None) -> str:
    """Render fragments with the renderer registered for fmt, passing each renderer only the fields its template uses."""
    return RENDERERS[fmt](fragments, today)
