"""Unit tests for report renderers and the template loader."""
from datetime import date

import pytest
from app.summarize.dispatcher import SummaryFormat
from app.summarize.extractors import ActionItem, Fragments
from app.summarize.renderers import (
    RENDERERS,
    date_stamp,
    render,
    render_action_items_summary,
    render_bullet_summary,
    render_comprehensive_summary,
    render_decisions_summary,
    render_metrics_summary,
)
from app.templates.loader import fill_template, load_template

TODAY = date(2025, 3, 7)
ITEMS = [
    ActionItem(person="Mike", action="can you fix the supply chain? "),
    ActionItem(person="Sarah", action="Will do."),
]


def test_date_stamp_has_no_zero_padding():
    assert date_stamp(TODAY) == "3/7/2025"
    assert date_stamp(date(2024, 12, 25)) == "12/25/2024"


# -------------------------
# Template loader
# -------------------------

@pytest.mark.parametrize("fmt", list(SummaryFormat))
def test_every_format_has_a_v1_template(fmt):
    tpl = load_template(fmt.value, version="v1")
    assert tpl["body"]


def test_load_template_missing_version():
    with pytest.raises(FileNotFoundError):
        load_template("bullet", version="does-not-exist")


def test_fill_template_single_pass():
    out = fill_template("<<A>> and <<B>> and <<C>>", {"A": "<<B>>", "B": "b"})
    assert out == "<<B>> and b and <<C>>"


# -------------------------
# Bullet / executive
# -------------------------

def test_bullet_summary_full():
    out = render_bullet_summary(
        ["John", "Sarah"],
        ["sales", "revenue", "marketing", "targets", "campaign", "deals"],
        ["15%", "$2.3M", "22%", "3"],
        ITEMS,
        today=TODAY,
    )
    assert out.startswith("# Executive Summary - 3/7/2025\n\n## Key Highlights\n")
    assert "• Meeting participants: John, Sarah\n" in out
    assert "• Primary topics discussed: sales, revenue, marketing, targets, campaign\n" in out
    assert "• Key metrics: 15%, $2.3M, 22%\n" in out
    assert "## Action Items\n• Mike: can you fix the supply chain?\n• Sarah: Will do.\n\n## Next Steps" in out
    assert out.endswith("• Schedule next review meeting")


def test_bullet_summary_without_numbers_leaves_blank_line():
    out = render_bullet_summary(["A"], ["sales"], [], [], today=TODAY)
    assert "Key metrics" not in out
    assert "• Primary topics discussed: sales\n\n\n## Main Discussion Points" in out


# -------------------------
# Action items
# -------------------------

def test_action_items_summary():
    out = render_action_items_summary(ITEMS, today=TODAY)
    assert out.startswith("# Action Items & Deadlines - 3/7/2025\n\n## Immediate Actions Required\n\n")
    assert "1. **Mike**: can you fix the supply chain?\n\n2. **Sarah**: Will do.\n\n## Timeline" in out
    assert "• **Next Tuesday 2 PM**: Follow-up meeting" in out
    assert "## Priority Level: HIGH\n" in out


# -------------------------
# Metrics
# -------------------------

def test_metrics_summary_lists_all_numbers():
    numbers = [str(i) for i in range(1, 11)]
    out = render_metrics_summary(numbers, ["sales"])
    assert "## Key Performance Indicators\n• Financial metrics: 1, 2, 3, 4, 5, 6, 7, 8, 9, 10\n" in out
    assert out.startswith("# Performance Metrics & Data Analysis")


def test_metrics_summary_fallback():
    out = render_metrics_summary([], [])
    assert "• Various performance metrics discussed" in out
    assert "## Data-Driven Insights" in out


# -------------------------
# Decisions
# -------------------------

def test_decisions_summary():
    out = render_decisions_summary(ITEMS, ["sales", "revenue", "marketing", "targets"])
    assert "## Responsibility Assignments\n• Mike: can you fix the supply chain?\n• Sarah: Will do.\n" in out
    assert "## Strategic Focus Areas\n• sales\n• revenue\n• marketing\n\n## Follow-up Required" in out


def test_decisions_summary_without_topics_keeps_empty_bullet():
    out = render_decisions_summary([], [])
    assert "## Strategic Focus Areas\n• \n\n" in out


# -------------------------
# Comprehensive
# -------------------------

def test_comprehensive_summary_exact():
    out = render_comprehensive_summary(
        ["John", "Mary"], [], [], [ActionItem(person="John", action="I'll send the report by Friday.")], today=TODAY
    )
    expected = "\n".join(
        [
            "# Comprehensive Meeting Summary - 3/7/2025",
            "",
            "## Meeting Overview",
            "**Participants**: John, Mary",
            "**Topics Covered**: ",
            "",
            "## Discussion Summary",
            "The meeting covered quarterly performance review with positive results in revenue and marketing "
            "effectiveness. Key challenges identified include supply chain delays and increased customer support volume.",
            "",
            "## Key Metrics",
            "Various performance indicators reviewed",
            "",
            "## Action Items",
            "1. John: I'll send the report by Friday.",
            "",
            "## Outcomes",
            "• Performance targets exceeded for the quarter",
            "• Action plans established for operational improvements",
            "• Clear ownership assigned for next steps",
            "• Follow-up meeting scheduled",
            "",
            "This summary captures the main points discussed and decisions made during the meeting.",
        ]
    )
    assert out == expected


def test_comprehensive_summary_first_five_numbers():
    out = render_comprehensive_summary([], [], ["1", "2", "3", "4", "5", "6"], [], today=TODAY)
    assert "## Key Metrics\n1, 2, 3, 4, 5\n" in out


# -------------------------
# Registry
# -------------------------

def test_every_format_has_a_renderer():
    assert set(RENDERERS) == set(SummaryFormat)


@pytest.mark.parametrize("fmt", list(SummaryFormat))
def test_render_with_empty_fragments_never_raises(fmt):
    out = render(fmt, Fragments(), today=TODAY)
    assert out.startswith("# ")
