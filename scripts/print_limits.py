#!/usr/bin/env python3
"""Print validation limits and simulated latency windows (from config). Run from repo root: python scripts/print_limits.py"""
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from app.core.config import settings


def main():
    """Print MIN_TRANSCRIPT_CHARS, TEMPLATE_VERSION and the delay / timeout windows for generate, regenerate and email."""
    s = settings
    print("Summarizer limits")
    print("-----------------")
    print(f"  MIN_TRANSCRIPT_CHARS  = {s.min_transcript_chars} (trimmed transcript minimum)")
    print(f"  TEMPLATE_VERSION      = {s.template_version}")
    print(f"  SIMULATE_LATENCY      = {s.simulate_latency}")
    print(f"  Generate              = {s.processing_delay_min_seconds}-{s.processing_delay_max_seconds} s delay, {s.processing_timeout_seconds} s timeout")
    print(f"  Regenerate            = {s.regenerate_delay_min_seconds}-{s.regenerate_delay_max_seconds} s delay, {s.regenerate_timeout_seconds} s timeout")
    print(f"  Email send            = {s.email_delay_min_seconds}-{s.email_delay_max_seconds} s delay")
    print("")
    print("Env: see .env.example")


if __name__ == "__main__":
    main()
