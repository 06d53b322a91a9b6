"""
Versioned report template loader: reads templates from app/templates/{version}/{name}.yaml.
Use TEMPLATE_VERSION (default v1) to select version.
"""
import re
from pathlib import Path
from typing import Dict, Mapping

import yaml

# Base path: app/templates/ (next to this file)
_TEMPLATES_DIR = Path(__file__).resolve().parent

PLACEHOLDER_RE = re.compile(r"<<([A-Z_]+)>>")


def load_template(
    name: str,
    version: str | None = None,
) -> Dict[str, str]:
    """Load a report template. Returns dict with key "body" plus any fallback lines the template declares; the body may contain placeholders like <<DATE>>, <<PARTICIPANTS>>, <<ACTION_ITEMS>>.
    Why available: Keeps the fixed report wording out of the renderers so a new template version can ship without code changes."""
    if version is None:
        from app.core.config import settings
        version = settings.template_version

    path = _TEMPLATES_DIR / version / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")

    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    out: Dict[str, str] = {}
    for key, val in data.items():
        out[str(key)] = val.strip() if isinstance(val, str) else str(val).strip()
    if "body" not in out:
        raise ValueError(f"Template {name} has no 'body' in version {version}")
    return out


def fill_template(body: str, values: Mapping[str, str]) -> str:
    """Replace every <<NAME>> in body with values[NAME] in a single pass, so substituted text is never re-scanned. Unknown placeholders are left as is."""
    return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), m.group(0)), body)
