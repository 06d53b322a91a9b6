import json
import time
from typing import Any


def log_event(event: str, **fields: Any) -> None:
    """Print one structured JSON log line (event name, unix timestamp, extra fields) to stdout.
    Why available: Same line format as the request middleware so app logs can be grepped or shipped as JSON."""
    record = {"event": event, "ts": round(time.time(), 3), **fields}
    print(json.dumps(record, ensure_ascii=False, default=str), flush=True)
