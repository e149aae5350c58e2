"""JSON-lines event log for the HTTP surfaces and the converter service."""

import json
import sys
from datetime import datetime, timezone
from typing import Optional

SOURCE = "html-to-ricos"


def log_event(level: str, event: str, route: Optional[str] = None, **fields) -> None:
    """Write one event as a JSON object on stdout; None-valued fields are dropped."""
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "source": SOURCE,
        "level": level,
        "event": event,
    }
    if route:
        record["route"] = route
    record.update((key, value) for key, value in fields.items() if value is not None)
    # default=str covers exceptions, paths and other stray values
    print(json.dumps(record, default=str, ensure_ascii=False), file=sys.stdout, flush=True)
