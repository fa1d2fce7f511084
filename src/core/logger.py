from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

from core import config


def log_event(event: str, data: Dict[str, Any]) -> None:
    """
    Append a structured data-quality entry as JSON.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "data": data,
    }
    path = config.DATA_QUALITY_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # An unwritable log must not take the data load down with it.
        return
