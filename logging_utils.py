import json, time, threading, os
from typing import Dict, Optional

from config import LOG_FILE_FILLS

_LOG_LOCK = threading.Lock()
LOG_FILE = os.path.join(os.getcwd(), LOG_FILE_FILLS)

def log_fill_call(template: str, field_counts: Dict[str, int], started_ts: float, error: Optional[str] = None):
    try:
        rec = {
            "ts": time.time(),
            "duration_ms": round((time.time() - started_ts) * 1000, 2),
            "template": template,
            "fields": {
                "strings": field_counts.get("strings", 0),
                "names": field_counts.get("names", 0),
                "hidden": field_counts.get("hidden", 0),
                "readonly": field_counts.get("readonly", 0),
            },
            "ok": error is None,
            "error": error,
        }
        line = json.dumps(rec, ensure_ascii=False)
        with _LOG_LOCK:
            with open(LOG_FILE, "a", encoding="utf-8") as f:
                f.write(line + "\n")
    except Exception:
        pass
