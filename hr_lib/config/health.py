"""Server health utilities.

Provides a simple `get_health` function returning server status,
start time, uptime in seconds and which persistence backend is active.
"""
from datetime import datetime, timezone
from typing import Optional
import time

# record process start time at import
_START_TIME = time.time()

def get_health(storage=None, candidate_count: Optional[int] = None) -> dict:
    """Return a dict representing server health.

    Fields:
    - status: 'ok'
    - start_time: ISO 8601 UTC timestamp when the process started
    - uptime_seconds: integer seconds since start
    - storage: backend description (name, durability) when a storage is given
    - candidates: number of candidates held in memory when known
    """
    now = time.time()
    uptime = int(now - _START_TIME)
    start_dt = datetime.fromtimestamp(_START_TIME, tz=timezone.utc)
    out = {
        "status": "ok",
        "start_time": start_dt.isoformat(),
        "uptime_seconds": uptime,
    }
    if storage is not None:
        out["storage"] = storage.describe()
    if candidate_count is not None:
        out["candidates"] = candidate_count
    return out
