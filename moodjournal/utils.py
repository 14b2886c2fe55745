import json
from datetime import datetime, timezone
from typing import Any

ELLIPSIS = "…"

def to_iso_now() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def parse_body(text: str) -> Any:
    """Parse a response body as JSON, falling back to the raw text."""
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text

def truncate(text: str, limit: int = 120) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text
