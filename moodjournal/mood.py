from datetime import datetime, timezone
from typing import List

from .schemas import MoodRecord

MOOD_HISTORY_LIMIT = 14

class MoodLog:
    """Newest-first mood history, never longer than MOOD_HISTORY_LIMIT records."""

    def __init__(self, limit: int = MOOD_HISTORY_LIMIT):
        # A smaller window is allowed, a larger one is clamped
        self.limit = max(0, min(limit, MOOD_HISTORY_LIMIT))
        self.records: List[MoodRecord] = []

    def append(self, score: int, note: str = "") -> MoodRecord:
        # Score range is enforced by the caller
        record = MoodRecord(date=datetime.now(timezone.utc), mood=score, notes=note.strip())
        self.records = [record, *self.records][:self.limit]
        return record

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
