"""Local memory of the viewer's own vote.

A UI cache only: it lets the board show the thank-you message instead of
the voting controls. Entries are keyed by calendar date so yesterday's
vote never blocks today's.
"""

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RememberedVote:
    show_id: str
    title: str


class VoteMemory:
    """JSON file mapping ISO date -> {showId, title}."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def recall(self, day: date) -> Optional[RememberedVote]:
        entry = self._read().get(day.isoformat())
        if not isinstance(entry, dict) or "showId" not in entry:
            return None
        return RememberedVote(
            show_id=str(entry["showId"]),
            title=str(entry.get("title") or entry["showId"]),
        )

    def remember(self, day: date, show_id: str, title: str) -> None:
        """Store today's vote, dropping entries for earlier days."""
        data = {
            key: value
            for key, value in self._read().items()
            if key >= day.isoformat()
        }
        data[day.isoformat()] = {"showId": show_id, "title": title}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True))

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}
