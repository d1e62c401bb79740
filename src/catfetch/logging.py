"""JSONL event log for fetch sessions."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class JSONLLogger:
    """Appends one JSON object per event to a log file.

    Every entry carries a UTC timestamp, the event name and the session id.
    Fields whose value is None are left out. Once the file grows past
    `max_size_mb` it is moved aside under a timestamped name.
    """

    def __init__(
        self,
        log_dir: str | Path,
        filename: str = "events.jsonl",
        max_size_mb: float = 5.0,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_path = self.log_dir / filename
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)
        self.session_id: str | None = None

    def _roll_over(self) -> None:
        try:
            size = self.log_path.stat().st_size
        except FileNotFoundError:
            return
        if size < self.max_size_bytes:
            return

        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
        self.log_path.rename(
            self.log_path.with_name(f"{self.log_path.stem}.{stamp}{self.log_path.suffix}")
        )

    def log(self, event: str, *, session_id: str | None = None, **fields: Any) -> None:
        """Append an event. Raises OSError if the log file cannot be written."""
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "session_id": session_id or self.session_id,
            **fields,
        }
        line = json.dumps(
            {k: v for k, v in entry.items() if v is not None}, ensure_ascii=False
        )

        self._roll_over()
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
