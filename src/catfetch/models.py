"""Data models for fetched cat records."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterator

NO_FACT_FALLBACK = "No fact available."


@dataclass(frozen=True)
class CatRecord:
    """One fetched (or seeded) cat image and fact.

    Attributes:
        image_url: Absolute URL of the cat image, empty if unavailable.
        fact: Fact text, possibly the fallback message.
        owner_label: Session label stamped on every record of a run.
        captured_at: When the record was created, in UTC.
    """

    image_url: str
    fact: str
    owner_label: str
    captured_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict with a stable key order."""
        return {
            "image_url": self.image_url,
            "fact": self.fact,
            "owner_label": self.owner_label,
            "captured_at": self.captured_at.isoformat(),
        }

    def to_json(self) -> str:
        """Serialize to a single line of JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatRecord":
        """Create from dictionary."""
        captured_at = datetime.fromisoformat(data["captured_at"])
        if captured_at.tzinfo is None:
            captured_at = captured_at.replace(tzinfo=timezone.utc)
        return cls(
            image_url=data.get("image_url") or "",
            fact=data.get("fact") or "",
            owner_label=data.get("owner_label") or "",
            captured_at=captured_at,
        )


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one fetch cycle. Both fields are empty when the cycle failed."""

    image_url: str = ""
    fact: str = ""

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    @classmethod
    def empty(cls) -> "FetchOutcome":
        return cls()

    def __iter__(self) -> Iterator[str]:
        return iter((self.image_url, self.fact))


@dataclass(frozen=True)
class FetchedImage:
    """Raw image body with the content type the server reported, if any."""

    data: bytes
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)
