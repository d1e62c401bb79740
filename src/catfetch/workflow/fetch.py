"""Fetch cycle: get an image URL and a fact, record them, report status."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from ..errors import FetchCancelledError, PersistenceError, RemoteError
from ..models import NO_FACT_FALLBACK, CatRecord, FetchedImage, FetchOutcome
from ..observable import Observable

if TYPE_CHECKING:
    from ..logging import JSONLLogger
    from ..storage import RecordStore

logger = logging.getLogger(__name__)

FETCHING_MESSAGE = "Fetching data..."
REMOTE_ERROR_MESSAGE = (
    "Whoa there! It looks like we hit the limit for fetching cat data. "
    "Please try again in a few moments.\n\n"
    "If the problem persists, please check your network connection or try again later. "
)
CANCELLED_MESSAGE = "The request was canceled. Please try again."
GENERIC_ERROR_PREFIX = "An error occurred: "


class FetchState(Enum):
    """States of a fetch cycle."""

    IDLE = "idle"
    FETCHING = "fetching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CatSource(Protocol):
    """Remote capabilities the workflow depends on."""

    async def fetch_random_image_url(self) -> str: ...

    async def fetch_random_fact(self) -> str: ...

    async def fetch_image_bytes(self, url: str) -> bytes: ...

    async def fetch_image(self, url: str) -> FetchedImage: ...


def new_owner_label() -> str:
    """Generate a session label like 'User1a2b3c4d'."""
    return f"User{uuid.uuid4().hex[:8]}"


class FetchWorkflow:
    """Runs fetch cycles against a cat source and records the results.

    `fetch()` never raises: every failure is turned into a status message
    and an empty outcome. The status text is published through `status`;
    the history lives in the injected RecordStore.

    Overlapping `fetch()` calls are not serialized. Callers that must avoid
    them can check `is_busy` before triggering a new cycle.
    """

    def __init__(
        self,
        source: CatSource,
        store: RecordStore,
        *,
        owner_label: str | None = None,
        seed_examples: bool = False,
        event_logger: JSONLLogger | None = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            source: Remote source of image URLs, facts and image bytes.
            store: History the fetched records are appended to.
            owner_label: Session label, generated if not given.
            seed_examples: Pre-populate history with the example records.
            event_logger: Optional JSONL logger for fetch events.
        """
        self.source = source
        self.store = store
        self.owner_label = owner_label or new_owner_label()
        self.event_logger = event_logger
        self.status: Observable[str] = Observable("")
        self.last_state: FetchState | None = None
        self._in_flight = 0

        if seed_examples:
            self.store.seed_examples(self.owner_label)

    @property
    def state(self) -> FetchState:
        return FetchState.FETCHING if self._in_flight else FetchState.IDLE

    @property
    def is_busy(self) -> bool:
        return self._in_flight > 0

    async def fetch(self) -> FetchOutcome:
        """Run one fetch cycle.

        Returns:
            The image URL and fact on success, an empty outcome on failure.
        """
        self._in_flight += 1
        started = time.monotonic()
        try:
            self.status.set(FETCHING_MESSAGE)
            self._log("fetch_start")

            image_url = await self.source.fetch_random_image_url()
            fact = await self.source.fetch_random_fact()
            if not fact:
                fact = NO_FACT_FALLBACK

            record = CatRecord(
                image_url=image_url,
                fact=fact,
                owner_label=self.owner_label,
                captured_at=datetime.now(timezone.utc),
            )
            self.store.append(record)
            self.status.set(fact)

        except RemoteError as e:
            self._fail(
                f"{REMOTE_ERROR_MESSAGE}Error Details: {e}",
                e,
                started,
                category=e.category,
                status_code=e.status_code,
            )
            return FetchOutcome.empty()
        except (FetchCancelledError, asyncio.CancelledError) as e:
            self._fail(CANCELLED_MESSAGE, e, started, category="cancelled")
            return FetchOutcome.empty()
        except Exception as e:
            if isinstance(e, PersistenceError):
                self._log("record_persist_failed", error=str(e), path=e.path)
            self._fail(f"{GENERIC_ERROR_PREFIX}{e}", e, started, category="generic")
            return FetchOutcome.empty()
        finally:
            self._in_flight -= 1

        self.last_state = FetchState.SUCCEEDED
        self._log("fetch_success", image_url=image_url, duration_ms=self._elapsed_ms(started))
        return FetchOutcome(image_url=image_url, fact=fact)

    async def load_image(self, url: str) -> FetchedImage | None:
        """Download an image for display. Returns None for an empty URL."""
        if not url:
            return None
        return await self.source.fetch_image(url)

    def _fail(
        self,
        message: str,
        error: BaseException,
        started: float,
        *,
        category: str,
        status_code: int | None = None,
    ) -> None:
        self.status.set(message)
        self.last_state = FetchState.FAILED
        self._log(
            "fetch_failed",
            error=str(error) or type(error).__name__,
            category=category,
            status_code=status_code,
            duration_ms=self._elapsed_ms(started),
        )

    def _log(self, event: str, **fields: object) -> None:
        """Write a fetch event. A failing event log never changes the cycle's outcome."""
        if self.event_logger is None:
            return
        try:
            self.event_logger.log(event, session_id=self.owner_label, **fields)
        except OSError as e:
            logger.warning("Failed to write %s event to %s: %s", event, self.event_logger.log_path, e)

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.monotonic() - started) * 1000, 2)
