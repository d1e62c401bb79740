"""Shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from catfetch.logging import JSONLLogger
from catfetch.models import FetchedImage
from catfetch.storage import FileStorage, RecordStore


@pytest.fixture
def storage() -> Mock:
    """A mock persistence capability."""
    return Mock(spec=FileStorage)


@pytest.fixture
def store(storage: Mock, tmp_path: Path) -> RecordStore:
    """A RecordStore writing through the mock storage."""
    return RecordStore(storage, tmp_path / "cat_records.jsonl")


@pytest.fixture
def source() -> AsyncMock:
    """A mock cat source returning one image URL and one fact."""
    source = AsyncMock()
    source.fetch_random_image_url.return_value = "https://cdn2.thecatapi.com/images/byQhF07iV.jpg"
    source.fetch_random_fact.return_value = "Tylenol and chocolate are both poisonous to cats."
    source.fetch_image_bytes.return_value = b"\x89PNG\r\n\x1a\n"
    source.fetch_image.return_value = FetchedImage(b"\x89PNG\r\n\x1a\n", "image/png")
    return source


@pytest.fixture
def event_logger(tmp_path: Path) -> JSONLLogger:
    return JSONLLogger(log_dir=tmp_path / "logs")
