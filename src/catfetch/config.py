"""Application configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_ENDPOINT = "https://api.thecatapi.com/v1/images/search"
DEFAULT_FACT_ENDPOINT = "https://catfact.ninja/fact"
DEFAULT_TIMEOUT = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """Configuration for the cat sources, record file and logs.

    Attributes:
        image_endpoint: Image search endpoint returning a JSON array.
        fact_endpoint: Fact endpoint returning a JSON object.
        api_key: Optional Cat API key sent as the x-api-key header.
        timeout: Per-request timeout in seconds.
        data_file: File each fetched record is appended to.
        log_dir: Directory for the JSONL event log.
        seed_examples: Whether history starts with the example records.
    """

    image_endpoint: str = DEFAULT_IMAGE_ENDPOINT
    fact_endpoint: str = DEFAULT_FACT_ENDPOINT
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    data_file: Path | None = None
    log_dir: Path | None = None
    seed_examples: bool = True

    def __post_init__(self) -> None:
        if self.data_file is None:
            self.data_file = Path.home() / ".catfetch" / "cat_records.jsonl"

        if self.log_dir is None:
            self.log_dir = Path.home() / ".catfetch" / "logs"

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Invalid %s=%r, using %s", name, raw, default)
    return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw).expanduser()


def load_config() -> AppConfig:
    """Load AppConfig from environment variables.

    Recognised variables: CATFETCH_IMAGE_ENDPOINT, CATFETCH_FACT_ENDPOINT,
    CAT_API_KEY, CATFETCH_TIMEOUT, CATFETCH_DATA_FILE, CATFETCH_LOG_DIR and
    CATFETCH_SEED_EXAMPLES. Unset or invalid values fall back to defaults.
    """
    return AppConfig(
        image_endpoint=os.getenv("CATFETCH_IMAGE_ENDPOINT") or DEFAULT_IMAGE_ENDPOINT,
        fact_endpoint=os.getenv("CATFETCH_FACT_ENDPOINT") or DEFAULT_FACT_ENDPOINT,
        api_key=os.getenv("CAT_API_KEY") or None,
        timeout=_env_float("CATFETCH_TIMEOUT", DEFAULT_TIMEOUT),
        data_file=_env_path("CATFETCH_DATA_FILE"),
        log_dir=_env_path("CATFETCH_LOG_DIR"),
        seed_examples=_env_bool("CATFETCH_SEED_EXAMPLES", True),
    )
