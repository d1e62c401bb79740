"""catfetch: random cat images and facts with a recorded history."""

from .config import AppConfig, load_config
from .errors import CatFetchError, FetchCancelledError, PersistenceError, RemoteError
from .models import NO_FACT_FALLBACK, CatRecord, FetchedImage, FetchOutcome
from .observable import Observable
from .sources import RemoteCatSource
from .storage import FileStorage, RecordStore
from .workflow import FetchState, FetchWorkflow

__all__ = [
    "NO_FACT_FALLBACK",
    "AppConfig",
    "CatFetchError",
    "CatRecord",
    "FetchedImage",
    "FetchCancelledError",
    "FetchOutcome",
    "FetchState",
    "FetchWorkflow",
    "FileStorage",
    "Observable",
    "PersistenceError",
    "RecordStore",
    "RemoteCatSource",
    "RemoteError",
    "load_config",
]
