"""Record history and file persistence."""

from .files import FileStorage
from .records import EXAMPLE_RECORDS, RecordStore

__all__ = ["EXAMPLE_RECORDS", "FileStorage", "RecordStore"]
