"""Fetch-and-record workflow."""

from .fetch import (
    CANCELLED_MESSAGE,
    FETCHING_MESSAGE,
    GENERIC_ERROR_PREFIX,
    REMOTE_ERROR_MESSAGE,
    CatSource,
    FetchState,
    FetchWorkflow,
    new_owner_label,
)

__all__ = [
    "CANCELLED_MESSAGE",
    "FETCHING_MESSAGE",
    "GENERIC_ERROR_PREFIX",
    "REMOTE_ERROR_MESSAGE",
    "CatSource",
    "FetchState",
    "FetchWorkflow",
    "new_owner_label",
]
