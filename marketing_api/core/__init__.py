"""Core app configuration, errors and the in-memory data store."""

from marketing_api.core.config import get_settings
from marketing_api.core.store import DataStore, get_store, load_store

__all__ = ["DataStore", "get_settings", "get_store", "load_store"]
