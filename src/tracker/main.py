"""Tracker entry point."""

from __future__ import annotations

from .config import Settings, settings
from .logging_config import setup_logging
from .persistence.storage import FileKeyValueStore, KeyValueStore
from .services.session import SessionService


def create_tracker(storage: KeyValueStore | None = None, *, config: Settings = settings) -> SessionService:
    setup_logging(config.log_level, config.log_file)
    session = SessionService(storage or FileKeyValueStore(config.data_root), config=config)
    session.restore()
    return session
