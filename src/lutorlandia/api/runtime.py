"""Runtime primitives backing the Lutorlandia HTTP API."""

from __future__ import annotations

import logging

from lutorlandia.config import Settings, get_settings
from lutorlandia.factory import build_storage
from lutorlandia.interfaces import IStorage

logger = logging.getLogger(__name__)


class ApiState:
    """Settings plus the storage backend chosen at startup."""

    def __init__(
        self, *, settings: Settings | None = None, storage: IStorage | None = None
    ) -> None:
        self.settings = settings or get_settings()
        self.storage = storage if storage is not None else build_storage(self.settings)

    async def shutdown(self) -> None:
        logger.info("closing %s storage", self.storage.backend_name)
        self.storage.close()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
