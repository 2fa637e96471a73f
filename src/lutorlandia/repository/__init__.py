"""Storage backends implementing ``lutorlandia.interfaces.IStorage``."""

from lutorlandia.repository.memory import MemoryStorage
from lutorlandia.repository.sql import SqlStorage

__all__ = ["MemoryStorage", "SqlStorage"]
