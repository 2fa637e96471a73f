"""Protocol-based interfaces for the Lutorlandia content store.

The HTTP layer depends only on these protocols, so either storage backend
can be injected at startup.
"""

from lutorlandia.interfaces.storage import IStorage

__all__ = ["IStorage"]
