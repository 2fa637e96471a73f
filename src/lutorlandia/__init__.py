"""Content backend for the Lutorlandia game server website."""

__version__ = "0.1.0"
