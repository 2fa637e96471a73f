"""HTTP layer for the Lutorlandia backend."""
