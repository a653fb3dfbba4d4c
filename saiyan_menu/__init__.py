"""A pygame game menu with three background-only level stages."""

__version__ = "0.1.0"
__all__ = ["levels", "menu", "app"]