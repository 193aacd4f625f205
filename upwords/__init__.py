"""Stacked-tile word game engine: boards, word placement, undo and saving."""

__version__ = "0.1.0"
__all__ = ["__version__"]