"""A small line-oriented text editor with clipboard, cursor, undo/redo and a menu-driven console."""

__version__ = "0.1.0"
__all__ = ["clipboard", "history", "editor", "cli"]