"""Printf-style formatting with ASCII character, byte-buffer, string and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "text", "transform", "linked_list", "output", "printf"]