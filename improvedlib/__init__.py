"""Character, string and byte-buffer helpers, a linked list, printf-style output and a line reader."""

__version__ = "0.1.0"
__all__ = ["chars", "conversion", "strings", "memory", "linkedlist", "printf", "reader"]