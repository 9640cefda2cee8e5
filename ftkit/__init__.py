"""C-style character, memory, string, linked-list, line-reading and printf-style utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conversions",
    "formatspec",
    "getline",
    "keys",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "search",
    "strings",
]