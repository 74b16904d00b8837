"""Classic algorithms and data structures: linked lists, containers, generation, searching, strings, dynamic programming, arrays and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "containers",
    "dynamic",
    "generation",
    "graphs",
    "linked",
    "searching",
    "strings",
]