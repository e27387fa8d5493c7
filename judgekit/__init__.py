"""Solutions to classic online-judge problems as small reusable algorithms."""

__version__ = "0.1.0"

__all__ = [
    "contest",
    "games",
    "grids",
    "numbers",
    "ordering",
    "patterns",
    "sequences",
    "sorting",
    "strings",
    "unionfind",
]