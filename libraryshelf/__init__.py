"""A book catalogue kept in SQLite, with borrowing, returning and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["catalog", "cli"]