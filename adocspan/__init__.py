"""Position-aware spans, inline parsing and short strings for AsciiDoc text."""

__version__ = "0.1.0"

__all__ = ["inlines", "span", "strings"]