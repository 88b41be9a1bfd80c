"""Short string values used while parsing."""

from __future__ import annotations

from dataclasses import dataclass

MAX_INLINE_STR_LEN = 22
"""Largest number of UTF-8 bytes an :class:`InlineStr` may hold."""


class StringTooLongError(ValueError):
    """Raised when text does not fit in an :class:`InlineStr`."""


@dataclass(frozen=True)
class InlineStr:
    """A short string of at most ``MAX_INLINE_STR_LEN`` UTF-8 bytes."""

    text: str

    def __post_init__(self) -> None:
        size = len(self.text.encode("utf-8"))
        if size > MAX_INLINE_STR_LEN:
            raise StringTooLongError(
                f"{size} bytes exceed the inline limit of {MAX_INLINE_STR_LEN}"
            )

    @classmethod
    def from_char(cls, c: str) -> InlineStr:
        """Build an inline string holding the single character ``c``."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls(c)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)