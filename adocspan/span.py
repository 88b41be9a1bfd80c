"""Located slices of UTF-8 source text and the primitives for splitting them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

CharPredicate = Callable[[str], bool]


def _is_blank(c: str) -> bool:
    return c in (" ", "\t")


@dataclass(frozen=True)
class Span:
    """A slice of the input text, annotated with its 1-based line and column
    and its byte offset from the start of the whole input."""

    data: str
    line: int = 1
    col: int = 1
    byte_offset: int = 0

    def __str__(self) -> str:
        return self.data

    @property
    def is_empty(self) -> bool:
        """True when the span holds no text."""
        return not self.data

    # -- slicing -----------------------------------------------------------

    def slice(self, start: int, end: int) -> Span:
        """Return the sub-span covering characters ``start`` up to ``end``."""
        if not 0 <= start <= end <= len(self.data):
            raise IndexError(
                f"range {start}..{end} out of bounds for span of length {len(self.data)}"
            )
        return self._located(start, self.data[start:end])

    def slice_from(self, start: int) -> Span:
        """Return the sub-span from character ``start`` to the end."""
        return self.slice(start, len(self.data))

    def slice_to(self, end: int) -> Span:
        """Return the sub-span from the beginning up to character ``end``."""
        return self.slice(0, end)

    def _located(self, start: int, new_data: str) -> Span:
        if start == 0:
            return Span(new_data, self.line, self.col, self.byte_offset)

        skipped = self.data[:start]
        lines_to_add = skipped.count("\n")
        chars_on_last_line = len(skipped) - (skipped.rfind("\n") + 1)
        col = self.col + chars_on_last_line if lines_to_add == 0 else chars_on_last_line + 1
        return Span(
            new_data,
            self.line + lines_to_add,
            col,
            self.byte_offset + len(skipped.encode("utf-8")),
        )

    def position(self, predicate: CharPredicate) -> Optional[int]:
        """Return the index of the first character matching ``predicate``."""
        return next((i for i, c in enumerate(self.data) if predicate(c)), None)

    # -- splitting ---------------------------------------------------------

    def into_parse_result(self, at_index: int) -> MatchedItem[Span]:
        """Split the span at ``at_index``, clamped to the span's length."""
        at_index = max(0, min(at_index, len(self.data)))
        return MatchedItem(self.slice_to(at_index), self.slice_from(at_index))

    def split_at_match_non_empty(self, predicate: CharPredicate) -> Optional[MatchedItem[Span]]:
        """Split at the first character matching ``predicate``, never yielding
        an empty item; None if the span is empty or starts with a match."""
        index = self.position(predicate)
        if index == 0:
            return None
        if index is not None:
            return self.into_parse_result(index)
        if not self.data:
            return None
        return self.into_parse_result(len(self.data))

    def discard(self, n: int) -> Span:
        """Return the span without its first ``n`` characters."""
        return self.into_parse_result(n).after

    def discard_all(self) -> Span:
        """Return the empty span at the end of this span."""
        return self.discard(len(self.data))

    # -- taking ------------------------------------------------------------

    def take_prefix(self, prefix: str) -> Optional[MatchedItem[Span]]:
        """Consume exactly ``prefix`` if the span starts with it."""
        if self.data.startswith(prefix):
            return self.into_parse_result(len(prefix))
        return None

    def take_whitespace(self) -> MatchedItem[Span]:
        """Consume any leading spaces and tabs."""
        return self.take_while(_is_blank)

    def take_required_whitespace(self) -> Optional[MatchedItem[Span]]:
        """Consume at least one space or tab; None if there is none."""
        mi = self.take_while(_is_blank)
        return None if mi.item.is_empty else mi

    def take_while(self, predicate: CharPredicate) -> MatchedItem[Span]:
        """Split at the first character that does not match ``predicate``."""
        index = self.position(lambda c: not predicate(c))
        return self.into_parse_result(len(self.data) if index is None else index)

    # -- lines -------------------------------------------------------------

    def take_line(self) -> MatchedItem[Span]:
        """Consume one line; the ``\\n`` or ``\\r\\n`` ending is dropped."""
        index = self.data.find("\n")
        line = self.into_parse_result(len(self.data) if index < 0 else index)
        return line.trim_after_start_matches("\n").trim_item_end_matches("\r")

    def take_normalized_line(self) -> MatchedItem[Span]:
        """Consume one line and strip its trailing spaces."""
        return self.take_line().trim_item_trailing_spaces()

    def take_non_empty_line(self) -> Optional[MatchedItem[Span]]:
        """Consume one normalized line; None if it is empty."""
        mi = self.split_at_match_non_empty(lambda c: c == "\n")
        if mi is None:
            return None
        line = (
            mi.trim_after_start_matches("\n")
            .trim_item_end_matches("\r")
            .trim_item_trailing_spaces()
        )
        return None if line.item.is_empty else line

    def take_empty_line(self) -> Optional[MatchedItem[Span]]:
        """Consume a line holding only spaces and tabs; None otherwise."""
        line = self.take_line()
        if all(_is_blank(c) for c in line.item.data):
            return line
        return None

    def discard_empty_lines(self) -> Span:
        """Skip any number of empty lines."""
        span = self
        while span.data:
            line = span.take_empty_line()
            if line is None:
                break
            span = line.after
        return span

    def take_line_with_continuation(self) -> Optional[MatchedItem[Span]]:
        """Consume a normalized non-empty line, following lines that end
        with a ``\\`` continuation marker; None if the result is empty."""
        mi = self.into_parse_result(0)
        while (continued := mi.after._one_line_with_continuation()) is not None:
            mi = continued
        mi = mi.after.take_line()

        mi = (
            self.into_parse_result(len(self.data) - len(mi.after.data))
            .trim_item_end_matches("\n")
            .trim_item_end_matches("\r")
            .trim_item_trailing_spaces()
        )
        return None if mi.item.is_empty else mi

    def _one_line_with_continuation(self) -> Optional[MatchedItem[Span]]:
        line = self.take_normalized_line()
        return line if line.item.data.endswith("\\") else None

    # -- primitives --------------------------------------------------------

    def take_ident(self) -> Optional[MatchedItem[Span]]:
        """Consume an identifier: an ASCII letter or underscore followed by
        ASCII letters, digits or underscores."""
        if not self.data:
            return None
        first = self.data[0]
        if not ((first.isascii() and first.isalpha()) or first == "_"):
            return None
        for index, c in enumerate(self.data[1:], start=1):
            if not ((c.isascii() and c.isalnum()) or c == "_"):
                return self.into_parse_result(index)
        return self.into_parse_result(len(self.data))

    def take_attr_name(self) -> Optional[MatchedItem[Span]]:
        """Consume an attribute name: an ASCII letter or digit followed by
        ASCII letters, digits or ``-``."""
        if not self.data:
            return None
        first = self.data[0]
        if not (first.isascii() and first.isalnum()):
            return None
        for index, c in enumerate(self.data[1:], start=1):
            if not ((c.isascii() and c.isalnum()) or c == "-"):
                return self.into_parse_result(index)
        return self.into_parse_result(len(self.data))

    def take_quoted_string(self) -> Optional[MatchedItem[Span]]:
        """Consume a single- or double-quoted string.

        The returned item excludes the quotes but keeps any backslash-escaped
        quotes untouched. None if the string is not terminated.
        """
        if not self.data or self.data[0] not in ("'", '"'):
            return None
        delimiter = self.data[0]
        prev_was_backslash = False
        for index, c in enumerate(self.data[1:], start=1):
            if c == delimiter and not prev_was_backslash:
                return MatchedItem(self.slice(1, index), self.slice_from(index + 1))
            prev_was_backslash = c == "\\"
        return None

    def trim_remainder(self, after: Span) -> Span:
        """Return the part of this span that precedes ``after``, which should
        be a trailing remainder of it; an empty span if it is not."""
        encoded = self.data.encode("utf-8")
        end = min(self.byte_offset + len(encoded), after.byte_offset)
        if end <= self.byte_offset:
            return self.slice(0, 0)
        trim_len = end - self.byte_offset
        return self.slice(0, len(encoded[:trim_len].decode("utf-8")))

    def trim_trailing_whitespace(self) -> Span:
        """Return the span without trailing white space."""
        return self.slice(0, len(self.data.rstrip()))


@dataclass(frozen=True)
class MatchedItem(Generic[T]):
    """A successfully matched item together with the input that follows it."""

    item: T
    after: Span

    def trim_after_start_matches(self, c: str) -> MatchedItem[T]:
        """Drop one leading ``c`` from ``after``, if present."""
        if self.after.data.startswith(c):
            return MatchedItem(self.item, self.after.slice_from(len(c)))
        return self

    def trim_item_end_matches(self, c: str) -> MatchedItem[T]:
        """Drop one trailing ``c`` from ``item``, if present."""
        item = self.item
        if isinstance(item, Span) and c and item.data.endswith(c):
            return MatchedItem(item.slice(0, len(item.data) - len(c)), self.after)
        return self

    def trim_item_trailing_spaces(self) -> MatchedItem[T]:
        """Drop all trailing spaces from ``item``."""
        item = self.item
        if not isinstance(item, Span):
            return self
        return MatchedItem(item.slice(0, len(item.data.rstrip(" "))), self.after)


@runtime_checkable
class HasSpan(Protocol):
    """A syntactic element that knows where it lies in the source."""

    @property
    def span(self) -> Span:
        """The element's location in the source."""
        ...