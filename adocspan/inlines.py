"""Inline elements: phrases of content within a block or one of its attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from adocspan.span import MatchedItem, Span


@dataclass(frozen=True)
class InlineMacro:
    """The inline form of a named macro: ``<name>:<target>?[<attrlist>?]``."""

    name: Span
    target: Optional[Span]
    attrlist: Optional[Span]
    source: Span

    @property
    def span(self) -> Span:
        """The macro's location in the source."""
        return self.source


@dataclass(frozen=True)
class Uninterpreted:
    """Plain text for which no inline grammar rule matches."""

    span: Span


@dataclass(frozen=True)
class InlineSequence:
    """A sequence of other inline elements."""

    inlines: tuple[Inline, ...]
    span: Span


Inline = Union[Uninterpreted, InlineSequence, InlineMacro]


def _not_bracket_open(c: str) -> bool:
    return c != "["


def _not_bracket_close(c: str) -> bool:
    return c != "]"


def _not_blank(c: str) -> bool:
    return c not in (" ", "\t")


def parse_inline_macro(source: Span) -> Optional[MatchedItem[InlineMacro]]:
    """Parse an inline macro at the start of ``source``; None if there is none."""
    name = source.take_ident()
    if name is None:
        return None
    colon = name.after.take_prefix(":")
    if colon is None:
        return None
    target = colon.after.take_while(_not_bracket_open)
    open_brace = target.after.take_prefix("[")
    if open_brace is None:
        return None
    attrlist = open_brace.after.take_while(_not_bracket_close)
    close_brace = attrlist.after.take_prefix("]")
    if close_brace is None:
        return None

    macro = InlineMacro(
        name=name.item,
        target=None if target.item.is_empty else target.item,
        attrlist=None if attrlist.item.is_empty else attrlist.item,
        source=source.trim_remainder(close_brace.after),
    )
    return MatchedItem(macro, close_brace.after)


def _parse_uninterpreted(source: Span) -> MatchedItem[Span]:
    """Take the longest run of text that needs no interpretation."""
    if ":" not in source.data:
        return source.into_parse_result(len(source.data))

    after = source
    while not after.is_empty:
        if parse_inline_macro(after) is not None:
            break
        word = after.take_while(_not_blank)
        after = word.after.take_whitespace().after

    return MatchedItem(source.trim_remainder(after), after)


def _parse_interpreted(source: Span) -> Optional[MatchedItem[Inline]]:
    return parse_inline_macro(source)


def parse_inline(source: Span) -> Optional[MatchedItem[Inline]]:
    """Parse the first non-empty line of ``source`` as an inline element.

    None if the input does not start with a non-empty line.
    """
    line = source.take_non_empty_line()
    if line is None:
        return None

    uninterp = _parse_uninterpreted(line.item)
    if uninterp.after.is_empty:
        return MatchedItem(Uninterpreted(uninterp.item), line.after)

    inlines: list[Inline] = []
    while True:
        if not uninterp.item.is_empty:
            inlines.append(Uninterpreted(uninterp.item))

        span = uninterp.after
        if span.is_empty:
            break

        interp = _parse_interpreted(span)
        if interp is None:
            return None
        if interp.after.is_empty and not inlines:
            return interp

        inlines.append(interp.item)
        uninterp = _parse_uninterpreted(interp.after)

    return MatchedItem(
        InlineSequence(tuple(inlines), source.trim_remainder(line.after)),
        line.after,
    )


def parse_inline_lines(source: Span) -> Optional[MatchedItem[Inline]]:
    """Parse consecutive non-empty lines as a single inline element.

    None if the input does not start with at least one non-empty line.
    """
    inlines: list[Inline] = []
    next_span = source
    while (parsed := parse_inline(next_span)) is not None:
        next_span = parsed.after
        inlines.append(parsed.item)

    if not inlines:
        return None
    if len(inlines) == 1:
        return MatchedItem(inlines[0], next_span)
    return MatchedItem(
        InlineSequence(tuple(inlines), source.trim_remainder(next_span)),
        next_span,
    )