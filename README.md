# adocspan

Building blocks for parsing AsciiDoc source text. Every piece of text is
carried as a `Span`. A `Span` holds its 1-based line and column and its
byte offset from the start of the whole input. Each parsed element can
therefore report exactly where it lies in that input.

## Installation

```
pip install adocspan
```

## Spans

```python
from adocspan.span import Span

span = Span("first line  \nsecond line")
assert (span.line, span.col, span.byte_offset) == (1, 1, 0)

mi = span.take_normalized_line()
print(mi.item.data)      # "first line"
print(mi.after.line)     # 2
print(mi.after.col)      # 1
```

Parsing helpers return a `MatchedItem` or `None`. A `MatchedItem` holds
the matched `item` and the `after` span, which is the input that remains.
The helpers on `Span` include:

- `take_line`, `take_normalized_line`, `take_non_empty_line`
- `take_empty_line`, `discard_empty_lines`
- `take_line_with_continuation`
- `take_ident`, `take_attr_name`, `take_quoted_string`
- `take_prefix`, `take_while`, `take_whitespace`,
  `take_required_whitespace`
- `slice`, `slice_from`, `slice_to`, `into_parse_result`,
  `split_at_match_non_empty`, `discard`, `discard_all`

`trim_remainder` and `trim_trailing_whitespace` narrow a span and keep
its position information. `MatchedItem` offers
`trim_after_start_matches`, `trim_item_end_matches` and
`trim_item_trailing_spaces`.

## Inlines

```python
from adocspan.span import Span
from adocspan.inlines import parse_inline

result = parse_inline(Span("see image:sunset.jpg[Sunset] here"))
for part in result.item.inlines:
    print(type(part).__name__, part.span.data)
```

An inline element is one of `Uninterpreted`, `InlineSequence` or
`InlineMacro`; each has a `span`. `parse_inline_macro` recognises the
inline form of a named macro, `name:target[attrlist]`.
`parse_inline_lines` gathers consecutive non-empty lines into a single
inline element.

## Inline strings

`adocspan.strings.InlineStr` holds a short string of at most 22 UTF-8
bytes. It raises `StringTooLongError` when the text does not fit.
`InlineStr.from_char` builds one from a single character.

## What this package does not do

It provides spans and inline parsing only. It does not parse blocks,
sections, attribute lists, document headers or whole documents, and it
does not render output.

## Running the tests

```
pip install -e .[test]
pytest
```