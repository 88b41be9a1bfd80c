import pytest

from adocspan.span import MatchedItem, Span


def sp(data, line=1, col=1, offset=0):
    return Span(data, line, col, offset)


def test_new_span_defaults():
    span = Span('{"hello": "world 🙌"}')
    assert (span.line, span.col, span.byte_offset) == (1, 1, 0)


# trim_trailing_whitespace cases


def test_trim_empty_source():
    assert Span("").trim_trailing_whitespace() == sp("")


def test_trim_nothing_to_trim():
    assert Span("foo").trim_trailing_whitespace() == sp("foo")


def test_trim_space_in_middle():
    assert Span("foo bar").trim_trailing_whitespace() == sp("foo bar")


def test_trim_trailing_space():
    assert Span("foo ").trim_trailing_whitespace() == sp("foo")


def test_trim_trailing_newlines():
    assert Span("foo\n\n").trim_trailing_whitespace() == sp("foo")


# slicing


def test_slice_counts_bytes_and_chars():
    assert Span("🙌ab").slice_from(1) == sp("ab", 1, 2, 4)


def test_slice_across_lines():
    assert Span("ab\ncd\nef").slice_from(4) == sp("d\nef", 2, 2, 4)


def test_slice_middle():
    assert Span("abcdef").slice(2, 4) == sp("cd", 1, 3, 2)


def test_slice_out_of_range():
    with pytest.raises(IndexError):
        Span("abc").slice(1, 10)


def test_position():
    assert Span("abc").position(lambda c: c == "c") == 2
    assert Span("abc").position(lambda c: c == "z") is None


# splitting


def test_into_parse_result_clamps():
    mi = Span("abc").into_parse_result(100)
    assert mi.item == sp("abc")
    assert mi.after == sp("", 1, 4, 3)


def test_split_at_match_non_empty():
    assert Span(":abc").split_at_match_non_empty(lambda c: c == ":") is None
    assert Span("").split_at_match_non_empty(lambda c: c == ":") is None
    mi = Span("ab:c").split_at_match_non_empty(lambda c: c == ":")
    assert mi.item == sp("ab")
    assert mi.after == sp(":c", 1, 3, 2)
    whole = Span("abc").split_at_match_non_empty(lambda c: c == ":")
    assert whole.item == sp("abc")


def test_discard_and_discard_all():
    assert Span("abcd").discard(2) == sp("cd", 1, 3, 2)
    assert Span("ab\nc").discard_all() == sp("", 2, 2, 4)


# taking


def test_take_prefix():
    mi = Span("foo:bar").take_prefix("foo")
    assert mi.item == sp("foo")
    assert mi.after == sp(":bar", 1, 4, 3)
    assert Span("foo").take_prefix("bar") is None


def test_take_whitespace():
    mi = Span(" \tx").take_whitespace()
    assert mi.item == sp(" \t")
    assert mi.after == sp("x", 1, 3, 2)
    assert Span("x").take_whitespace().item == sp("")


def test_take_required_whitespace():
    assert Span("x").take_required_whitespace() is None
    assert Span("  x").take_required_whitespace().after == sp("x", 1, 3, 2)


def test_take_while():
    mi = Span("aaab").take_while(lambda c: c == "a")
    assert mi.item == sp("aaa")
    assert mi.after == sp("b", 1, 4, 3)


# lines


def test_take_line_crlf():
    mi = Span("abc\r\ndef").take_line()
    assert mi.item == sp("abc")
    assert mi.after == sp("def", 2, 1, 5)


def test_take_line_without_newline():
    mi = Span("abc").take_line()
    assert mi.item == sp("abc")
    assert mi.after == sp("", 1, 4, 3)


def test_take_normalized_line():
    mi = Span("abc  \nx").take_normalized_line()
    assert mi.item == sp("abc")
    assert mi.after == sp("x", 2, 1, 6)


def test_take_non_empty_line():
    mi = Span("abc  \ndef").take_non_empty_line()
    assert mi.item == sp("abc")
    assert mi.after == sp("def", 2, 1, 6)
    assert Span("\nabc").take_non_empty_line() is None
    assert Span("   \nabc").take_non_empty_line() is None
    assert Span("").take_non_empty_line() is None


def test_take_empty_line():
    mi = Span(" \t\nabc").take_empty_line()
    assert mi.item == sp(" \t")
    assert mi.after == sp("abc", 2, 1, 3)
    assert Span("x").take_empty_line() is None


def test_discard_empty_lines():
    assert Span("\n  \nabc").discard_empty_lines() == sp("abc", 3, 1, 4)
    assert Span("abc").discard_empty_lines() == sp("abc")


def test_take_line_with_continuation():
    mi = Span("abc \\\ndef\nghi").take_line_with_continuation()
    assert mi.item == sp("abc \\\ndef")
    assert mi.after == sp("ghi", 3, 1, 10)


def test_take_line_with_continuation_single_line():
    mi = Span("abc  \ndef").take_line_with_continuation()
    assert mi.item == sp("abc")
    assert mi.after == sp("def", 2, 1, 6)


def test_take_line_with_continuation_empty():
    assert Span("").take_line_with_continuation() is None
    assert Span("  \nabc").take_line_with_continuation() is None


# primitives


def test_take_ident():
    mi = Span("foo_1:bar").take_ident()
    assert mi.item == sp("foo_1")
    assert mi.after == sp(":bar", 1, 6, 5)
    assert Span("_").take_ident().item == sp("_")
    assert Span("1abc").take_ident() is None
    assert Span("").take_ident() is None


def test_take_attr_name():
    mi = Span("see-also=x").take_attr_name()
    assert mi.item == sp("see-also")
    assert mi.after == sp("=x", 1, 9, 8)
    assert Span("9x").take_attr_name().item == sp("9x")
    assert Span("-abc").take_attr_name() is None
    assert Span("").take_attr_name() is None


def test_take_quoted_string():
    mi = Span('"abc"def').take_quoted_string()
    assert mi.item == sp("abc", 1, 2, 1)
    assert mi.after == sp("def", 1, 6, 5)


def test_take_quoted_string_escaped():
    mi = Span("'a\\'b'x").take_quoted_string()
    assert mi.item == sp("a\\'b", 1, 2, 1)
    assert mi.after == sp("x", 1, 7, 6)


def test_take_quoted_string_failures():
    assert Span('"abc').take_quoted_string() is None
    assert Span("abc").take_quoted_string() is None
    assert Span("").take_quoted_string() is None


def test_trim_remainder():
    span = Span("abcdef")
    assert span.trim_remainder(span.discard(4)) == sp("abcd")
    assert span.trim_remainder(span.discard_all()) == sp("abcdef")
    assert span.trim_remainder(Span("xyz")) == sp("")


def test_trim_remainder_multibyte():
    span = Span("é🙌z")
    assert span.trim_remainder(span.discard(2)) == sp("é🙌")


# matched item


def test_matched_item_trailing_spaces():
    mi = MatchedItem(Span("ab  "), Span(""))
    assert mi.trim_item_trailing_spaces().item == sp("ab")