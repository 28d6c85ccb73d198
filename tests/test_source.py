"""Tests for angle_brackets.source module."""

import pytest

from angle_brackets import builders as b
from angle_brackets.source import SourceText
from angle_brackets.syntax import ElementNode


def element_at(
    source: str,
    tag: str,
    self_closing: bool | None = None,
) -> tuple[SourceText, ElementNode]:
    """An element spanning the whole of ``source``."""
    lines = source.split("\n")
    span = b.loc(1, 0, len(lines), len(lines[-1]))
    return SourceText(source), b.element(tag, self_closing=self_closing, loc=span)


class TestAvailability:
    """Test whether source text is usable."""

    def test_none_is_unavailable(self) -> None:
        """Test that no source means unavailable."""
        assert not SourceText(None).available

    def test_empty_string_is_unavailable(self) -> None:
        """Test that an empty template counts as no source."""
        assert not SourceText("").available

    def test_text_is_available(self) -> None:
        """Test that any template text is available."""
        assert SourceText("<div></div>").available

    def test_synthetic_location_cannot_be_located(self) -> None:
        """Test that built nodes have no source text even when source exists."""
        source = SourceText("<div></div>")
        assert not source.can_locate(b.element("div").loc)
        assert source.can_locate(b.loc(1, 0, 1, 5))


class TestSlice:
    """Test recovering the text under a span."""

    def test_single_line(self) -> None:
        """Test a span within one line."""
        source = SourceText("<div>\n  <Foo />\n</div>")
        assert source.slice(b.loc(2, 2, 2, 9)) == "<Foo />"

    def test_multi_line(self) -> None:
        """Test a span crossing lines keeps its line breaks."""
        source = SourceText("<p>\n  <Foo\n    @a={{b}}\n  />\n</p>")
        assert source.slice(b.loc(2, 2, 4, 4)) == "<Foo\n    @a={{b}}\n  />"

    def test_crlf_normalized(self) -> None:
        """Test that CRLF and CR line breaks come back as LF."""
        assert SourceText("<Foo\r\n/>").slice(b.loc(1, 0, 2, 2)) == "<Foo\n/>"
        assert SourceText("<Foo\r/>").slice(b.loc(1, 0, 2, 2)) == "<Foo\n/>"

    def test_span_outside_source_raises(self) -> None:
        """Test that spans are trusted, not validated."""
        with pytest.raises(IndexError):
            SourceText("<div></div>").slice(b.loc(3, 0, 3, 4))


class TestSelfClosing:
    """Test self-closing detection."""

    def test_self_closing_source(self) -> None:
        """Test that <Foo /> is self-closing."""
        source, element = element_at("<Foo />", "Foo")
        assert source.self_closing(element) is True

    def test_self_closing_without_space(self) -> None:
        """Test that <Foo/> is self-closing."""
        source, element = element_at("<Foo/>", "Foo")
        assert source.self_closing(element) is True

    def test_open_and_close_tags(self) -> None:
        """Test that <Foo></Foo> is not self-closing."""
        source, element = element_at("<Foo></Foo>", "Foo")
        assert source.self_closing(element) is False

    def test_children_with_slash(self) -> None:
        """Test that only the first > decides."""
        source, element = element_at("<Foo><br/></Foo>", "Foo")
        assert source.self_closing(element) is False

    def test_multi_line_self_closing(self) -> None:
        """Test a self-closing tag whose attributes span lines."""
        source, element = element_at('<Foo\n  class="x"\n/>', "Foo")
        assert source.self_closing(element) is True

    def test_explicit_flag_wins(self) -> None:
        """Test that a recorded flag is used over the source."""
        source, element = element_at("<Foo></Foo>", "Foo", self_closing=True)
        assert source.self_closing(element) is True
        source, element = element_at("<Foo />", "Foo", self_closing=False)
        assert source.self_closing(element) is False

    def test_no_source_defaults_to_false(self) -> None:
        """Test that without source nothing is self-closing."""
        element = b.element("Foo", loc=b.loc(1, 0, 1, 7))
        assert SourceText(None).self_closing(element) is False

    def test_synthetic_defaults_to_false(self) -> None:
        """Test that a built element is not self-closing even with source."""
        assert SourceText("<Foo />").self_closing(b.element("Foo")) is False

    def test_no_closing_bracket(self) -> None:
        """Test a span without any > is not self-closing."""
        source = SourceText("<Foo /")
        element = b.element("Foo", loc=b.loc(1, 0, 1, 6))
        assert source.self_closing(element) is False


class TestTagName:
    """Test recovering the tag as written."""

    def test_restores_case(self) -> None:
        """Test that a lowercased parser tag gets its capital back."""
        source, element = element_at("<FooBar />", "fooBar")
        assert source.tag_name(element) == "FooBar"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("<div class='x'></div>", "div"),
            ("<Foo></Foo>", "Foo"),
            ("<Foo/>", "Foo"),
            ("<@greeting />", "@greeting"),
            ("<this.item />", "this.item"),
            ("<x.Button>hi</x.Button>", "x.Button"),
            ("<Foo\n  @a={{b}}\n/>", "Foo"),
            ("<Foo\t@a={{b}} />", "Foo"),
            ("<foo-bar></foo-bar>", "foo-bar"),
        ],
    )
    def test_reads_tag_from_source(self, text: str, expected: str) -> None:
        """Test the tag scan stops at /, > or whitespace."""
        source, element = element_at(text, "ignored")
        assert source.tag_name(element) == expected

    def test_no_source_uses_parser_tag(self) -> None:
        """Test the fallback to the parser's tag."""
        element = b.element("fooBar", loc=b.loc(1, 0, 1, 10))
        assert SourceText(None).tag_name(element) == "fooBar"

    def test_synthetic_uses_parser_tag(self) -> None:
        """Test that built elements keep their own tag."""
        assert SourceText("<Other />").tag_name(b.element("Foo")) == "Foo"
