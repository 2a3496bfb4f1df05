from daubechies_filters.string_utils import (
    indent,
    split_into_paragraphs,
    wrap_paragraphs,
)


def test_indent():
    assert indent("") == "  "
    assert indent("foo") == "  foo"
    assert indent("foo\nbar") == "  foo\n  bar"
    assert indent("foo\nbar", "> ") == "> foo\n> bar"


def test_split_into_paragraphs():
    assert split_into_paragraphs("""
        First paragraph which is
        hard wrapped.

        Second paragraph:

        * A bullet which is
          also hard wrapped.
        * Another bullet.
    """) == [
        ("", "", "First paragraph which is hard wrapped."),
        ("", "", ""),
        ("", "", "Second paragraph:"),
        ("", "", ""),
        ("* ", "  ", "A bullet which is also hard wrapped."),
        ("* ", "  ", "Another bullet."),
    ]


def test_split_into_paragraphs_empty():
    assert split_into_paragraphs("") == []
    assert split_into_paragraphs("\n\n  \n") == []


class TestWrapParagraphs:
    def test_unlimited_width(self):
        assert wrap_paragraphs("""
            Some text
            over two lines.

            * A bullet.
        """) == "Some text over two lines.\n\n* A bullet."

    def test_wrapping(self):
        assert wrap_paragraphs("""
            one two three four

            * five six seven
        """, 10) == "one two\nthree four\n\n* five six\n  seven"
