"""
The :py:mod:`daubechies_filters.string_utils` module contains the small
selection of string formatting routines used when describing filters and
errors.
"""

import re

from textwrap import dedent, wrap

__all__ = [
    "indent",
    "wrap_paragraphs",
]


RE_BULLET = re.compile(r"^([*]\s+)(.*)$")


def indent(text, prefix="  "):
    """
    Indent every line of the string 'text' with the prefix string 'prefix'.
    """
    return "{}{}".format(prefix, ("\n{}".format(prefix)).join(text.split("\n")))


def split_into_paragraphs(text):
    """
    Deindent a multi-line, hard-wrapped string and split it into blocks which
    may be line-wrapped independently.

    Blank lines separate paragraphs and lines starting with ``*`` start a new
    bulleted block.

    Returns
    -------
    blocks : [(first_indent, rest_indent, text), ...]
        An empty ``("", "", "")`` block separates paragraphs in the output so
        that vertical whitespace is preserved.
    """
    blocks = []
    current = None
    for line in dedent(text).splitlines():
        stripped = line.strip()
        if stripped == "":
            if current is not None:
                blocks.append(current)
                current = None
                blocks.append(("", "", ""))
            continue

        match = RE_BULLET.match(stripped)
        if match:
            if current is not None:
                blocks.append(current)
            prefix, rest = match.groups()
            current = (prefix, " " * len(prefix), rest)
        elif current is None:
            current = ("", "", stripped)
        else:
            first_indent, rest_indent, block_text = current
            current = (first_indent, rest_indent, block_text + " " + stripped)

    if current is not None:
        blocks.append(current)

    # Remove trailing paragraph separators
    while blocks and blocks[-1] == ("", "", ""):
        del blocks[-1]

    return blocks


def wrap_paragraphs(text, width=None):
    """
    Re-line-wrap a string containing hard-line-wrapped paragraphs and bullet
    points (see :py:func:`split_into_paragraphs`).

    If 'width' is None, assumes an infinite line width.
    """
    lines = []
    for first_indent, rest_indent, block_text in split_into_paragraphs(text):
        if width is None or block_text == "":
            lines.append(first_indent + block_text)
        else:
            lines.append(
                first_indent
                + ("\n" + rest_indent).join(wrap(block_text, width - len(first_indent)))
            )
    return "\n".join(lines)
