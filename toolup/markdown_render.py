"""Rendering of Markdown text to a terminal stream with word wrapping."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_BRIGHT_RED = "\x1b[91m"

_WHITESPACE = re.compile(r"\s")

DEFAULT_MARGIN = 79


class LineWrapper:
    """Writes words to a stream, wrapping at a margin and honouring an indent."""

    def __init__(self, stream: TextIO, indent: int, margin: int) -> None:
        self.stream = stream
        self.indent = indent
        self.margin = margin
        self.pos = indent

    def write_line(self) -> None:
        self.stream.write("\n")
        self.pos = 0

    def _write_indent(self) -> None:
        if self.pos == 0:
            self.stream.write(" " * self.indent)
            self.pos = self.indent

    def write_word(self, word: str) -> None:
        """Write a word that is never broken, starting a new line if it would pass the margin."""
        self._write_indent()
        if self.pos + len(word) > self.margin and self.pos > self.indent:
            self.write_line()
            self._write_indent()
        self.stream.write(word)
        self.pos += len(word)

    def write_space(self) -> None:
        if self.pos > self.indent:
            if self.pos < self.margin:
                self.write_word(" ")
            else:
                self.write_line()

    def write_span(self, text: str) -> None:
        """Write text that may wrap at any whitespace."""
        first, *rest = _WHITESPACE.split(text)
        self.write_word(first)
        for word in rest:
            self.write_space()
            self.write_word(word)


class LineFormatter:
    """Renders Markdown blocks through a LineWrapper, applying terminal attributes."""

    def __init__(self, stream: TextIO, indent: int, margin: int, styled: bool = False) -> None:
        self.wrapper = LineWrapper(stream, indent, margin)
        self.styled = styled
        self._attrs: list[str] = []

    def _push_attr(self, attr: str) -> None:
        self._attrs.append(attr)
        if self.styled:
            self.wrapper.stream.write(attr)

    def _pop_attr(self) -> None:
        self._attrs.pop()
        if self.styled:
            self.wrapper.stream.write(_RESET + "".join(self._attrs))

    def do_spans(self, spans: Iterable[SyntaxTreeNode]) -> None:
        for span in spans:
            if span.type == "text":
                self.wrapper.write_span(span.content)
            elif span.type == "softbreak":
                self.wrapper.write_space()
            elif span.type == "code_inline":
                self._push_attr(_BOLD)
                self.wrapper.write_word(span.content)
                self._pop_attr()
            elif span.type == "em":
                self._push_attr(_BRIGHT_RED)
                self.do_spans(span.children)
                self._pop_attr()

    def do_block(self, block: SyntaxTreeNode) -> None:
        wrapper = self.wrapper
        if block.type == "heading":
            self._push_attr(_BOLD)
            wrapper.write_line()
            self.do_spans(_spans(block))
            wrapper.write_line()
            self._pop_attr()
        elif block.type in ("code_block", "fence"):
            wrapper.write_line()
            wrapper.indent += 2
            for line in block.content.splitlines():
                wrapper.write_word(line)
                wrapper.write_line()
            wrapper.indent -= 2
        elif block.type == "paragraph":
            wrapper.write_line()
            self.do_spans(_spans(block))
            wrapper.write_line()
        elif block.type == "bullet_list":
            wrapper.write_line()
            for item in block.children:
                wrapper.indent += 2
                for child in item.children:
                    if child.type == "paragraph" and child.hidden:
                        self.do_spans(_spans(child))
                    else:
                        self.do_block(child)
                wrapper.write_line()
                wrapper.indent -= 2


def _spans(block: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    return [span for inline in block.children if inline.type == "inline" for span in inline.children]


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except (OSError, ValueError):
        return False


def render(stream: TextIO, content: str) -> None:
    """Write Markdown ``content`` to ``stream``, wrapped at 79 columns."""
    formatter = LineFormatter(stream, 0, DEFAULT_MARGIN, styled=_is_tty(stream))
    tree = SyntaxTreeNode(MarkdownIt("commonmark").parse(content))
    for block in tree.children:
        formatter.do_block(block)