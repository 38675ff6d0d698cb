import io

from toolup.markdown_render import DEFAULT_MARGIN, LineFormatter, LineWrapper, render


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


def _render(content):
    stream = io.StringIO()
    render(stream, content)
    return stream.getvalue()


def test_simple_paragraph():
    assert _render("Hello world") == "\nHello world\n"


def test_bullet_list_is_indented():
    assert _render("- one\n- two\n") == "\n  one\n  two\n"


def test_wrapper_wraps_at_margin():
    stream = io.StringIO()
    wrapper = LineWrapper(stream, 2, 10)
    wrapper.write_span("aaa bbb ccc")
    assert stream.getvalue() == "aaa bbb \n  ccc"
    assert wrapper.pos == 5


def test_wrapper_lines_stay_within_margin():
    stream = io.StringIO()
    wrapper = LineWrapper(stream, 0, 20)
    wrapper.write_span(" ".join(["word"] * 40))
    lines = stream.getvalue().split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 20 for line in lines)


def test_write_line_resets_position():
    stream = io.StringIO()
    wrapper = LineWrapper(stream, 4, 40)
    wrapper.write_word("abc")
    wrapper.write_line()
    assert wrapper.pos == 0
    wrapper.write_word("def")
    assert stream.getvalue().endswith("\n    def")


def test_long_word_is_not_broken():
    stream = io.StringIO()
    wrapper = LineWrapper(stream, 0, 10)
    word = "x" * 25
    wrapper.write_word(word)
    assert stream.getvalue() == word


def test_long_paragraph_wraps_within_margin():
    text = " ".join(["lorem", "ipsum", "dolor", "sit", "amet"] * 30)
    output = _render(text)
    lines = output.strip("\n").split("\n")
    assert len(lines) > 1
    assert all(len(line) <= DEFAULT_MARGIN for line in lines)
    assert " ".join(line.strip() for line in lines).split() == text.split()


def test_code_block_is_indented_and_not_wrapped():
    code = "let value = " + "1 + " * 40 + "1;"
    output = _render("    " + code + "\n")
    assert "  " + code in output.split("\n")


def test_heading_text_is_written():
    output = _render("# Title here")
    assert output.strip("\n") == "Title here"


def test_inline_code_and_emphasis_are_kept():
    output = _render("use `cargo` for *builds*")
    assert output.strip("\n").split() == ["use", "cargo", "for", "builds"]


def test_strong_text_is_dropped():
    output = _render("keep **dropped** this")
    assert "dropped" not in output
    assert "keep" in output and "this" in output


def test_styled_emphasis_uses_colour_and_reset():
    stream = _TtyStream()
    render(stream, "an *important* note")
    text = stream.getvalue()
    assert "\x1b[91mimportant\x1b[0m" in text


def test_unstyled_formatter_writes_no_escapes():
    stream = io.StringIO()
    formatter = LineFormatter(stream, 0, DEFAULT_MARGIN)
    assert formatter.styled is False
    render(stream, "a `b` *c*")
    assert "\x1b" not in stream.getvalue()