from interface.tui_display import display_width, pad_display, trim_display, wrap_block, wrap_display


def test_width_counts_wide_characters_twice():
    assert display_width("abc") == 3
    assert display_width("日本") == 4


def test_trim_and_pad_use_visual_width():
    assert trim_display("日本語", 5) == "日本"
    assert pad_display("日本", 6) == "日本  "
    assert pad_display("toolong", 4) == "tool"


def test_wrap_display_breaks_at_width():
    assert wrap_display("abcdefg", 3) == ["abc", "def", "g"]
    assert wrap_display("", 3) == [""]
    assert wrap_display("abc", 0) == []


def test_wrap_block_keeps_blank_lines_but_not_trailing_newline():
    assert wrap_block("one\n\ntwo\n", 10) == ["one", "", "two"]
    assert wrap_block("", 10) == []
    assert wrap_block("\tx", 10) == ["    x"]
