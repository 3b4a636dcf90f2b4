import pytest

from cmdlines.editor import Direction, Editor


def type_text(editor, text):
    for ch in text:
        editor.process_key(ch)


def test_direction_from_key():
    assert Direction.from_key("up") is Direction.UP
    assert Direction.from_key("down") is Direction.DOWN
    assert Direction.from_key("left") is Direction.LEFT
    assert Direction.from_key("right") is Direction.RIGHT
    assert Direction.from_key("x") is Direction.UNKNOWN


@pytest.mark.parametrize("text", ["", "abc", "a\nb", "line one\n\nline three", "中文\n字符"])
def test_text_round_trip(text):
    assert Editor(text, width=80).text() == text


def test_cursor_starts_at_end_of_text():
    editor = Editor("ab\ncde", width=80)
    assert editor.cursor == (1, 3)


def test_typing_inserts_characters():
    editor = Editor(width=80)
    type_text(editor, "hello")
    assert editor.text() == "hello"
    assert editor.cursor == (0, 5)


def test_insert_in_middle():
    editor = Editor("ac", width=80)
    editor.process_key("left")
    editor.process_key("b")
    assert editor.text() == "abc"
    assert editor.cursor == (0, 2)


def test_enter_splits_line():
    editor = Editor("abc", width=80)
    editor.process_key("left")
    editor.process_key("enter")
    assert editor.lines == ["ab", "c"]
    assert editor.cursor == (1, 0)


def test_backspace_deletes_previous_char():
    editor = Editor("abc", width=80)
    editor.process_key("backspace")
    assert editor.text() == "ab"
    assert editor.cursor == (0, 2)


def test_backspace_at_line_start_joins_lines():
    editor = Editor("ab\ncd", width=80)
    editor.process_key("left")
    editor.process_key("left")
    editor.process_key("backspace")
    assert editor.lines == ["abcd"]
    assert editor.cursor == (0, 2)


def test_backspace_at_buffer_start_does_nothing():
    editor = Editor("ab", width=80)
    editor.move_cursor(Direction.LEFT)
    editor.move_cursor(Direction.LEFT)
    editor.delete_char()
    assert editor.text() == "ab"
    assert editor.cursor == (0, 0)


def test_newline_then_backspace_is_identity():
    editor = Editor("hello world", width=80)
    for _ in range(5):
        editor.move_cursor(Direction.LEFT)
    before = editor.cursor
    editor.insert_newline()
    editor.delete_char()
    assert editor.text() == "hello world"
    assert editor.cursor == before


def test_left_wraps_to_previous_line_end():
    editor = Editor("abc\nd", width=80)
    editor.move_cursor(Direction.LEFT)
    editor.move_cursor(Direction.LEFT)
    assert editor.cursor == (0, 3)


def test_right_wraps_to_next_line_start():
    editor = Editor("ab\ncd", width=80)
    editor.move_cursor(Direction.UP)
    editor.move_cursor(Direction.RIGHT)
    assert editor.cursor == (1, 0)


def test_right_at_end_of_buffer_stays():
    editor = Editor("ab", width=80)
    editor.move_cursor(Direction.RIGHT)
    assert editor.cursor == (0, 2)


def test_up_and_down_clamp_column():
    editor = Editor("a\nlonger", width=80)
    editor.move_cursor(Direction.UP)
    assert editor.cursor == (0, 1)
    editor.move_cursor(Direction.DOWN)
    assert editor.cursor == (1, 1)


def test_up_at_first_line_stays():
    editor = Editor("abc", width=80)
    editor.move_cursor(Direction.UP)
    assert editor.cursor == (0, 3)


def test_ctrl_c_quits_without_change():
    editor = Editor("abc", width=80)
    assert editor.process_key("c", ctrl=True) is True
    assert editor.text() == "abc"


def test_plain_c_is_inserted():
    editor = Editor(width=80)
    assert editor.process_key("c") is False
    assert editor.text() == "c"


def test_unknown_named_key_is_ignored():
    editor = Editor("ab", width=80)
    assert editor.process_key("tab") is False
    assert editor.text() == "ab"


def test_insert_char_rejects_multiple_characters():
    editor = Editor(width=80)
    with pytest.raises(ValueError):
        editor.insert_char("ab")


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        Editor(width=0)


def test_render_draws_all_lines():
    editor = Editor("ab\ncd", width=80)
    frame = editor.render()
    assert frame.startswith("\r\x1b[J")
    assert "ab\r\ncd" in frame


def test_second_render_returns_to_start():
    editor = Editor("ab\ncd", width=80)
    editor.render()
    assert editor.render().startswith("\x1b[1A\r\x1b[J")


def test_render_places_cursor_column():
    editor = Editor("abc", width=80)
    editor.move_cursor(Direction.LEFT)
    assert editor.render().endswith("\x1b[3G")