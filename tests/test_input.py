import pytest

from asktty.input import (
    Delete,
    Input,
    InputActionResult,
    LineDirection,
    Magnitude,
    MoveCursor,
    Write,
)

CHAR, WORD, LINE = Magnitude.CHAR, Magnitude.WORD, Magnitude.LINE
LEFT, RIGHT = LineDirection.LEFT, LineDirection.RIGHT
CHANGED = InputActionResult.CONTENT_CHANGED
MOVED = InputActionResult.POSITION_CHANGED
CLEAN = InputActionResult.CLEAN

MOVE_WORD_CONTENT = "great 🌍, 🍞, 🚗, 1231321📞, 🎉, 🍆xsa232 s2da ake iak eaik"


def _expected_prev_word(initial):
    for upper, expected in (
        (16, 0),
        (30, 15),
        (37, 29),
        (42, 36),
        (46, 41),
        (50, 45),
        (54, 49),
    ):
        if initial < upper:
            return expected
    raise AssertionError(initial)


@pytest.mark.parametrize("initial", range(54))
def test_move_previous_word(initial):
    expected = _expected_prev_word(initial)
    inp = Input(MOVE_WORD_CONTENT).with_cursor(initial)
    result = inp.handle(MoveCursor(WORD, LEFT))
    assert result.needs_redraw() == (expected != initial)
    assert inp.cursor == expected


def test_regression_issue_5():
    heart = "♥"
    vs16 = "\ufe0f"
    heart_with_vs16 = "♥️"

    assert len(heart_with_vs16.encode("utf-8")) == 6
    assert len(heart_with_vs16) == 2
    assert Input(heart_with_vs16).length == 1
    assert heart + vs16 == heart_with_vs16

    inp = Input()
    assert inp.length == 0
    assert inp.cursor == 0
    assert inp.content == ""

    inp.handle(Write(heart))
    assert inp.length == 1
    assert inp.cursor == 1
    assert inp.content == heart
    assert inp.content != heart_with_vs16
    assert vs16 not in inp.content

    inp.handle(Write(vs16))
    assert inp.length == 1
    assert inp.cursor == 1
    assert inp.content == heart_with_vs16
    assert vs16 in inp.content


def test_new_is_empty():
    inp = Input()
    assert inp.length == 0
    assert inp.cursor == 0
    assert inp.content == ""
    assert inp.pre_cursor() == ""
    assert inp.placeholder is None
    assert inp.is_empty()


def test_new_with_content_is_correctly_initialized():
    inp = Input("great idea!")
    assert inp.length == 11
    assert inp.cursor == 11
    assert inp.content == "great idea!"
    assert not inp.is_empty()


def test_with_cursor_raises_if_out_of_bounds():
    inp = Input("great idea!")
    assert inp.length == 11
    assert inp.cursor == 11
    assert inp.content == "great idea!"
    assert inp.pre_cursor() == "great idea!"
    assert inp.placeholder is None
    with pytest.raises(ValueError):
        inp.with_cursor(12)


def test_with_cursor_is_correctly_initialized():
    inp = Input("great idea!").with_cursor(7)
    assert inp.length == 11
    assert inp.cursor == 7
    assert inp.content == "great idea!"
    assert inp.pre_cursor() == "great i"


def test_with_placeholder_is_correctly_initialized():
    inp = Input("great idea!").with_placeholder("placeholder")
    assert inp.length == 11
    assert inp.cursor == 11
    assert inp.content == "great idea!"
    assert inp.placeholder == "placeholder"


def test_clear_makes_content_empty():
    inp = Input("great idea!").with_cursor(7)
    assert inp.pre_cursor() == "great i"
    inp.clear()
    assert inp.length == 0
    assert inp.cursor == 0
    assert inp.content == ""
    assert inp.pre_cursor() == ""
    assert inp.placeholder is None
    assert inp.is_empty()


def test_clear_does_not_affect_placeholder():
    inp = Input("great idea!").with_cursor(7).with_placeholder("placeholder")
    assert inp.placeholder == "placeholder"
    inp.clear()
    assert inp.length == 0
    assert inp.cursor == 0
    assert inp.content == ""
    assert inp.pre_cursor() == ""
    assert inp.placeholder == "placeholder"


def _step(inp, action, result, pre, cursor, content=None):
    assert inp.handle(action) == result
    assert inp.pre_cursor() == pre
    assert inp.cursor == cursor
    if content is not None:
        assert inp.content == content


def test_move_cursor_action_tests():
    text = "great idea! you are a genius"
    inp = Input(text).with_cursor(15).with_placeholder("placeholder")
    assert inp.content == text
    assert inp.pre_cursor() == "great idea! you"
    assert inp.cursor == 15

    _step(inp, MoveCursor(CHAR, LEFT), MOVED, "great idea! yo", 14)
    _step(inp, MoveCursor(CHAR, RIGHT), MOVED, "great idea! you", 15)
    _step(inp, MoveCursor(WORD, LEFT), MOVED, "great idea! ", 12)
    _step(inp, MoveCursor(WORD, LEFT), MOVED, "great ", 6)
    _step(inp, MoveCursor(WORD, RIGHT), MOVED, "great idea", 10)
    _step(inp, MoveCursor(WORD, RIGHT), MOVED, "great idea! you", 15)
    _step(inp, MoveCursor(LINE, RIGHT), MOVED, text, 28)

    _step(inp, MoveCursor(LINE, RIGHT), CLEAN, text, 28)
    _step(inp, MoveCursor(WORD, RIGHT), CLEAN, text, 28)
    _step(inp, MoveCursor(CHAR, RIGHT), CLEAN, text, 28)

    _step(inp, MoveCursor(LINE, LEFT), MOVED, "", 0)

    _step(inp, MoveCursor(LINE, LEFT), CLEAN, "", 0)
    _step(inp, MoveCursor(WORD, LEFT), CLEAN, "", 0)
    _step(inp, MoveCursor(CHAR, LEFT), CLEAN, "", 0)

    assert inp.content == text


def test_delete_action_tests():
    inp = Input("great idea! you are a genius").with_cursor(15).with_placeholder(
        "placeholder"
    )
    assert inp.pre_cursor() == "great idea! you"

    _step(inp, Delete(CHAR, LEFT), CHANGED, "great idea! yo", 14,
          "great idea! yo are a genius")
    _step(inp, Delete(CHAR, RIGHT), CHANGED, "great idea! yo", 14,
          "great idea! yoare a genius")
    _step(inp, Delete(WORD, LEFT), CHANGED, "great idea! ", 12,
          "great idea! are a genius")
    _step(inp, Delete(WORD, RIGHT), CHANGED, "great idea! ", 12,
          "great idea!  a genius")
    _step(inp, Delete(WORD, RIGHT), CHANGED, "great idea! ", 12,
          "great idea!  genius")
    _step(inp, Delete(LINE, RIGHT), CHANGED, "great idea! ", 12, "great idea! ")
    _step(inp, Delete(LINE, RIGHT), CLEAN, "great idea! ", 12, "great idea! ")
    _step(inp, Delete(WORD, RIGHT), CLEAN, "great idea! ", 12, "great idea! ")
    _step(inp, Delete(CHAR, RIGHT), CLEAN, "great idea! ", 12, "great idea! ")
    _step(inp, Delete(LINE, LEFT), CHANGED, "", 0, "")
    _step(inp, Delete(LINE, LEFT), CLEAN, "", 0, "")
    _step(inp, Delete(WORD, LEFT), CLEAN, "", 0, "")
    _step(inp, Delete(CHAR, LEFT), CLEAN, "", 0, "")


def test_generic_user_scenario():
    inp = Input("great idea! you are a genius").with_cursor(15).with_placeholder(
        "placeholder"
    )
    _step(inp, Write("a"), CHANGED, "great idea! youa", 16,
          "great idea! youa are a genius")
    _step(inp, Write("b"), CHANGED, "great idea! youab", 17,
          "great idea! youab are a genius")
    _step(inp, Write("c"), CHANGED, "great idea! youabc", 18,
          "great idea! youabc are a genius")
    _step(inp, MoveCursor(CHAR, LEFT), MOVED, "great idea! youab", 17,
          "great idea! youabc are a genius")
    _step(inp, MoveCursor(CHAR, LEFT), MOVED, "great idea! youa", 16,
          "great idea! youabc are a genius")
    _step(inp, MoveCursor(CHAR, LEFT), MOVED, "great idea! you", 15,
          "great idea! youabc are a genius")


def test_write_in_middle_inserts_before_cursor():
    inp = Input("ac").with_cursor(1)
    assert inp.handle(Write("b")) == CHANGED
    assert inp.content == "abc"
    assert inp.cursor == 2
    assert inp.length == 3


def test_write_counts_emoji_as_one_grapheme():
    inp = Input("🍞")
    assert inp.length == 1
    inp.handle(Write("x"))
    assert inp.content == "🍞x"
    assert inp.cursor == 2
    _step(inp, Delete(CHAR, LEFT), CHANGED, "🍞", 1, "🍞")
    _step(inp, Delete(CHAR, LEFT), CHANGED, "", 0, "")


def test_needs_redraw():
    assert CHANGED.needs_redraw() is True
    assert MOVED.needs_redraw() is True
    assert CLEAN.needs_redraw() is False


def test_handle_rejects_unknown_action():
    with pytest.raises(TypeError):
        Input("abc").handle("not an action")


def test_actions_compare_by_value():
    assert Delete(CHAR, LEFT) == Delete(CHAR, LEFT)
    assert MoveCursor(WORD, RIGHT) != MoveCursor(WORD, LEFT)
    assert Write("a") == Write("a")