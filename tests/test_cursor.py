from adapters.expression_compiler import END, Cursor


def test_cursor_peeks_and_advances():
    cursor = Cursor("12")

    assert cursor.peek() == "1"
    cursor.advance()
    assert cursor.peek() == "2"
    assert cursor.position == 1


def test_cursor_end_sentinel_is_persistent():
    cursor = Cursor("7")
    cursor.advance()

    assert cursor.peek() is END
    cursor.advance()
    cursor.advance()
    assert cursor.peek() is END
    assert cursor.position == 1
    assert cursor.at_end()


def test_cursor_skip_whitespace_only_spaces_and_tabs():
    cursor = Cursor(" \t \n3")

    cursor.skip_whitespace()

    assert cursor.peek() == "\n"
    assert cursor.position == 3


def test_cursor_rest_returns_unconsumed_text():
    cursor = Cursor("1 + 2")
    cursor.advance()

    assert cursor.rest() == " + 2"
