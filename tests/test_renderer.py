"""Tests for ScreenBuffer: mirror, borders and overlay messages."""

from conftest import FakeTerminal
from term_snake.renderer import Message, ScreenBuffer


def _fill(screen, ch_for):
    for y in range(screen.height):
        for x in range(screen.width):
            screen.print_at((x, y), ch_for(x, y))
    screen.flush()


def test_starts_blank(term):
    screen = ScreenBuffer(term)
    assert (screen.width, screen.height) == (20, 10)
    assert all(screen.cell_at((x, y)) == " "
               for x in range(20) for y in range(10))
    assert not screen.has_message()


def test_print_at_needs_flush(term):
    screen = ScreenBuffer(term)
    screen.print_at((3, 4), "O")
    assert screen.cell_at((3, 4)) == "O"
    assert term.visible_at((3, 4)) == " "

    screen.flush()
    assert term.visible_at((3, 4)) == "O"


def test_draw_borders_full_screen(term):
    screen = ScreenBuffer(term)
    screen.draw_borders()

    assert term.visible_row(0) == "+" + "-" * 18 + "+"
    assert term.visible_row(9) == "+" + "-" * 18 + "+"
    for y in range(1, 9):
        assert term.visible_row(y) == "|" + " " * 18 + "|"
    assert screen.cell_at((0, 0)) == "+"
    assert screen.cell_at((19, 5)) == "|"


def test_draw_borders_given_size(term):
    screen = ScreenBuffer(term)
    screen.draw_borders((5, 4))

    assert term.visible_row(0) == "+---+" + " " * 15
    assert term.visible_row(1).startswith("|   |")
    assert term.visible_row(3).startswith("+---+")
    assert term.visible_row(4) == " " * 20


def test_clear_resets_mirror(term):
    screen = ScreenBuffer(term)
    screen.print_at((1, 1), "X")
    screen.clear()
    assert screen.cell_at((1, 1)) == " "
    assert term.clears == 1


def test_show_message_is_centered(term):
    screen = ScreenBuffer(term)
    screen.show_message(["Hi"])

    assert screen.message == Message(top_left=(8, 4), width=4, height=3)
    assert term.visible_row(4)[8:12] == "    "
    assert term.visible_row(5)[8:12] == " Hi "
    assert term.visible_row(6)[8:12] == "    "


def test_odd_padding_goes_to_the_right():
    term = FakeTerminal(width=40)
    screen = ScreenBuffer(term)
    screen.show_message(["Paused", "Press Esc to resume"])

    assert screen.message == Message(top_left=(10, 3), width=21, height=4)
    assert term.visible_row(4)[10:31] == " " * 7 + "Paused" + " " * 8


def test_show_message_leaves_mirror_alone(term):
    screen = ScreenBuffer(term)
    _fill(screen, lambda x, y: "#")
    screen.show_message(["Paused", "Press Esc"])

    assert term.visible_at((10, 5)) != "#"
    assert all(screen.cell_at((x, y)) == "#"
               for x in range(20) for y in range(10))


def test_hide_message_restores_content(term):
    screen = ScreenBuffer(term)
    _fill(screen, lambda x, y: "abcdefghij"[(x + y) % 10])
    before = dict(term.visible)

    screen.show_message(["Game over!", "Score: 12", "", "Press any key"])
    assert term.visible != before

    screen.hide_message()
    assert term.visible == before
    assert not screen.has_message()


def test_hide_message_shows_later_game_content(term):
    screen = ScreenBuffer(term)
    screen.show_message(["Paused"])
    screen.print_at((10, 5), "O")
    screen.hide_message()
    assert term.visible_at((10, 5)) == "O"


def test_hide_without_message_is_noop(term):
    screen = ScreenBuffer(term)
    flushes = term.flushes
    screen.hide_message()
    assert term.writes == []
    assert term.flushes == flushes


def test_second_message_replaces_first(term):
    screen = ScreenBuffer(term)
    _fill(screen, lambda x, y: ".")

    screen.show_message(["A much longer first message"[:16]])
    screen.show_message(["B"])

    assert screen.message == Message(top_left=(9, 4), width=3, height=3)
    # Cells covered only by the first box are back to the mirror content
    assert term.visible_at((3, 5)) == "."
    assert term.visible_row(5)[9:12] == " B "


def test_message_larger_than_screen_is_clipped(term):
    screen = ScreenBuffer(term)
    _fill(screen, lambda x, y: ".")
    screen.show_message(["x" * 30])

    assert screen.message == Message(top_left=(0, 4), width=32, height=3)
    assert term.visible_row(5) == " " + "x" * 19

    screen.hide_message()
    assert term.visible_row(5) == "." * 20


def test_empty_message(term):
    screen = ScreenBuffer(term)
    screen.show_message([])
    assert screen.message == Message(top_left=(9, 4), width=2, height=2)
