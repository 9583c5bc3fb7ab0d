import pygame

from dinorun.game.constants import NAVY, RED, BLACK, WHITE, YELLOW
from dinorun.graphics.commands import (
    ClearScreen, ClearScreenBackground, SetGlyph, PrintText, PrintCentered, RequestQuit,
)
from dinorun.graphics.console import GlyphConsole


def test_starts_blank():
    console = GlyphConsole()

    assert (console.width, console.height) == (80, 50)
    assert console.glyph_at(0, 0) == " "
    assert console.bg_at(79, 49) == BLACK
    assert not console.quitting


def test_clear_with_background():
    console = GlyphConsole()
    console.set(3, 3, RED, BLACK, "!")

    console.apply([ClearScreenBackground(NAVY)])

    assert console.glyph_at(3, 3) == " "
    assert console.bg_at(3, 3) == NAVY
    assert console.bg_at(79, 0) == NAVY


def test_set_glyph():
    console = GlyphConsole()

    console.apply([SetGlyph(10, 40, YELLOW, BLACK, "@")])

    assert console.glyph_at(10, 40) == "@"
    assert console.fg_at(10, 40) == YELLOW


def test_out_of_grid_draws_are_clipped():
    console = GlyphConsole()

    console.apply([
        SetGlyph(-3, 40, RED, BLACK, "!"),
        SetGlyph(120, 40, RED, BLACK, "!"),
        SetGlyph(5, 60, RED, BLACK, "!"),
        PrintText(78, 2, "Score"),
    ])

    assert console.row_text(40) == ""
    assert console.row_text(2) == " " * 78 + "Sc"


def test_print_keeps_background():
    console = GlyphConsole()

    console.apply([ClearScreenBackground(NAVY), PrintText(0, 1, "Score: 4")])

    assert console.row_text(1) == "Score: 4"
    assert console.fg_at(0, 1) == WHITE
    assert console.bg_at(0, 1) == NAVY


def test_print_centered():
    console = GlyphConsole()

    console.apply([PrintCentered(5, "abcd")])

    assert console.row_text(5) == " " * 38 + "abcd"


def test_quit_and_clear():
    console = GlyphConsole()

    assert console.apply([PrintText(0, 0, "x"), RequestQuit()])
    assert console.quitting

    console.apply([ClearScreen()])
    assert console.row_text(0) == ""


def test_render_surface_size():
    pygame.font.init()
    console = GlyphConsole(width=8, height=4)
    console.set(1, 1, RED, NAVY, "!")
    font = pygame.font.Font(None, 14)

    surface = console.render(font, 10, 12)

    assert surface.get_size() == (80, 48)
    assert tuple(surface.get_at((0, 0)))[:3] == BLACK
