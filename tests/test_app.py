import logging

import pygame
import pytest

from saiyan_menu.app import MainWindow, main
from saiyan_menu.levels import Level1, Level2, Level3

LEVEL_COLORS = {1: "red", 2: "blue", 3: "green"}


def write_image(path, size, color):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def window(tmp_path):
    for number, color in LEVEL_COLORS.items():
        write_image(
            tmp_path / "backgraunds" / f"BACKGRAUND NIVEL {number}.png", (50, 50), color
        )
    return MainWindow(tmp_path)


def escape():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def centre_colour(window):
    surface = pygame.Surface((920, 570))
    window.draw(surface)
    return surface.get_at((460, 285))


def test_starts_on_menu(window):
    assert window.current is window.menu
    assert window.size == (920, 570)


@pytest.mark.parametrize(
    "start, cls",
    [("start_level1", Level1), ("start_level2", Level2), ("start_level3", Level3)],
)
def test_start_level_shows_stage(window, start, cls):
    stage = getattr(window, start)()
    assert isinstance(stage, cls)
    assert window.current is stage


def test_load_levels_starts_level_one(window):
    stage = window.load_levels()
    assert window.current is stage
    assert window.stage is stage
    assert centre_colour(window) == pygame.Color(LEVEL_COLORS[1])


def test_escape_returns_to_menu(window):
    window.start_level2()
    window.handle_event(escape())
    assert window.stage is None
    assert window.current is window.menu


def test_other_keys_stay_in_level(window):
    stage = window.start_level1()
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert window.current is stage


def test_menu_click_starts_level(window):
    button = window.menu.buttons[2]
    window.handle_event(click(button.rect.center))
    assert window.current is window.stage
    assert centre_colour(window) == pygame.Color(LEVEL_COLORS[2])


def test_start_button_loads_level_one(window):
    window.handle_event(click(window.menu.buttons[0].rect.center))
    assert window.current is window.stage
    assert centre_colour(window) == pygame.Color(LEVEL_COLORS[1])


def test_clicks_ignored_while_in_level(window):
    stage = window.start_level3()
    window.handle_event(click(window.menu.buttons[1].rect.center))
    assert window.stage is stage


def test_records_button_only_logs(window, caplog):
    with caplog.at_level(logging.INFO):
        window.handle_event(click(window.menu.buttons[4].rect.center))
    assert window.stage is None
    assert "Mostrar récords" in caplog.text


def test_mouse_motion_sets_hover(window):
    window.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(0, 0), buttons=(0, 0, 0)))
    assert window.menu.hover_pos == (5, 6)


def test_quit_stops_running(window):
    window.handle_event(pygame.event.Event(pygame.QUIT))
    assert window.running is False


def test_draw_shows_current_screen(window):
    surface = pygame.Surface((920, 570))
    window.start_level1()
    window.draw(surface)
    assert surface.get_at((460, 285)) == pygame.Color("red")
    window.return_to_menu()
    window.draw(surface)
    assert surface.get_at((0, 0)) == pygame.Color("#f0f0f0")


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0