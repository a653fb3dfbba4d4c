"""Main window: switches between the menu and the level scenes."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from saiyan_menu.levels import Level1, Level2, Level3, Stage
from saiyan_menu.menu import MenuScreen, WINDOW_SIZE

log = logging.getLogger(__name__)

FRAME_RATE = 60


class MainWindow:
    """Holds the menu and at most one running stage."""

    def __init__(self, resource_dir: str | Path) -> None:
        self.resource_dir = Path(resource_dir)
        self.size = WINDOW_SIZE
        self.menu = MenuScreen(self.resource_dir)
        self.stage: Stage | None = None
        self.running = True

        self.menu.start_full_game.connect(self.load_levels)
        self.menu.show_level1.connect(self.start_level1)
        self.menu.show_level2.connect(self.start_level2)
        self.menu.show_level3.connect(self.start_level3)
        self.menu.show_records.connect(self.show_records)

    @property
    def current(self) -> MenuScreen | Stage:
        return self.stage if self.stage is not None else self.menu

    def load_levels(self) -> Stage:
        return self.start_level1()

    def _start_level(self, level_cls: type[Stage], number: int) -> Stage:
        log.info("[MainWindow] Iniciando Nivel %d", number)
        stage = level_cls(self.resource_dir)
        stage.return_to_menu.connect(self.return_to_menu)
        self.stage = stage
        log.info("[MainWindow] Nivel %d listo - Presiona ESC para regresar", number)
        return stage

    def start_level1(self) -> Stage:
        return self._start_level(Level1, 1)

    def start_level2(self) -> Stage:
        return self._start_level(Level2, 2)

    def start_level3(self) -> Stage:
        return self._start_level(Level3, 3)

    def return_to_menu(self) -> None:
        log.info("[MainWindow] Regresando al menú principal")
        if self.stage is not None:
            log.info("[MainWindow] Eliminando escenario actual")
            self.stage = None
        log.info("[MainWindow] Restaurando ventana de juego principal")

    def show_records(self) -> None:
        log.info("[MainWindow] Mostrar récords (a implementar)")

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif self.stage is not None:
            if event.type == pygame.KEYDOWN:
                self.stage.key_press(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.menu.hover_pos = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.menu.handle_click(event.pos)

    def draw(self, surface: pygame.Surface) -> None:
        self.current.draw(surface)

    def run(self) -> int:
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption("Dragon Ball")
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.menu.update(clock.tick(FRAME_RATE))
                self.draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="saiyan-menu", description="Dragon Ball game menu.")
    parser.add_argument(
        "--resources",
        default="Recursos",
        help="directory holding backgraunds/, titulo/ and fuente/",
    )
    args = parser.parse_args(argv)
    return MainWindow(args.resources).run()