"""Game stages: fixed-size scenes with a background and an escape-to-menu signal."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable

import pygame

log = logging.getLogger(__name__)

SCENE_SIZE = (920, 570)
BACKGROUND_DIR = "backgraunds"


class Signal:
    """A list of callables invoked in connection order on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


def _scale(image: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.transform.smoothscale(image, size)
    except ValueError:
        # smoothscale only handles 24/32-bit surfaces
        return pygame.transform.scale(image, size)


class Stage(ABC):
    """A scene of fixed size; Escape asks to go back to the menu."""

    def __init__(self, resource_dir: str | Path) -> None:
        self.resource_dir = Path(resource_dir)
        self.scene_rect = pygame.Rect(0, 0, *SCENE_SIZE)
        self.background: pygame.Surface | None = None
        self.return_to_menu = Signal()
        log.debug("[Escenario] Constructor - Escena creada")
        self.load_background()

    @property
    @abstractmethod
    def background_file(self) -> str:
        """File name of this stage's background image."""

    @property
    def background_path(self) -> Path:
        return self.resource_dir / BACKGROUND_DIR / self.background_file

    def load_background(self) -> pygame.Surface | None:
        """Load the background stretched to the scene size; keep none if it fails."""
        try:
            image = pygame.image.load(str(self.background_path))
        except (pygame.error, OSError):
            log.warning("No se pudo cargar la imagen de fondo")
            return None
        self.background = _scale(image, self.scene_rect.size)
        return self.background

    def key_press(self, key: int) -> None:
        log.debug("[Escenario] Tecla presionada: %s", key)
        if key == pygame.K_ESCAPE:
            log.debug(
                "[Escenario] Tecla ESC detectada - Emitiendo señal de regreso al menú"
            )
            self.return_to_menu.emit()

    def draw(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, self.scene_rect.topleft)


class Level1(Stage):
    background_file = "BACKGRAUND NIVEL 1.png"


class Level2(Stage):
    background_file = "BACKGRAUND NIVEL 2.png"


class Level3(Stage):
    background_file = "BACKGRAUND NIVEL 3.png"