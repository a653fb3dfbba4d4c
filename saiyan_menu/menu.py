"""Main menu screen: logo in a colour-cycling frame and five navigation buttons."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

from saiyan_menu.levels import SCENE_SIZE, Signal

log = logging.getLogger(__name__)

WINDOW_SIZE = SCENE_SIZE
FRAME_COLORS = ("red", "blue", "orange", "purple", "green")
COLOR_INTERVAL_MS = 500
FONT_FILE = Path("fuente") / "Saiyan-Sans.ttf"
LOGO_FILE = Path("titulo") / "dragonball_logo.png"
FONT_SIZE = 20
MARGIN = 9
SPACING = 6
FRAME_BORDER = 4
FRAME_PADDING = FRAME_BORDER + MARGIN
BUTTON_SIZE = (430, 50)
BUTTON_BORDER = 3
WINDOW_BACKGROUND = "#f0f0f0"


def frame_style(color: str) -> str:
    """Style sheet of the logo frame for the given border colour."""
    return f"border: 4px solid {color}; border-radius: 10px; background-color: white;"


@dataclass
class Button:
    label: str
    signal: Signal
    rect: pygame.Rect


def _fit(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    width, height = size
    scale = min(box[0] / width, box[1] / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


class MenuScreen:
    """The menu shown at start and whenever a level is left."""

    def __init__(self, resource_dir: str | Path) -> None:
        self.resource_dir = Path(resource_dir)
        self.start_full_game = Signal()
        self.show_level1 = Signal()
        self.show_level2 = Signal()
        self.show_level3 = Signal()
        self.show_records = Signal()

        self.color_index = 0
        self.frame_color = FRAME_COLORS[0]
        self.frame_style_sheet = frame_style(self.frame_color)
        self.hover_pos: tuple[int, int] | None = None
        self._elapsed = 0
        self._font: pygame.font.Font | None = None

        entries = [
            ("Iniciar Juego", self.start_full_game),
            ("Nivel UNO", self.show_level1),
            ("Nivel DOS", self.show_level2),
            ("Nivel TRES", self.show_level3),
            ("Ver Records", self.show_records),
        ]
        buttons_height = len(entries) * (BUTTON_SIZE[1] + SPACING)
        logo_box = (
            300,
            min(400, WINDOW_SIZE[1] - 2 * MARGIN - buttons_height - 2 * FRAME_PADDING),
        )
        self.logo = self._load_logo(logo_box)
        logo_size = self.logo.get_size() if self.logo is not None else (0, 0)

        self.frame_rect = pygame.Rect(
            0, 0, logo_size[0] + 2 * FRAME_PADDING, logo_size[1] + 2 * FRAME_PADDING
        )
        self.frame_rect.midtop = (WINDOW_SIZE[0] // 2, MARGIN)
        self.logo_rect = pygame.Rect((0, 0), logo_size)
        self.logo_rect.center = self.frame_rect.center

        self.buttons: list[Button] = []
        top = self.frame_rect.bottom + SPACING
        for label, signal in entries:
            rect = pygame.Rect((0, 0), BUTTON_SIZE)
            rect.midtop = (WINDOW_SIZE[0] // 2, top)
            self.buttons.append(Button(label, signal, rect))
            top = rect.bottom + SPACING

    def _load_logo(self, box: tuple[int, int]) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(self.resource_dir / LOGO_FILE))
        except (pygame.error, OSError):
            log.warning("No se pudo cargar el logo")
            return None
        size = _fit(image.get_size(), box)
        try:
            return pygame.transform.smoothscale(image, size)
        except ValueError:
            return pygame.transform.scale(image, size)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._font = pygame.font.Font(str(self.resource_dir / FONT_FILE), FONT_SIZE)
            except (pygame.error, OSError):
                self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def cycle_frame_color(self) -> str:
        """Move the frame border to the next colour and return it."""
        color = FRAME_COLORS[self.color_index % len(FRAME_COLORS)]
        self.frame_color = color
        self.frame_style_sheet = frame_style(color)
        self.color_index += 1
        return color

    def update(self, elapsed_ms: int) -> int:
        """Advance the colour timer; return how many times the colour changed."""
        self._elapsed += elapsed_ms
        ticks = 0
        while self._elapsed >= COLOR_INTERVAL_MS:
            self._elapsed -= COLOR_INTERVAL_MS
            self.cycle_frame_color()
            ticks += 1
        return ticks

    def handle_click(self, pos: tuple[int, int]) -> str | None:
        """Emit the signal of the button under pos; return its label."""
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                button.signal.emit()
                return button.label
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(WINDOW_BACKGROUND)
        pygame.draw.rect(surface, "white", self.frame_rect, border_radius=10)
        pygame.draw.rect(
            surface, self.frame_color, self.frame_rect, width=FRAME_BORDER, border_radius=10
        )
        if self.logo is not None:
            surface.blit(self.logo, self.logo_rect)

        font = self._get_font()
        for button in self.buttons:
            hovered = self.hover_pos is not None and button.rect.collidepoint(self.hover_pos)
            fill = "#ffcc00" if hovered else "orange"
            border = "darkred" if hovered else "red"
            pygame.draw.rect(surface, fill, button.rect, border_radius=12)
            pygame.draw.rect(
                surface, border, button.rect, width=BUTTON_BORDER, border_radius=12
            )
            text = font.render(button.label, True, "black")
            surface.blit(text, text.get_rect(center=button.rect.center))