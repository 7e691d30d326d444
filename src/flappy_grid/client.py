#!/usr/bin/env python3
"""
client.py

pygame window that rasterizes the Console, the frame-pacing loop and the
process entry point.
"""

import sys
from typing import Dict, Iterable, Optional, Tuple

import pygame

from .constants import (
    CELL_HEIGHT, CELL_WIDTH, FONT_CANDIDATES, RENDER_FPS, SCREEN_HEIGHT,
    SCREEN_WIDTH, WHITE, WINDOW_TITLE
)
from .data_models import Key
from .game_state import GameState
from .terminal import BLANK, Color, Console, glyph_char

KEY_MAP: Dict[int, Key] = {
    pygame.K_p: Key.P,
    pygame.K_q: Key.Q,
    pygame.K_r: Key.R,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

# A private-use code point no font ships; renders as the font's missing-glyph box
MISSING_CHAR = '\ue000'

# Pictographs drawn by hand when the font lacks them: (head up, head down)
ARROWS: Dict[int, Tuple[bool, bool]] = {
    18: (True, True),
    23: (True, True),
    24: (True, False),
    25: (False, True),
}


class TerminalError(Exception):
    """The display surface could not be created."""


def translate_keys(events: Iterable[pygame.event.Event]) -> Optional[Key]:
    """Returns the first recognized key pressed this frame, if any."""
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in KEY_MAP:
            return KEY_MAP[event.key]
    return None


def get_font(size: int) -> pygame.font.Font:
    for name in FONT_CANDIDATES:
        font_path = pygame.font.match_font(name)
        if font_path:
            try:
                return pygame.font.Font(font_path, size)
            except OSError:
                continue
    return pygame.font.Font(None, size)


def draw_pictograph(code: int, fg: Color) -> pygame.Surface:
    """Draws a glyph with shapes, for codes the font cannot render."""
    surf = pygame.Surface((CELL_WIDTH, CELL_HEIGHT), pygame.SRCALPHA)
    cx = CELL_WIDTH // 2
    top, bottom = 1, CELL_HEIGHT - 2
    head = max(2, CELL_WIDTH // 3)

    if code not in ARROWS:
        pygame.draw.rect(surf, fg, surf.get_rect().inflate(-4, -6))
        return surf

    up, down = ARROWS[code]
    pygame.draw.line(surf, fg, (cx, top), (cx, bottom))
    if up:
        pygame.draw.polygon(surf, fg, [(cx, top), (cx - head, top + head), (cx + head, top + head)])
    if down:
        pygame.draw.polygon(surf, fg, [(cx, bottom), (cx - head, bottom - head), (cx + head, bottom - head)])
    if code == 23:
        pygame.draw.line(surf, fg, (cx - head, bottom + 1), (cx + head, bottom + 1))
    return surf


def surface_bytes(surf: pygame.Surface) -> Tuple[Tuple[int, int], bytes]:
    return surf.get_size(), pygame.image.tobytes(surf, "RGBA")


class PygameTerminal:
    """Owns the window and draws a Console into it cell by cell."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 title: str = WINDOW_TITLE):
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((width * CELL_WIDTH, height * CELL_HEIGHT))
            pygame.display.set_caption(title)
            self.font = get_font(CELL_HEIGHT)
            self._missing = surface_bytes(self.font.render(MISSING_CHAR, True, WHITE))
        except pygame.error as e:
            pygame.quit()
            raise TerminalError(str(e)) from e

        self.console = Console(width, height)
        self.clock = pygame.time.Clock()
        self._glyph_cache: Dict[Tuple[int, Color], pygame.Surface] = {}

    def has_glyph(self, code: int) -> bool:
        """False when the font would draw its missing-glyph box for this code."""
        rendered = self.font.render(glyph_char(code), True, WHITE)
        return surface_bytes(rendered) != self._missing

    def _glyph(self, code: int, fg: Color) -> pygame.Surface:
        surf = self._glyph_cache.get((code, fg))
        if surf is None:
            if self.has_glyph(code):
                surf = self.font.render(glyph_char(code), True, fg)
            else:
                surf = draw_pictograph(code, fg)
            self._glyph_cache[(code, fg)] = surf
        return surf

    def present(self):
        """Rasterizes the console and flips the display."""
        for y in range(self.console.height):
            for x in range(self.console.width):
                cell = self.console.cell(x, y)
                rect = pygame.Rect(x * CELL_WIDTH, y * CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT)
                self.screen.fill(cell.bg, rect)
                if cell.glyph != BLANK:
                    glyph = self._glyph(cell.glyph, cell.fg)
                    self.screen.blit(glyph, glyph.get_rect(center=rect.center))
        pygame.display.flip()

    def close(self):
        pygame.quit()


def main_loop(terminal: PygameTerminal, state: GameState):
    """Drives the game once per frame until it asks to quit or the window closes."""
    ctx = terminal.console
    running = True
    while running:
        frame_time_ms = terminal.clock.tick(RENDER_FPS)

        events = pygame.event.get()
        if any(event.type == pygame.QUIT for event in events):
            running = False
            continue

        state.tick(ctx, translate_keys(events), frame_time_ms)
        if ctx.quitting:
            running = False
            continue

        terminal.present()


def main() -> int:
    try:
        terminal = PygameTerminal()
    except TerminalError as e:
        print(f"Could not open display: {e}")
        return 1

    print(f"Window opened ({SCREEN_WIDTH}x{SCREEN_HEIGHT} cells).")
    try:
        main_loop(terminal, GameState())
    finally:
        terminal.close()
    print("Game closed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
