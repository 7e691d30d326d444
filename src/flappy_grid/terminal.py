"""
terminal.py: The character-cell drawing surface the game renders into.

The Console is a plain grid buffer. It knows nothing about windows or fonts;
the pygame backend in client.py rasterizes it once per frame.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .constants import BLACK, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE

Color = Tuple[int, int, int]

# CP437 pictographs for the control range 0..31
_CP437_LOW = (
    " ☺☻♥♦♣♠•◘○◙♂♀♪♫☼"
    "►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
)
BLANK = ord(' ')


def to_cp437(ch: str) -> int:
    """Returns the CP437 code for a single character."""
    if ch in _CP437_LOW[1:]:
        return _CP437_LOW.index(ch)
    return ch.encode('cp437', errors='replace')[0]


def glyph_char(code: int) -> str:
    """Maps a CP437 code back to a displayable character."""
    if 0 <= code < 32:
        return _CP437_LOW[code]
    if code == 127:
        return '⌂'
    return bytes([code & 0xFF]).decode('cp437')


@dataclass
class Cell:
    glyph: int = BLANK
    fg: Color = WHITE
    bg: Color = BLACK


class Console:
    """A fixed width x height grid of glyph cells."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.quitting = False
        self.cells: List[Cell] = [Cell() for _ in range(width * height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y * self.width + x]

    def cls(self):
        """Blanks every cell, white on black."""
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        """Blanks every cell onto the given background colour."""
        for cell in self.cells:
            cell.glyph = BLANK
            cell.fg = WHITE
            cell.bg = color

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: int):
        # Off-grid writes are dropped
        if not self.in_bounds(x, y):
            return
        cell = self.cell(x, y)
        cell.glyph = glyph
        cell.fg = fg
        cell.bg = bg

    def print(self, x: int, y: int, text: str):
        """Writes text in white, keeping each cell's background."""
        for offset, ch in enumerate(text):
            if not self.in_bounds(x + offset, y):
                continue
            cell = self.cell(x + offset, y)
            cell.glyph = to_cp437(ch)
            cell.fg = WHITE

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def row_text(self, y: int) -> str:
        """Reads a row back as a string. Debugging and test helper; the game never reads cells back."""
        return "".join(glyph_char(self.cell(x, y).glyph) for x in range(self.width))
