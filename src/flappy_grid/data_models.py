"""
data_models.py: Game modes, input keys and the player/obstacle entities.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    BLACK, FLAP_VELOCITY, GAP_Y_MAX, GAP_Y_MIN, GRAVITY_STEP, MAX_GAP_SIZE,
    MAX_VELOCITY, MIN_GAP_SIZE, OBSTACLE_GLYPH, PLAYER_COLOR, PLAYER_GLYPH,
    RED, SCREEN_HEIGHT
)
from .rng import RandomNumberGenerator
from .terminal import Console


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    PAUSE = "pause"
    QUIT = "quit"


class Key(Enum):
    """The only keys the game reacts to."""
    P = "p"
    Q = "q"
    R = "r"
    SPACE = "space"
    ESCAPE = "escape"


@dataclass
class Player:
    """The flapping entity. x never changes; only the row moves."""
    x: int
    y: int
    velocity: float = 0.0

    def apply_gravity_and_move(self):
        """
        One physics tick: accelerate downward until MAX_VELOCITY,
        move by the truncated velocity, then clamp at the top row.
        """
        if self.velocity < MAX_VELOCITY:
            self.velocity += GRAVITY_STEP

        self.y += int(self.velocity)
        if self.y < 0:
            self.y = 0

    def flap(self):
        self.velocity = FLAP_VELOCITY

    def render(self, ctx: Console):
        ctx.set(self.x, self.y, PLAYER_COLOR, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A wall with a gap centered on gap_y."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: RandomNumberGenerator) -> "Obstacle":
        """Spawns an obstacle whose gap narrows as the score grows."""
        return cls(
            x=x,
            gap_y=rng.range(GAP_Y_MIN, GAP_Y_MAX),
            size=max(MIN_GAP_SIZE, MAX_GAP_SIZE - score),
        )

    def render(self, ctx: Console):
        """Scrolls one column left, then draws the wall around the gap."""
        self.x -= 1
        half_size = self.size // 2

        for y in range(0, self.gap_y - half_size):
            ctx.set(self.x, y, RED, BLACK, OBSTACLE_GLYPH)

        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            ctx.set(self.x, y, RED, BLACK, OBSTACLE_GLYPH)

    def hit_obstacle(self, player: Player) -> bool:
        half_size = self.size // 2
        does_x_match = self.x == player.x
        player_above_gap = player.y < self.gap_y - half_size
        player_below_gap = player.y > self.gap_y + half_size
        return does_x_match and (player_above_gap or player_below_gap)
