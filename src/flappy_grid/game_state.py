"""
game_state.py: The per-frame mode machine.

Menu -> Playing -> {GameOver, Pause}; GameOver -> {Playing, Menu};
Pause -> {Playing, Menu}; Quit is terminal.
"""

from typing import List, Optional

from .constants import (
    BLUE, FRAME_DURATION, PLAYER_START_X, PLAYER_START_Y, SCREEN_HEIGHT,
    SCREEN_WIDTH
)
from .data_models import GameMode, Key, Obstacle, Player
from .rng import RandomNumberGenerator
from .terminal import Console


class GameState:
    """Owns the player, the two obstacles in flight, the mode and the score."""

    def __init__(self, rng: Optional[RandomNumberGenerator] = None):
        self.rng = rng or RandomNumberGenerator()
        self.mode = GameMode.MENU
        self.clean_state()

    def clean_state(self):
        """Full reset: fresh player, fresh obstacle pair, zeroed counters."""
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        # Slot 0 is the near obstacle, slot 1 the far one
        self.obstacles: List[Obstacle] = [
            Obstacle.new(SCREEN_WIDTH, 0, self.rng),
            Obstacle.new(SCREEN_WIDTH + SCREEN_WIDTH // 2, 0, self.rng),
        ]
        self.score = 0

    def restart(self):
        self.clean_state()
        self.mode = GameMode.PLAYING

    def tick(self, ctx: Console, key: Optional[Key], frame_time_ms: float):
        """Runs the current mode's behaviour for one driver frame."""
        if self.mode is GameMode.MENU:
            self.menu(ctx, key)
        elif self.mode is GameMode.PLAYING:
            self.play(ctx, key, frame_time_ms)
        elif self.mode is GameMode.GAME_OVER:
            self.dead(ctx, key)
        elif self.mode is GameMode.PAUSE:
            self.pause(ctx, key)
        elif self.mode is GameMode.QUIT:
            ctx.quitting = True

    def menu(self, ctx: Console, key: Optional[Key]):
        ctx.cls()
        ctx.print_centered(5, "Menu")
        ctx.print_centered(8, "(P) Play game")
        ctx.print_centered(9, "(Q) Quit game")

        if key is Key.P:
            self.mode = GameMode.PLAYING
        elif key is Key.Q:
            self.mode = GameMode.QUIT

    def play(self, ctx: Console, key: Optional[Key], frame_time_ms: float):
        ctx.cls_bg(BLUE)
        ctx.print(0, 0, "Press [SPACE] to flap")
        ctx.print(0, 2, f"Score: {self.score}")

        # 1. Fixed timestep: at most one physics tick per frame, no carry-over
        self.frame_time += frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.apply_gravity_and_move()

        # 2. Input
        if key is Key.SPACE:
            self.player.flap()
        elif key is Key.ESCAPE:
            self.mode = GameMode.PAUSE

        self.player.render(ctx)

        # 3. End of run: off the bottom, or into the near wall
        if self.player.y > SCREEN_HEIGHT or self.obstacles[0].hit_obstacle(self.player):
            self.mode = GameMode.GAME_OVER

        # 4. Scroll both obstacles
        for obstacle in self.obstacles:
            obstacle.render(ctx)

        # 5. Cycle once the near obstacle is behind the player
        if self.player.x > self.obstacles[0].x:
            self.obstacles[0] = self.obstacles[1]
            self.obstacles[1] = Obstacle.new(SCREEN_WIDTH, self.score, self.rng)
            self.score += 1

    def pause(self, ctx: Console, key: Optional[Key]):
        ctx.print_centered(35, "Pause!")
        ctx.print_centered(8, "(SPACE) Resume game")
        ctx.print_centered(9, "(Q) Go to the menu")

        if key is Key.SPACE:
            self.mode = GameMode.PLAYING
        elif key is Key.Q:
            self.clean_state()
            self.mode = GameMode.MENU

    def dead(self, ctx: Console, key: Optional[Key]):
        ctx.print_centered(35, "You died")
        ctx.print_centered(8, "(R) Restart game")
        ctx.print_centered(9, "(Q) Go to the menu")

        if key is Key.R:
            self.restart()
        elif key is Key.Q:
            self.clean_state()
            self.mode = GameMode.MENU
