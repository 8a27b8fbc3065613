"""
renderer.py: The drawing surface the game loop talks to.
"""

from typing import Protocol

from .data_models import GameState


class Renderer(Protocol):
    def draw_background(self) -> None: ...

    def draw_entity(self, sprite: str, x: float, y: float) -> None: ...

    def draw_hud(self, score: int, timer: float) -> None: ...

    def draw_start_screen(self) -> None: ...

    def draw_paused_overlay(self) -> None: ...

    def draw_game_over_overlay(self) -> None: ...


def render_world(renderer: Renderer, state: GameState):
    """Board, then gem, enemies and player (back to front), then the scoreboard."""
    renderer.draw_background()

    gem = state.gem
    if not gem.hidden:
        renderer.draw_entity(gem.sprite, gem.x, gem.y)
    for enemy in state.enemies:
        renderer.draw_entity(enemy.sprite, enemy.x, enemy.y)
    player = state.player
    renderer.draw_entity(player.sprite, player.x, player.y)

    hud = state.to_hud_state()
    renderer.draw_hud(hud["score"], hud["timer"])
