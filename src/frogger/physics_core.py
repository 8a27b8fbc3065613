"""
physics_core.py: The shared movement rules, spawn rules and collision logic.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, MOVE_HORIZONTAL, MOVE_VERTICAL,
    MIN_X, MAX_X, GOAL_Y, ENEMY_LANES, ENEMY_RESET_X, ENEMY_SPAWN_X_RANGE,
    ENEMY_SPEED_RANGE, GEM_X_SLOTS, GEM_Y_SLOTS, GEM_HIDDEN_POS
)
from .data_models import Player, Enemy, Gem


@dataclass
class PhysicsCore:
    """
    Rules over plain entity state. Holds nothing but the random source, so
    every spawn is reproducible from a seed.
    """

    ENEMY_RESET_X = ENEMY_RESET_X

    rng: random.Random = field(default_factory=random.Random)

    # ---------- Enemies ----------

    def spawn_enemies(self, lanes=ENEMY_LANES) -> List[Enemy]:
        enemies = []
        for lane_y in lanes:
            enemy = Enemy(y=lane_y)
            self.respawn_enemy(enemy)
            enemies.append(enemy)
        return enemies

    def respawn_enemy(self, enemy: Enemy):
        """Sends the enemy back off-screen left with a fresh speed."""
        enemy.x = self.rng.randint(*ENEMY_SPAWN_X_RANGE)
        enemy.speed = self.rng.randint(*ENEMY_SPEED_RANGE)

    def move_enemy(self, enemy: Enemy, dt: float):
        enemy.x += enemy.speed * dt
        if enemy.x > self.ENEMY_RESET_X:
            self.respawn_enemy(enemy)

    # ---------- Gem ----------

    def regenerate_gem(self, gem: Gem):
        gem.x = self.rng.choice(GEM_X_SLOTS)
        gem.y = self.rng.choice(GEM_Y_SLOTS)

    def hide_gem(self, gem: Gem):
        gem.x, gem.y = GEM_HIDDEN_POS

    def check_gem(self, player: Player, gem: Gem) -> bool:
        return player.x == gem.x and player.y == gem.y

    # ---------- Player ----------

    def respawn(self, player: Player):
        player.x = PLAYER_START_X
        player.y = PLAYER_START_Y

    def step_player(self, player: Player, dx: int, dy: int) -> bool:
        """
        Applies a single grid step if the destination stays on the board.
        Returns whether the player moved.
        """
        if dx < 0 and player.x <= MIN_X:
            return False
        if dx > 0 and player.x >= MAX_X:
            return False
        if dy > 0 and player.y >= PLAYER_START_Y:
            return False
        if dy < 0 and player.y <= GOAL_Y:
            return False

        player.x += dx * MOVE_HORIZONTAL
        player.y += dy * MOVE_VERTICAL
        return True

    def at_goal(self, player: Player) -> bool:
        return player.y == GOAL_Y

    # ---------- Collisions ----------

    def collides(self, player: Player, enemy: Enemy) -> bool:
        """
        Only enemies in the player's exact row are candidates. The enemy's
        right edge must fall strictly inside the player's narrowed band.
        """
        if enemy.y != player.y:
            return False

        enemy_right = enemy.x + enemy.width
        band_left = player.x + player.offset_x
        band_right = player.x + player.width - 2 * player.offset_x
        return band_left < enemy_right < band_right
