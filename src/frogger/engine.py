"""
engine.py: The authoritative world simulation and the input state machine.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .constants import (
    GOAL_POINTS, GEM_POINTS, COLLISION_PENALTY, TIMEOUT_PENALTY, ROUND_TIME
)
from .data_models import Command, GameEvent, GameState, Mode
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)

# (dx, dy) in grid steps
MOVES: Dict[Command, Tuple[int, int]] = {
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
}


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the GameState and is the only thing that mutates it.
    Inherits movement, spawn and collision rules from PhysicsCore.
    """
    state: GameState = field(default_factory=GameState)
    tick_count: int = 0

    @classmethod
    def new_game(cls, seed: Optional[int] = None) -> "GameEngine":
        """Builds a fresh session: start screen, six enemies, one gem."""
        engine = cls(rng=random.Random(seed))
        engine.state.enemies = engine.spawn_enemies()
        engine.regenerate_gem(engine.state.gem)
        return engine

    # ---------- Input ----------

    def handle_input(self, command: Optional[Command]) -> List[GameEvent]:
        """Applies one discrete input. Returns the events it caused."""
        if command is None:
            return []
        handler = TRANSITIONS.get((self.state.mode, command))
        if handler is None:
            return []
        return handler(self, command)

    def _toggle_play(self, command: Command) -> List[GameEvent]:
        self.state.playing = not self.state.playing
        logger.info("Play toggled: %s", "playing" if self.state.playing else "start screen")
        return [GameEvent.STARTED if self.state.playing else GameEvent.STOPPED]

    def _toggle_pause(self, command: Command) -> List[GameEvent]:
        self.state.paused = not self.state.paused
        logger.info("Pause toggled: %s", self.state.paused)
        return [GameEvent.PAUSED if self.state.paused else GameEvent.RESUMED]

    def _move(self, command: Command) -> List[GameEvent]:
        player = self.state.player

        # Standing on the goal row already counts as a crossing
        if command is Command.UP and self.at_goal(player):
            return self._cross()

        dx, dy = MOVES[command]
        moved = self.step_player(player, dx, dy)
        if moved and command is Command.UP and self.at_goal(player):
            return self._cross()
        return []

    def _cross(self) -> List[GameEvent]:
        """Reaching the water: collect a gem waiting there, score, start over."""
        events = []
        self._check_gem(events)
        self.state.score += GOAL_POINTS
        logger.debug("Crossing scored, score=%d", self.state.score)
        events.append(GameEvent.GOAL)
        self._reset_round()
        return events

    # ---------- Simulation ----------

    def step(self, dt: float) -> List[GameEvent]:
        """
        The main simulation step for one active tick.
        Mutates enemies, player, gem, score and timer.
        """
        if self.state.mode is not Mode.PLAYING:
            return []

        events: List[GameEvent] = []
        self.tick_count += 1

        # 1. Move enemies
        for enemy in self.state.enemies:
            self.move_enemy(enemy, dt)

        # 2. Collisions and pickups
        self._check_collisions(events)
        self._check_gem(events)

        # 3. Countdown. Independent of the collision check above.
        if self.state.timer > 0:
            self.state.timer -= dt
        self._check_timer(events)

        return events

    def _check_collisions(self, events: List[GameEvent]):
        state = self.state
        for enemy in state.enemies:
            if not self.collides(state.player, enemy):
                continue
            state.score -= COLLISION_PENALTY
            events.append(GameEvent.COLLISION)
            logger.debug("Hit by enemy in lane %d, score=%d", enemy.y, state.score)
            if state.score < 0:
                logger.info("Score fell below zero")
            else:
                self._reset_round()

    def _check_gem(self, events: List[GameEvent]):
        if self.check_gem(self.state.player, self.state.gem):
            self.state.score += GEM_POINTS
            self.hide_gem(self.state.gem)
            events.append(GameEvent.PICKUP)
            logger.debug("Gem collected, score=%d", self.state.score)

    def _check_timer(self, events: List[GameEvent]):
        if self.state.timer <= 0:
            self.state.score -= TIMEOUT_PENALTY
            events.append(GameEvent.TIMEOUT)
            logger.debug("Out of time, score=%d", self.state.score)
            self._reset_round()

    def _reset_round(self):
        self.respawn(self.state.player)
        self.state.timer = ROUND_TIME
        self.regenerate_gem(self.state.gem)


# (mode, command) -> handler. Anything missing is a no-op, which is how
# moving while paused or on the game-over screen is ruled out.
TRANSITIONS: Dict[Tuple[Mode, Command], Callable[[GameEngine, Command], List[GameEvent]]] = {
    (Mode.START_SCREEN, Command.PLAY): GameEngine._toggle_play,
    (Mode.START_SCREEN, Command.PAUSE): GameEngine._toggle_pause,
    (Mode.PAUSED, Command.PLAY): GameEngine._toggle_play,
    (Mode.PAUSED, Command.PAUSE): GameEngine._toggle_pause,
    (Mode.PLAYING, Command.PLAY): GameEngine._toggle_play,
    (Mode.PLAYING, Command.PAUSE): GameEngine._toggle_pause,
}
TRANSITIONS.update({(Mode.PLAYING, command): GameEngine._move for command in MOVES})
