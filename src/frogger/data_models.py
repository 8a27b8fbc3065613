"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, PLAYER_WIDTH, PLAYER_OFFSET_X,
    PLAYER_SPRITE, ENEMY_SPRITE, ENEMY_WIDTH, GEM_SPRITE, GEM_HIDDEN_POS,
    ROUND_TIME
)


class Command(Enum):
    """Discrete player inputs. One key press is one command."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PAUSE = "pause"
    PLAY = "play"


class Mode(Enum):
    START_SCREEN = "start_screen"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    """Fire-and-forget notifications for the audio collaborator."""
    GOAL = "goal"
    PICKUP = "pickup"
    COLLISION = "collision"
    TIMEOUT = "timeout"
    PAUSED = "paused"
    RESUMED = "resumed"
    STARTED = "started"
    STOPPED = "stopped"
    GAME_OVER = "game_over"


@dataclass
class Player:
    """The player's position on the grid. Score and timer live on GameState."""
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    width: int = PLAYER_WIDTH
    offset_x: int = PLAYER_OFFSET_X
    sprite: str = PLAYER_SPRITE


@dataclass
class Enemy:
    """A bug travelling left to right along one lane."""
    y: int
    x: float = 0.0
    speed: float = 0.0
    width: int = ENEMY_WIDTH
    sprite: str = ENEMY_SPRITE


@dataclass
class Gem:
    """The single pickup. Collected gems are parked off-field, never removed."""
    x: int = GEM_HIDDEN_POS[0]
    y: int = GEM_HIDDEN_POS[1]
    sprite: str = GEM_SPRITE

    @property
    def hidden(self) -> bool:
        return (self.x, self.y) == GEM_HIDDEN_POS


@dataclass
class GameState:
    """Everything a tick reads or mutates, owned in one place."""
    player: Player = field(default_factory=Player)
    enemies: List[Enemy] = field(default_factory=list)
    gem: Gem = field(default_factory=Gem)
    playing: bool = False
    paused: bool = False
    score: int = 0
    timer: float = ROUND_TIME

    @property
    def is_over(self) -> bool:
        return self.score < 0

    @property
    def mode(self) -> Mode:
        if self.is_over:
            return Mode.GAME_OVER
        if not self.playing:
            return Mode.START_SCREEN
        if self.paused:
            return Mode.PAUSED
        return Mode.PLAYING

    def to_hud_state(self):
        """Minimal snapshot for the scoreboard."""
        return {
            "score": self.score,
            "timer": round(self.timer, 1),
            "mode": self.mode.value,
        }
