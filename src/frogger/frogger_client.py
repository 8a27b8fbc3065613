#!/usr/bin/env python3
"""
frogger_client.py

Pygame host for the game loop: window, key handling, sprites, sound.
The rules live in engine.py; this module only draws and plays what it is told.
"""

import logging
import os
from typing import Callable, Dict, Iterable, Optional

import pygame

from .clock import FrameClock
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FIELD_WIDTH, RENDER_FPS, MAX_FRAME_DT,
    TILE_WIDTH, TILE_HEIGHT, NUM_ROWS, NUM_COLS, ROW_SPRITES, SPRITES,
    PLAYER_SPRITE, ENEMY_SPRITE, GEM_SPRITE
)
from .data_models import Command, GameEvent, Mode
from .engine import GameEngine
from .game_loop import GameLoop

logger = logging.getLogger(__name__)

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_SPACE: Command.PAUSE,
    pygame.K_RETURN: Command.PLAY,
    pygame.K_KP_ENTER: Command.PLAY,
}

SOUND_CUES: Dict[GameEvent, str] = {
    GameEvent.COLLISION: "sounds/bite.mp3",
    GameEvent.GOAL: "sounds/splash.mp3",
    GameEvent.PICKUP: "sounds/gem.mp3",
    GameEvent.TIMEOUT: "sounds/buzzer.mp3",
    GameEvent.GAME_OVER: "sounds/game-over.mp3",
}
MUSIC_FILE = "sounds/background-music.mp3"

# Colours
BRICK = (147, 39, 3)
ORANGE = (233, 129, 43)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Flat stand-ins for sprites whose image file is missing
PLACEHOLDER_COLORS = {
    "images/water-block.png": (40, 110, 220),
    "images/stone-block.png": (150, 150, 150),
    "images/grass-block.png": (60, 170, 60),
    ENEMY_SPRITE: (210, 40, 40),
    PLAYER_SPRITE: (240, 200, 220),
    GEM_SPRITE: (250, 150, 30),
}
SPRITE_SIZE = (101, 171)  # Every image in the art pack shares this canvas size


def command_for_key(key: int) -> Optional[Command]:
    """Unmapped keys give None, which the engine treats as a no-op."""
    return KEY_COMMANDS.get(key)


# ----------------- Resources (images) -----------------

class ResourceCache:
    """Loads every sprite once and hands out the cached surfaces."""

    def __init__(self, root: str):
        self.root = root
        self.images: Dict[str, pygame.Surface] = {}

    def load_all(self, paths: Iterable[str], on_ready: Callable[[], None]):
        for path in paths:
            if path not in self.images:
                self.images[path] = self._load(path)
        on_ready()

    def get(self, path: str) -> pygame.Surface:
        return self.images[path]

    def _load(self, path: str) -> pygame.Surface:
        full_path = os.path.join(self.root, path)
        try:
            return pygame.image.load(full_path).convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            logger.warning("Could not load %s (%s), using a placeholder", full_path, e)
            return self._placeholder(path)

    def _placeholder(self, path: str) -> pygame.Surface:
        surface = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)
        color = PLACEHOLDER_COLORS.get(path, (255, 0, 255))
        if path in ROW_SPRITES:
            pygame.draw.rect(surface, color, (0, 50, TILE_WIDTH, 121))
        elif path == ENEMY_SPRITE:
            pygame.draw.ellipse(surface, color, (2, 77, 97, 66))
        elif path == GEM_SPRITE:
            pygame.draw.polygon(surface, color, [(50, 70), (80, 110), (50, 150), (20, 110)])
        else:
            pygame.draw.ellipse(surface, color, (18, 63, 65, 77))
        return surface


# ----------------- Sound -----------------

class SoundBoard:
    """Background music plus one-shot cues. Silently idle when there is no mixer."""

    def __init__(self, root: str, enabled: bool = True):
        self.root = root
        self.enabled = enabled
        self.cues: Dict[GameEvent, pygame.mixer.Sound] = {}
        self.music_loaded = False
        self.music_playing = False
        self.music_started = False

        if not self.enabled:
            return
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            self.enabled = False
            return

        for event, path in SOUND_CUES.items():
            try:
                self.cues[event] = pygame.mixer.Sound(os.path.join(self.root, path))
            except (FileNotFoundError, pygame.error) as e:
                logger.warning("Missing sound %s (%s)", path, e)

        try:
            pygame.mixer.music.load(os.path.join(self.root, MUSIC_FILE))
            self.music_loaded = True
        except (FileNotFoundError, pygame.error) as e:
            logger.warning("Missing music %s (%s)", MUSIC_FILE, e)

    def play_cue(self, event: GameEvent):
        sound = self.cues.get(event)
        if sound is not None:
            sound.play()

    def sync_music(self, mode: Mode):
        """Music runs only while the game is actively being played."""
        if not self.music_loaded:
            return
        should_play = mode is Mode.PLAYING
        if should_play == self.music_playing:
            return

        if should_play:
            if self.music_started:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.play(loops=-1)
                self.music_started = True
        else:
            pygame.mixer.music.pause()
        self.music_playing = should_play


# ----------------- Renderer -----------------

class PygameRenderer:
    """Draws the board, sprites and message screens onto the window surface."""

    def __init__(self, screen: pygame.Surface, resources: ResourceCache):
        self.screen = screen
        self.resources = resources
        self.title_font = pygame.font.Font(None, 56)
        self.large_font = pygame.font.Font(None, 34)
        self.font = pygame.font.Font(None, 24)

    def draw_background(self):
        self.screen.fill(WHITE)
        for row in range(NUM_ROWS):
            image = self.resources.get(ROW_SPRITES[row])
            for col in range(NUM_COLS):
                self.screen.blit(image, (col * TILE_WIDTH, row * TILE_HEIGHT))

    def draw_entity(self, sprite: str, x: float, y: float):
        self.screen.blit(self.resources.get(sprite), (round(x), round(y)))

    def draw_hud(self, score: int, timer: float):
        # Scoreboard
        pygame.draw.rect(self.screen, WHITE, (FIELD_WIDTH, 0, SCREEN_WIDTH - FIELD_WIDTH, SCREEN_HEIGHT))
        left = FIELD_WIDTH + 10
        self._text(f"Time Left: {max(timer, 0.0):.1f}", self.large_font, BRICK, (left, 90))
        self._text(f"Score: {score}", self.large_font, BRICK, (left, 140))

        # Key hints
        self._button("Spacebar", (left, 280))
        self._text("to pause", self.font, BRICK, (left, 320))
        self._button("Enter", (left, 375))
        self._text("for instructions", self.font, BRICK, (left, 415))

    def draw_start_screen(self):
        screen = self.screen
        screen.fill(WHITE)
        pygame.draw.rect(screen, BRICK, (5, 5, SCREEN_WIDTH - 10, SCREEN_HEIGHT - 10), border_radius=5)
        pygame.draw.rect(screen, BLACK, (5, 5, SCREEN_WIDTH - 10, SCREEN_HEIGHT - 10), width=6, border_radius=5)
        self._centered("Frogger!", self.title_font, WHITE, SCREEN_WIDTH // 2, 50)
        pygame.draw.rect(screen, ORANGE, (5, 85, SCREEN_WIDTH - 10, 40))
        self._centered("Cross the road, grab the loot, mind the bugs", self.font, WHITE, SCREEN_WIDTH // 2, 105)

        # Cast
        cast = (
            (PLAYER_SPRITE, "Our Hero", 170),
            (ENEMY_SPRITE, "Our Enemies", 250),
            (GEM_SPRITE, "Our Loot", 330),
        )
        for sprite, label, y in cast:
            screen.blit(self.resources.get(sprite), (20, y))
            self._text(label, self.large_font, WHITE, (150, y + 90))

        # Rules
        rules = (
            "You have 10 seconds to get to the water.",
            "Getting to the water nets you 5 points.",
            "Pick up a gemstone on the way,",
            "get an extra 5 points.",
            "Bugs will eat you. And cost you 5 points.",
            "Running out of time costs 10 points.",
            "The game is over when your",
            "score falls below zero.",
        )
        for i, line in enumerate(rules):
            self._centered(line, self.font, WHITE, 515, 170 + i * 32)

        pygame.draw.rect(screen, WHITE, (160, 530, 375, 50), border_radius=5)
        self._text("Ready to Play? Hit", self.large_font, BLACK, (185, 545))
        self._button("Enter", (410, 542), fill=ORANGE)

    def draw_paused_overlay(self):
        self._message("GAME IS PAUSED", "Hit spacebar again", "to continue playing")

    def draw_game_over_overlay(self):
        self._message("GAME IS OVER. YOU LOSE.", "Restart the game", "to play again")

    # --- helpers ---

    def _message(self, first: str, second: str, third: str):
        """Greys out whatever is on screen and writes three lines over the board."""
        gray = pygame.transform.grayscale(self.screen)
        self.screen.blit(gray, (0, 0))
        center_x = FIELD_WIDTH // 2
        self._centered(first, self.large_font, BLACK, center_x, SCREEN_HEIGHT // 2)
        self._centered(second, self.font, BLACK, center_x, SCREEN_HEIGHT // 2 + 40)
        self._centered(third, self.font, BLACK, center_x, SCREEN_HEIGHT // 2 + 60)

    def _button(self, label: str, pos, fill=BRICK):
        surf = self.font.render(label, True, WHITE)
        rect = pygame.Rect(pos[0], pos[1], surf.get_width() + 10, 30)
        pygame.draw.rect(self.screen, fill, rect, border_radius=3)
        self.screen.blit(surf, (rect.x + 5, rect.y + (rect.height - surf.get_height()) // 2))

    def _text(self, text: str, font: pygame.font.Font, color, pos):
        self.screen.blit(font.render(text, True, color), pos)

    def _centered(self, text: str, font: pygame.font.Font, color, center_x: int, center_y: int):
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(center_x, center_y)))


# ----------------- Game Client -----------------

class FroggerClient:
    def __init__(
        self,
        assets_dir: str = "assets",
        seed: Optional[int] = None,
        fps: int = RENDER_FPS,
        max_dt: Optional[float] = MAX_FRAME_DT,
        sound: bool = True,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Frogger")

        self.fps = fps
        self.max_dt = max_dt
        self.seed = seed

        self.resources = ResourceCache(assets_dir)
        self.sound = SoundBoard(assets_dir, enabled=sound)
        self.clock = pygame.time.Clock()
        self.loop: Optional[GameLoop] = None

    def _init_game(self):
        """Called once every sprite is loaded."""
        engine = GameEngine.new_game(seed=self.seed)
        self.loop = GameLoop(
            engine,
            PygameRenderer(self.screen, self.resources),
            FrameClock(pygame.time.get_ticks(), max_dt=self.max_dt),
            on_event=self.sound.play_cue,
        )
        logger.info("Game initialized (seed=%s)", self.seed)

    def run(self, duration: Optional[float] = None):
        """
        The main client loop. Keeps the window open after game over until the
        player quits; ``duration`` (seconds) ends the run early.
        """
        self.resources.load_all(SPRITES, on_ready=self._init_game)

        ticking = True
        running = True
        started = pygame.time.get_ticks()
        while running:
            self.clock.tick(self.fps)

            # Handle Pygame Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif ticking:
                        self.loop.handle_input(command_for_key(event.key))

            if ticking:
                ticking = self.loop.tick(pygame.time.get_ticks())
                self.sound.sync_music(self.loop.mode)
                pygame.display.flip()

            if duration is not None and pygame.time.get_ticks() - started >= duration * 1000:
                running = False

        pygame.quit()
