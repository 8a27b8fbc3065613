"""
game_loop.py: The per-frame pipeline: clock, simulation, render, reschedule.
"""

import logging
from typing import Callable, Iterable, Optional

from .clock import FrameClock
from .data_models import Command, GameEvent, Mode
from .engine import GameEngine
from .renderer import Renderer, render_world

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives one GameEngine. The host calls ``tick`` once per frame for as long
    as it returns True and forwards key presses to ``handle_input`` between
    ticks.
    """

    def __init__(
        self,
        engine: GameEngine,
        renderer: Renderer,
        clock: FrameClock,
        on_event: Optional[Callable[[GameEvent], None]] = None,
    ):
        self.engine = engine
        self.renderer = renderer
        self.clock = clock
        self.on_event = on_event
        self.finished = False

    @property
    def mode(self) -> Mode:
        return self.engine.state.mode

    def handle_input(self, command: Optional[Command]):
        self._emit(self.engine.handle_input(command))

    def tick(self, now_ms: float) -> bool:
        """Runs one frame. Returns whether the host should schedule another."""
        dt = self.clock.tick(now_ms)
        state = self.engine.state

        # Score is checked before anything else, so a negative score ends the
        # game on the tick after the event that caused it.
        if state.is_over:
            render_world(self.renderer, state)
            self.renderer.draw_game_over_overlay()
            if not self.finished:
                self.finished = True
                logger.info("Game over: %s", state.to_hud_state())
                self._emit([GameEvent.GAME_OVER])
            return False

        if not state.playing:
            self.renderer.draw_start_screen()
            return True

        if not state.paused:
            self._emit(self.engine.step(dt))

        render_world(self.renderer, state)
        if state.paused:
            self.renderer.draw_paused_overlay()
        return True

    def _emit(self, events: Iterable[GameEvent]):
        if self.on_event is None:
            return
        for event in events:
            self.on_event(event)
