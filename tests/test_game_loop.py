from __future__ import annotations

import pytest

from frogger.clock import FrameClock
from frogger.data_models import Command, GameEvent, Mode
from frogger.engine import GameEngine
from frogger.game_loop import GameLoop


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def draw_background(self) -> None:
        self.calls.append(("background",))

    def draw_entity(self, sprite: str, x: float, y: float) -> None:
        self.calls.append(("entity", sprite, x, y))

    def draw_hud(self, score: int, timer: float) -> None:
        self.calls.append(("hud", score, timer))

    def draw_start_screen(self) -> None:
        self.calls.append(("start_screen",))

    def draw_paused_overlay(self) -> None:
        self.calls.append(("paused",))

    def draw_game_over_overlay(self) -> None:
        self.calls.append(("game_over",))


def _loop(seed: int = 11) -> tuple[GameLoop, RecordingRenderer, list[GameEvent]]:
    engine = GameEngine.new_game(seed=seed)
    for enemy in engine.state.enemies:
        enemy.x, enemy.speed = -1000.0, 0.0
    engine.hide_gem(engine.state.gem)
    renderer = RecordingRenderer()
    events: list[GameEvent] = []
    loop = GameLoop(engine, renderer, FrameClock(0.0, max_dt=None), on_event=events.append)
    return loop, renderer, events


def test_start_screen_only_until_play() -> None:
    loop, renderer, _ = _loop()

    assert loop.tick(16.0) is True
    assert renderer.names() == ["start_screen"]
    assert loop.engine.tick_count == 0


def test_active_tick_updates_then_draws_world() -> None:
    loop, renderer, events = _loop()
    loop.handle_input(Command.PLAY)
    assert events == [GameEvent.STARTED]

    assert loop.tick(500.0) is True

    assert loop.engine.tick_count == 1
    assert loop.engine.state.timer == pytest.approx(9.5)
    names = renderer.names()
    assert names[0] == "background"
    assert names[-1] == "hud"
    # Gem is hidden, so only enemies and player are drawn.
    assert names.count("entity") == 6 + 1
    assert renderer.calls[-1] == ("hud", 0, pytest.approx(9.5))


def test_pause_draws_overlay_and_freezes() -> None:
    loop, renderer, events = _loop()
    loop.handle_input(Command.PLAY)
    loop.handle_input(Command.PAUSE)
    assert loop.mode is Mode.PAUSED

    assert loop.tick(3000.0) is True
    assert loop.engine.tick_count == 0
    assert loop.engine.state.timer == 10.0
    assert renderer.names()[-1] == "paused"
    assert "hud" in renderer.names()

    # Time spent paused is not charged on resume.
    loop.handle_input(Command.PAUSE)
    loop.tick(3016.0)
    assert loop.engine.state.timer == pytest.approx(10.0 - 0.016)
    assert events == [GameEvent.STARTED, GameEvent.PAUSED, GameEvent.RESUMED]


def test_negative_score_ends_game_on_next_tick() -> None:
    loop, renderer, events = _loop()
    state = loop.engine.state
    loop.handle_input(Command.PLAY)
    state.score = 4
    state.player.x, state.player.y = 202, 145
    state.enemies[2].x = 149.0

    # The collision tick itself still schedules another frame.
    assert loop.tick(16.0) is True
    assert state.score == -1
    assert GameEvent.COLLISION in events

    state.enemies[0].x, state.enemies[0].speed = 0.0, 300.0
    renderer.calls.clear()
    assert loop.tick(32.0) is False
    assert renderer.names()[-1] == "game_over"
    assert events[-1] is GameEvent.GAME_OVER
    assert loop.finished

    # No further updates once over.
    ticks = loop.engine.tick_count
    assert loop.tick(48.0) is False
    assert loop.engine.tick_count == ticks
    assert state.enemies[0].x == 0.0
    assert events.count(GameEvent.GAME_OVER) == 1


def test_input_after_game_over_does_nothing() -> None:
    loop, _, events = _loop()
    loop.handle_input(Command.PLAY)
    loop.engine.state.score = -5
    loop.tick(16.0)
    before = list(events)

    loop.handle_input(Command.PLAY)
    loop.handle_input(Command.UP)

    assert events == before
    assert loop.mode is Mode.GAME_OVER


def test_loop_without_event_sink() -> None:
    engine = GameEngine.new_game(seed=2)
    loop = GameLoop(engine, RecordingRenderer(), FrameClock(0.0))
    loop.handle_input(Command.PLAY)
    assert loop.tick(16.0) is True


def test_visible_gem_is_drawn_and_hud_timer_rounded() -> None:
    loop, renderer, _ = _loop()
    state = loop.engine.state
    state.gem.x, state.gem.y = 302, 145
    loop.handle_input(Command.PLAY)

    loop.tick(123.0)

    entities = [c for c in renderer.calls if c[0] == "entity"]
    assert entities[0] == ("entity", state.gem.sprite, 302, 145)
    assert entities[-1][1] == state.player.sprite
    assert len(entities) == 1 + 6 + 1
    assert renderer.calls[-1] == ("hud", 0, 9.9)
