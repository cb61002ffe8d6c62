"""Rockets fired by the batteries and their flight across the screen."""

from __future__ import annotations

import threading

from .game import SCREEN_WIDTH, Game, GameState, Rocket


def create_rocket(game: Game, battery_id: int, x: int, y: int, direction: int) -> Rocket | None:
    """Launch a rocket in the first free slot; return it, or None if all slots are busy."""
    with game.rockets_lock:
        for rocket in game.rockets:
            if not rocket.active:
                rocket.x = x
                rocket.y = y
                rocket.direction = direction
                rocket.active = True
                return rocket
    return None


def advance_rockets(game: Game) -> None:
    """Move every active rocket one cell and resolve what it leaves or hits."""
    with game.rockets_lock:
        for rocket in game.rockets:
            if not rocket.active:
                continue
            rocket.x += rocket.direction
            if rocket.x < 0 or rocket.x >= SCREEN_WIDTH:
                rocket.active = False
            with game.helicopter_lock:
                if rocket.position == game.helicopter.position:
                    game.state = GameState.DEFEAT
                    rocket.active = False


def run_rockets(game: Game, stop: threading.Event, tick: float = 0.05) -> None:
    """Advance rockets every tick until stop is set."""
    while not stop.is_set():
        advance_rockets(game)
        stop.wait(tick)