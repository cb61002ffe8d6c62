"""Player-controlled helicopter: movement, collisions and rescues."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from .game import (
    DEPOT,
    PLATFORM,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_SOLDIERS,
    Direction,
    Game,
    GameState,
)

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Map a control key to a direction, or None for any other key."""
    return _KEYS.get(key)


def move_helicopter(game: Game, direction: Direction) -> None:
    """Move the helicopter one cell, staying inside the screen borders."""
    heli = game.helicopter
    if direction is Direction.UP and heli.y > 1:
        heli.y -= 1
    elif direction is Direction.DOWN and heli.y < SCREEN_HEIGHT - 2:
        heli.y += 1
    elif direction is Direction.LEFT and heli.x > 1:
        heli.x -= 1
    elif direction is Direction.RIGHT and heli.x < SCREEN_WIDTH - 2:
        heli.x += 1


def check_collision(game: Game) -> bool:
    """Return True if the helicopter sits on something that destroys it."""
    heli = game.helicopter
    if heli.y == 0 or heli.y == SCREEN_HEIGHT - 1:
        return True
    if any(heli.position == battery.position for battery in game.batteries):
        return True
    if heli.position == DEPOT:
        return True
    return False


def process_rescue(game: Game) -> None:
    """Deliver soldiers at the platform and pick up one soldier underneath."""
    heli = game.helicopter
    if heli.position == PLATFORM and heli.soldiers_aboard > 0:
        with game.soldiers_lock:
            game.soldiers_rescued += heli.soldiers_aboard
            heli.soldiers_aboard = 0
    for soldier in game.soldiers:
        if not soldier.rescued and soldier.position == heli.position:
            with game.soldiers_lock:
                soldier.rescued = True
                heli.soldiers_aboard += 1
            break


def helicopter_step(game: Game, key: str) -> bool:
    """Apply one key press; return False once the helicopter's part is over."""
    running = True
    direction = direction_for_key(key)
    if direction is not None:
        with game.helicopter_lock:
            move_helicopter(game, direction)

    with game.helicopter_lock:
        if check_collision(game):
            game.state = GameState.DEFEAT
            running = False

    with game.helicopter_lock:
        process_rescue(game)
        if game.soldiers_rescued >= TOTAL_SOLDIERS:
            game.state = GameState.VICTORY
            running = False

    return running


def read_key(stream: TextIO | None = None) -> str:
    """Read one character without echo or line buffering; '' at end of input."""
    stream = sys.stdin if stream is None else stream
    if termios is None or not stream.isatty():
        return stream.read(1)
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, new)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def run_helicopter(game: Game, read: Callable[[], str] = read_key, tick: float = 0.05) -> None:
    """Steer the helicopter from key presses until the game is decided."""
    running = True
    while running and game.state is GameState.IN_PROGRESS:
        running = helicopter_step(game, read())
        if tick:
            time.sleep(tick)