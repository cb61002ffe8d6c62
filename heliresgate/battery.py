"""Anti-aircraft batteries: firing rockets and reloading across the bridge."""

from __future__ import annotations

import random
import threading
import time
from typing import Callable

from .game import INITIAL_ROCKETS, Game
from .rockets import create_rocket

RELOAD_TIME_MIN = 0.1
RELOAD_TIME_MAX = 0.5
FIRE_PAUSE_MIN = 0.3
FIRE_PAUSE_SPREAD = 0.2
AFTER_RELOAD_PAUSE = 0.2

Sleep = Callable[[float], object]


def fire_direction(battery_id: int) -> int:
    """Return the horizontal direction the battery's rockets fly in."""
    if battery_id == 0:
        return 1
    if battery_id == 1:
        return -1
    raise ValueError(f"no battery with id {battery_id!r}")


def try_fire(game: Game, battery_id: int) -> bool:
    """Fire one rocket if the battery has ammunition and is not reloading."""
    direction = fire_direction(battery_id)
    battery = game.batteries[battery_id]
    with game.battery_lock(battery_id):
        if battery.rockets_left > 0 and not battery.reloading:
            create_rocket(game, battery_id, battery.x, battery.y, direction)
            battery.rockets_left -= 1
            return True
    return False


def reload_battery(
    game: Game,
    battery_id: int,
    rng: random.Random | None = None,
    sleep: Sleep = time.sleep,
) -> float:
    """Cross the bridge, reload at the depot and free both; return the reload time."""
    rng = random.Random() if rng is None else rng
    battery = game.batteries[battery_id]
    lock = game.battery_lock(battery_id)

    with game.bridge:
        while game.bridge_busy:
            game.bridge.wait()
        game.bridge_busy = True

    with game.depot:
        while game.depot_busy:
            game.depot.wait()
        game.depot_busy = True
        battery.reloading = True

    micros_min = int(RELOAD_TIME_MIN * 1_000_000)
    micros_max = int(RELOAD_TIME_MAX * 1_000_000)
    duration = rng.randint(micros_min, micros_max) / 1_000_000
    sleep(duration)

    with lock:
        battery.rockets_left = INITIAL_ROCKETS
        battery.reloading = False

    with game.depot:
        game.depot_busy = False
        game.depot.notify()

    with game.bridge:
        game.bridge_busy = False
        game.bridge.notify()

    return duration


def run_battery(
    game: Game,
    battery_id: int,
    stop: threading.Event,
    rng: random.Random | None = None,
    sleep: Sleep | None = None,
) -> None:
    """Fire and reload in turn until stop is set."""
    rng = random.Random() if rng is None else rng
    pause = stop.wait if sleep is None else sleep
    while not stop.is_set():
        if try_fire(game, battery_id):
            spread = rng.randrange(int(FIRE_PAUSE_SPREAD * 1_000_000)) / 1_000_000
            pause(FIRE_PAUSE_MIN + spread)
        else:
            reload_battery(game, battery_id, rng, pause)
            pause(AFTER_RELOAD_PAUSE)