"""Shared game state: the board, its pieces and the locks guarding them."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum, IntEnum

SCREEN_HEIGHT = 20
SCREEN_WIDTH = 60
TOTAL_SOLDIERS = 10
MAX_ROCKETS = 32
INITIAL_ROCKETS = 5

HELICOPTER_START = (2, SCREEN_HEIGHT // 2)
PLATFORM = (SCREEN_WIDTH - 2, SCREEN_HEIGHT // 2)
DEPOT = (3, SCREEN_HEIGHT // 4)
BRIDGE = (SCREEN_WIDTH // 2, SCREEN_HEIGHT - 2)


class Direction(IntEnum):
    """Directions the helicopter can move in."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class GameState(Enum):
    """Overall state of a game."""

    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DEFEAT = "defeat"


@dataclass
class Helicopter:
    x: int = 0
    y: int = 0
    soldiers_aboard: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Soldier:
    x: int = 0
    y: int = 0
    rescued: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Battery:
    x: int = 0
    y: int = 0
    rockets_left: int = 0
    reloading: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Rocket:
    x: int = 0
    y: int = 0
    active: bool = False
    direction: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class Game:
    """All mutable state of one game, with the locks that protect it."""

    def __init__(self) -> None:
        self.helicopter_lock = threading.Lock()
        self.rockets_lock = threading.Lock()
        self.soldiers_lock = threading.Lock()
        self._battery_locks = (threading.Lock(), threading.Lock())
        self.depot = threading.Condition()
        self.bridge = threading.Condition()
        self.rockets: list[Rocket] = [Rocket() for _ in range(MAX_ROCKETS)]
        self.reset()

    def reset(self) -> None:
        """Put every piece back at its starting place."""
        start_x, start_y = HELICOPTER_START
        self.helicopter = Helicopter(start_x, start_y, 0)

        spacing = (SCREEN_HEIGHT - 4) // TOTAL_SOLDIERS
        self.soldiers = [Soldier(1, 2 + i * spacing, False) for i in range(TOTAL_SOLDIERS)]

        self.batteries = [
            Battery(5, SCREEN_HEIGHT // 4, INITIAL_ROCKETS, False),
            Battery(SCREEN_WIDTH - 6, 3 * SCREEN_HEIGHT // 4, INITIAL_ROCKETS, False),
        ]

        self.bridge_busy = False
        self.depot_busy = False
        self.soldiers_rescued = 0
        self.state = GameState.IN_PROGRESS

    def battery_lock(self, battery_id: int) -> threading.Lock:
        """Return the lock guarding the battery with the given id."""
        if battery_id not in (0, 1):
            raise ValueError(f"no battery with id {battery_id!r}")
        return self._battery_locks[battery_id]