"""Text display of the board and the game's status."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from .game import (
    BRIDGE,
    DEPOT,
    PLATFORM,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_SOLDIERS,
    Game,
    GameState,
)

CLEAR_SCREEN = "\033[2J\033[H"

_STATUS_TEXT = {
    GameState.IN_PROGRESS: "Em andamento",
    GameState.VICTORY: "VITÓRIA!",
    GameState.DEFEAT: "DERROTA!",
}


def render_screen(game: Game) -> str:
    """Draw the board as text, one line per row."""
    rows = []
    for y in range(SCREEN_HEIGHT):
        if y in (0, SCREEN_HEIGHT - 1):
            rows.append(["-"] * SCREEN_WIDTH)
        else:
            rows.append(["|"] + [" "] * (SCREEN_WIDTH - 2) + ["|"])

    overlay: list[tuple[tuple[int, int], str]] = []
    with game.helicopter_lock:
        overlay.append((game.helicopter.position, "H"))
    with game.soldiers_lock:
        overlay.extend((s.position, "S") for s in game.soldiers if not s.rescued)
    for battery_id, battery in enumerate(game.batteries):
        with game.battery_lock(battery_id):
            overlay.append((battery.position, "B"))
    overlay.extend([(PLATFORM, "P"), (DEPOT, "D"), (BRIDGE, "=")])
    with game.rockets_lock:
        overlay.extend((r.position, "*") for r in game.rockets if r.active)

    for (x, y), char in overlay:
        if 0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT:
            rows[y][x] = char

    return "".join("".join(row) + "\n" for row in rows)


def render_status(game: Game) -> str:
    """Describe rescued soldiers, ammunition and the game's state."""
    first, second = game.batteries
    return (
        f"Soldados resgatados: {game.soldiers_rescued}/{TOTAL_SOLDIERS}\n"
        f"Foguetes B0: {first.rockets_left} | B1: {second.rockets_left}\n"
        f"Status: {_STATUS_TEXT[game.state]}\n"
    )


def draw(game: Game, output: TextIO | None = None) -> None:
    """Clear the terminal and draw the board with its status."""
    output = sys.stdout if output is None else output
    output.write(CLEAR_SCREEN + render_screen(game) + render_status(game))
    output.flush()


def run_interface(game: Game, output: TextIO | None = None, interval: float = 0.1) -> None:
    """Redraw until the game is decided, then draw the final screen."""
    while game.state is GameState.IN_PROGRESS:
        draw(game, output)
        if interval:
            time.sleep(interval)
    draw(game, output)