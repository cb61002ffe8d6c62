"""Start a game: one thread each for the helicopter, batteries, rockets and display."""

from __future__ import annotations

import argparse
import random
import threading
from typing import Callable, TextIO

from .battery import run_battery
from .game import Game
from .helicopter import read_key, run_helicopter
from .interface import run_interface
from .rockets import run_rockets


def start_threads(
    game: Game,
    stop: threading.Event,
    read: Callable[[], str] = read_key,
    output: TextIO | None = None,
) -> dict[str, threading.Thread]:
    """Start every game thread and return them by name."""
    threads = {
        "helicopter": threading.Thread(
            target=run_helicopter, args=(game, read), name="helicopter", daemon=True
        ),
        "battery0": threading.Thread(
            target=run_battery,
            args=(game, 0, stop, random.Random()),
            name="battery0",
            daemon=True,
        ),
        "battery1": threading.Thread(
            target=run_battery,
            args=(game, 1, stop, random.Random()),
            name="battery1",
            daemon=True,
        ),
        "rockets": threading.Thread(
            target=run_rockets, args=(game, stop), name="rockets", daemon=True
        ),
        "interface": threading.Thread(
            target=run_interface, args=(game, output), name="interface", daemon=True
        ),
    }
    for thread in threads.values():
        thread.start()
    return threads


def main(argv: list[str] | None = None) -> int:
    """Play one game in the terminal, steering with w, a, s and d."""
    parser = argparse.ArgumentParser(
        prog="heliresgate",
        description="Rescue the soldiers with the helicopter; steer with w, a, s, d.",
    )
    parser.parse_args(argv)

    game = Game()
    stop = threading.Event()
    threads = start_threads(game, stop)
    try:
        threads["interface"].join()
    except KeyboardInterrupt:
        return 130
    finally:
        stop.set()
        for name in ("battery0", "battery1", "rockets"):
            threads[name].join()
    return 0