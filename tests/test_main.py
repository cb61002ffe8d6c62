import io
import threading

import pytest

from heliresgate.game import DEPOT, Game, GameState
from heliresgate.main import main, start_threads

# From the start, five steps up then one right lands on the depot.
KEYS_INTO_DEPOT = "wwwwwd"


def _reader(keys):
    it = iter(keys)
    return lambda: next(it, "")


def test_start_threads_runs_game_to_defeat():
    game = Game()
    stop = threading.Event()
    out = io.StringIO()
    threads = start_threads(game, stop, _reader(KEYS_INTO_DEPOT), out)
    try:
        assert set(threads) == {"helicopter", "battery0", "battery1", "rockets", "interface"}
        threads["interface"].join(timeout=10)
        assert not threads["interface"].is_alive()
        assert game.state is GameState.DEFEAT
        assert game.helicopter.position == DEPOT
    finally:
        stop.set()
        for name in ("battery0", "battery1", "rockets"):
            threads[name].join(timeout=5)
    assert not any(threads[n].is_alive() for n in ("battery0", "battery1", "rockets"))
    assert out.getvalue().endswith("Status: DERROTA!\n")


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(KEYS_INTO_DEPOT))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "DERROTA!" in captured.out
    assert "Soldados resgatados: 0/10" in captured.out


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2