import threading

import pytest

from heliresgate.game import (
    HELICOPTER_START,
    INITIAL_ROCKETS,
    MAX_ROCKETS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_SOLDIERS,
    Game,
    GameState,
)


def test_new_game_places_helicopter_at_start():
    game = Game()
    assert game.helicopter.position == HELICOPTER_START
    assert game.helicopter.x == 2
    assert game.helicopter.soldiers_aboard == 0
    assert game.state is GameState.IN_PROGRESS


def test_soldiers_line_the_left_edge():
    game = Game()
    assert len(game.soldiers) == TOTAL_SOLDIERS
    assert all(s.x == 1 and not s.rescued for s in game.soldiers)
    ys = [s.y for s in game.soldiers]
    assert ys == sorted(set(ys))
    assert all(0 < y < SCREEN_HEIGHT - 1 for y in ys)


def test_batteries_start_loaded_and_inside_screen():
    game = Game()
    assert len(game.batteries) == 2
    for battery in game.batteries:
        assert battery.rockets_left == INITIAL_ROCKETS
        assert not battery.reloading
        assert 0 < battery.x < SCREEN_WIDTH - 1
    assert game.batteries[0].x < game.batteries[1].x


def test_rocket_slots_start_inactive():
    game = Game()
    assert len(game.rockets) == MAX_ROCKETS
    assert not any(r.active for r in game.rockets)


def test_reset_restores_initial_state():
    game = Game()
    game.helicopter.x = 40
    game.helicopter.soldiers_aboard = 3
    game.soldiers[0].rescued = True
    game.soldiers_rescued = 4
    game.batteries[1].rockets_left = 0
    game.bridge_busy = True
    game.depot_busy = True
    game.state = GameState.DEFEAT

    game.reset()

    fresh = Game()
    assert game.helicopter == fresh.helicopter
    assert game.soldiers == fresh.soldiers
    assert game.batteries == fresh.batteries
    assert game.soldiers_rescued == 0
    assert not game.bridge_busy and not game.depot_busy
    assert game.state is GameState.IN_PROGRESS


def test_battery_lock_is_stable_per_battery():
    game = Game()
    assert game.battery_lock(0) is game.battery_lock(0)
    assert game.battery_lock(0) is not game.battery_lock(1)
    assert isinstance(game.battery_lock(1), type(threading.Lock()))


@pytest.mark.parametrize("battery_id", [-1, 2, 7])
def test_battery_lock_rejects_unknown_id(battery_id):
    game = Game()
    with pytest.raises(ValueError):
        game.battery_lock(battery_id)