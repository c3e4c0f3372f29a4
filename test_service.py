"""
Tests for the game service.
"""

import logging
import threading

import pytest

from game_engine import CellOccupied, InvalidConfiguration, NotYourTurn, Outcome, Turn
from game_store import GameExists, GameNotFound, GameService, InvalidGameId, JsonFileGameStore
from conftest import P0, P1, ROW_WIN_MOVES


def test_create_and_query(service):
    state = service.create("g1", P0, P1)
    assert service.query("g1") == state
    assert service.query("g1").turn is Turn.TURN_A


def test_create_twice_fails(service):
    service.create("g1", P0, P1)
    with pytest.raises(GameExists):
        service.create("g1", P1, P0)
    assert service.query("g1").players == (P0, P1)


def test_create_with_same_player_stores_nothing(service):
    with pytest.raises(InvalidConfiguration):
        service.create("g1", P0, P0)
    assert not service.store.exists("g1")


def test_move_is_saved(service):
    service.create("g1", P0, P1)
    state = service.move("g1", P0, 1, 1)
    assert service.query("g1") == state


def test_rejected_move_keeps_stored_state(service, caplog):
    service.create("g1", P0, P1)
    before = service.move("g1", P0, 0, 0)

    with caplog.at_level(logging.WARNING, logger="game_store.service"):
        with pytest.raises(CellOccupied):
            service.move("g1", P1, 0, 0)
        with pytest.raises(NotYourTurn):
            service.move("g1", P0, 2, 2)

    assert service.query("g1") == before
    assert "rejected" in caplog.text


def test_full_game(service):
    service.create("g1", P0, P1)
    for actor, row, col in ROW_WIN_MOVES:
        state = service.move("g1", actor, row, col)
    assert state.outcome is Outcome.WINNER_A
    assert service.query("g1").winner == P0


def test_unknown_game(service):
    with pytest.raises(GameNotFound):
        service.move("missing", P0, 0, 0)
    with pytest.raises(GameNotFound):
        service.query("missing")


def test_invalid_game_id(service):
    with pytest.raises(InvalidGameId):
        service.create("bad id", P0, P1)


def test_games_are_independent(service):
    service.create("one", P0, P1)
    service.create("two", P1, P0)
    service.move("one", P0, 0, 0)
    service.move("two", P1, 0, 0)
    assert service.query("one").current_player == P1
    assert service.query("two").current_player == P0


def test_create_logs(service, caplog):
    with caplog.at_level(logging.INFO, logger="game_store.service"):
        service.create("g1", P0, P1)
    assert "method=create game=g1" in caplog.text
    assert "turn=a" in caplog.text


def test_concurrent_moves_on_one_game(service):
    """Only one of many racing moves for the same turn is accepted."""
    service.create("race", P0, P1)
    cells = [(row, col) for row in range(3) for col in range(3)]
    accepted = []
    barrier = threading.Barrier(len(cells))

    def submit(row, col):
        barrier.wait()
        try:
            service.move("race", P0, row, col)
            accepted.append((row, col))
        except NotYourTurn:
            pass

    threads = [threading.Thread(target=submit, args=cell) for cell in cells]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(accepted) == 1
    assert service.query("race").move_count == 1


def test_service_with_file_store(tmp_path):
    service = GameService(JsonFileGameStore(tmp_path))
    service.create("saved", P0, P1)
    service.move("saved", P0, 2, 0)

    reopened = GameService(JsonFileGameStore(tmp_path))
    assert reopened.query("saved").current_player == P1


def test_lock_table_only_holds_stored_games(service):
    with pytest.raises(GameNotFound):
        service.move("missing", P0, 0, 0)
    with pytest.raises(GameNotFound):
        service.query("also-missing")
    with pytest.raises(InvalidConfiguration):
        service.create("solo", P0, P0)
    assert service._locks == {}

    service.create("g1", P0, P1)
    service.move("g1", P0, 1, 1)
    assert list(service._locks) == ["g1"]
