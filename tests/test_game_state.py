import random

import pytest

from blockfall.config import REFERENCE_SPAWN_KINDS, GameConfig
from blockfall.game_state import GameState
from blockfall.pieces import PieceKind


def test_reset_spawns_single_piece_at_spawn_anchor():
    state = GameState()
    state.reset_game()
    assert state.active is not None
    assert state.active.anchor == (5, 1)
    assert state.active.orientation == 0
    assert state.next_id == 0
    assert state.score == 0


def test_lock_assigns_consecutive_ids():
    state = GameState()
    state.reset_game(PieceKind.T)
    state.next_id = 8
    blocks = state.lock_active()
    assert [b.id for b in blocks] == [8, 9, 10, 11]
    assert [b.position for b in blocks] == [(4, 1), (5, 1), (6, 1), (5, 2)]
    assert all(b.color == "red" for b in blocks)
    assert state.next_id == 12
    assert state.active is None
    for block in blocks:
        assert state.board.get_cell(*block.position) == block.id


def test_lock_above_board_keeps_block_without_cell():
    state = GameState()
    state.reset_game(PieceKind.LINE)
    state.active.orientation = 3
    blocks = state.lock_active()
    assert [b.position for b in blocks] == [(5, 2), (5, 1), (5, 0), (5, -1)]
    assert len(state.blocks) == 4
    assert state.board.occupied_count() == 3


def test_place_blocks_rejects_occupied_cells():
    state = GameState()
    state.place_blocks([(1, 1)])
    with pytest.raises(ValueError):
        state.place_blocks([(1, 1)])


def test_place_blocks_checks_every_cell_before_placing():
    state = GameState()
    with pytest.raises(IndexError):
        state.place_blocks([(2, 14), (3, -1)])
    with pytest.raises(IndexError):
        state.place_blocks([(10, 5)])
    with pytest.raises(ValueError):
        state.place_blocks([(4, 4), (4, 4)])
    assert len(state.blocks) == 0
    assert state.next_id == 0
    assert state.board.occupied_count() == 0


def test_reference_selection_never_spawns_j():
    state = GameState(rng=random.Random(3))
    kinds = {state.spawn_piece().kind for _ in range(500)}
    assert kinds == set(REFERENCE_SPAWN_KINDS)
    assert PieceKind.J not in kinds


def test_all_kinds_option_spawns_j():
    state = GameState(config=GameConfig(all_kinds=True), rng=random.Random(3))
    kinds = {state.spawn_piece().kind for _ in range(500)}
    assert kinds == set(PieceKind)


def test_config_validation():
    with pytest.raises(ValueError):
        GameConfig(width=3)
    with pytest.raises(ValueError):
        GameConfig(gravity_ms=0)
    with pytest.raises(ValueError):
        GameConfig(spawn_kinds=())
    assert GameConfig(width=7).spawn_anchor == (3, 1)
