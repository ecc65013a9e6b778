"""
Test script for the game entry points and board rendering.
"""
import logging

from reversi.game import (
    MoveError, Player, apply_move, is_finished, legal_moves, new_game, render, score,
)


def test_new_game():
    """A new game starts from the opening position with First to move."""
    state = new_game()
    assert state.current_player == Player.FIRST
    assert score(state) == (2, 2)
    assert not is_finished(state)
    assert legal_moves(state) == {(5, 4), (4, 5), (2, 3), (3, 2)}


def test_apply_move_returns_next_player():
    state = new_game()

    result = apply_move(state, 5, 4)
    assert result.player == Player.SECOND
    assert score(state) == (4, 1)

    result = apply_move(state, 5, 3)
    assert result.player == Player.FIRST
    assert state.position(4, 3) == Player.SECOND


def test_rejected_move_keeps_turn():
    state = new_game()
    before = state.copy()

    result = apply_move(state, 4, 4)
    assert result.error == MoveError.NON_EMPTY_POSITION
    assert result.player is None
    assert state.current_player == Player.FIRST
    assert state == before


def test_legal_moves_for_named_player():
    state = new_game()
    assert legal_moves(state, Player.SECOND) == {(5, 3), (4, 2), (2, 4), (3, 5)}


def test_render_initial_board():
    """Occupied cells show glyphs and empty cells show 1-based coordinates."""
    lines = render(new_game()).splitlines()

    assert len(lines) == 17, "8 rows plus 9 borders"
    assert lines[1].split('|')[1].strip() == '1,1'
    assert lines[15].split('|')[8].strip() == '8,8'
    row = lines[7].split('|')
    assert row[4].strip() == 'O'
    assert row[5].strip() == 'X'
    row = lines[9].split('|')
    assert row[4].strip() == 'X'
    assert row[5].strip() == 'O'


def test_render_options():
    state = new_game()
    text = render(state, glyphs=('B', 'W'), show_hints=False)
    assert ',' not in text
    assert text.count('B') == 2
    assert text.count('W') == 2


def test_render_is_pure():
    state = new_game()
    before = state.copy()
    assert render(state) == render(state)
    assert str(state) == render(state)
    assert state == before


def test_moves_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="reversi")
    state = new_game()

    apply_move(state, 0, 0)
    apply_move(state, 5, 4)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Rejected move (0, 0)" in m for m in messages)
    assert any("FIRST played (5, 4)" in m for m in messages)
