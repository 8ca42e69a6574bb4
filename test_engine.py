"""
Tests for the TicTacToe engine: board, win checker, heuristics and AI.
"""

import numpy as np
import pytest

from engine.ai_player import AIPlayer, Decision
from engine.board import Board, BoardError, Cell, Position
from engine.config import EngineConfig
from engine.heuristics import HeuristicScorer
from engine.win_checker import WinChecker


@pytest.fixture
def checker():
    return WinChecker()


@pytest.fixture
def scorer(checker):
    return HeuristicScorer(checker)


@pytest.fixture
def ai(checker):
    return AIPlayer(win_checker=checker)


# ==================== BOARD ====================

def test_parse_reads_symbols():
    board = Board.parse(["XO.", " X ", "..O"])
    assert board[0, 0] == Cell.HUMAN
    assert board[0, 1] == Cell.COMPUTER
    assert board[1, 0] == Cell.EMPTY
    assert board[Position(2, 2)] == Cell.COMPUTER


def test_parse_rejects_unknown_symbol():
    with pytest.raises(BoardError):
        Board.parse(["XQ.", "...", "..."])


def test_invalid_grid_values_rejected():
    with pytest.raises(BoardError):
        Board([[0, 0, 0], [0, 5, 0], [0, 0, 0]])


def test_setitem_requires_cell():
    board = Board()
    with pytest.raises(BoardError):
        board[0, 0] = 1


@pytest.mark.parametrize("grid", [
    [[0, 0, 0], [0, 300, 0], [0, 0, 0]],
    [[0, 0, 0], [0, -200, 0], [0, 0, 0]],
    [[0, 0], [0, 0, 0], [0, 0, 0]],
    [[0, 0, 0], [0, 0, 0]],
])
def test_malformed_grid_raises_board_error(grid):
    with pytest.raises(BoardError):
        Board(grid)


@pytest.mark.parametrize("index", [(-1, 0), (0, -1), (3, 0), (1, 3)])
def test_off_board_index_rejected(index):
    board = Board()
    with pytest.raises(BoardError):
        board[index] = Cell.HUMAN
    with pytest.raises(BoardError):
        board[index]
    with pytest.raises(BoardError):
        with board.placed(index, Cell.COMPUTER):
            pass
    assert board == Board()


def test_empty_cells_are_row_major():
    board = Board.parse(["X.O", ".X.", "O.."])
    assert board.get_empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]


def test_placed_restores_cell():
    board = Board()
    with board.placed((1, 1), Cell.COMPUTER):
        assert board[1, 1] == Cell.COMPUTER
    assert board[1, 1] == Cell.EMPTY


def test_placed_restores_cell_on_error():
    board = Board()
    with pytest.raises(RuntimeError):
        with board.placed((0, 2), Cell.HUMAN):
            raise RuntimeError("boom")
    assert board == Board()


def test_placed_refuses_occupied_cell():
    board = Board.parse(["X..", "...", "..."])
    with pytest.raises(BoardError):
        with board.placed((0, 0), Cell.COMPUTER):
            pass


def test_opposite():
    assert Cell.HUMAN.opposite() == Cell.COMPUTER
    assert Cell.COMPUTER.opposite() == Cell.HUMAN
    with pytest.raises(ValueError):
        Cell.EMPTY.opposite()


# ==================== WIN CHECKER ====================

def test_horizontal_and_vertical_lines(checker):
    board = Board.parse(["XXX", "OO.", "O.."])
    assert checker.is_winning_line(board, 0, 1)
    assert not checker.is_winning_line(board, 1, 0)

    board = Board.parse(["OX.", "OX.", "O.."])
    assert checker.is_winning_line(board, 2, 0)


def test_diagonal_lines(checker):
    board = Board.parse(["O..", ".O.", "..O"])
    assert checker.is_winning_line(board, 0, 0)
    assert checker.is_winning_line(board, 1, 1)
    assert checker.is_winning_line(board, 2, 2)


def test_empty_cell_never_wins(checker):
    assert not checker.is_winning_line(Board(), 1, 1)


def test_corner_only_checks_its_own_diagonal(checker):
    # Right diagonal is full, but (0, 0) is not on it
    board = Board.parse(["O.O", ".O.", "O.."])
    assert not checker.is_winning_line(board, 0, 0)
    assert checker.is_winning_line(board, 0, 2)


def test_edge_cells_skip_diagonals(checker):
    board = Board.parse(["XO.", ".X.", "..X"])
    assert not checker.is_winning_line(board, 0, 1)
    assert not checker.is_diagonal(0, 1)
    assert checker.is_diagonal(2, 0)


def test_find_immediate_win_first_in_row_major(checker):
    board = Board.parse(["O.O", "...", "O.."])
    assert checker.find_immediate_win(board, Cell.COMPUTER) == (0, 1)
    assert checker.count_winning_cells(board, Cell.COMPUTER) == 3


def test_find_immediate_win_none(checker):
    assert checker.find_immediate_win(Board(), Cell.COMPUTER) is None
    board = Board.parse(["OX.", "...", "..."])
    assert checker.find_immediate_win(board, Cell.COMPUTER) is None
    assert checker.count_winning_cells(board, Cell.COMPUTER) == 0


def test_find_must_defend(checker):
    board = Board.parse(["XX.", ".O.", "..."])
    assert checker.find_must_defend(board, Cell.COMPUTER) == (0, 2)
    assert checker.find_must_defend(board, Cell.HUMAN) is None

    board = Board.parse(["OO.", "...", "..."])
    assert checker.find_must_defend(board, Cell.HUMAN) == (0, 2)


def test_line_offense():
    assert HeuristicScorer.line_offense([Cell.EMPTY, Cell.COMPUTER, Cell.EMPTY]) == 1
    assert HeuristicScorer.line_offense([Cell.EMPTY, Cell.HUMAN, Cell.COMPUTER]) == 0


@pytest.mark.parametrize("row, col, expected", [
    (1, 1, 4),
    (0, 0, 3),
    (2, 2, 3),
    (0, 1, 2),
    (1, 0, 2),
])
def test_attack_score_on_empty_board(scorer, row, col, expected):
    assert scorer.attack_score(row, col, Board()) == expected


def test_attack_score_drops_lines_with_human(scorer):
    board = Board.parse(["X..", "...", "..."])
    # Center loses the left diagonal
    assert scorer.attack_score(1, 1, board) == 3
    assert scorer.diagonal_offense(1, 1, board) == 1
    assert scorer.diagonal_offense(2, 2, board) == 0
    assert scorer.diagonal_offense(1, 2, board) == 0


def test_risk_is_safe_without_computer_threat(scorer):
    assert scorer.risk_score(Board()) == EngineConfig.SAFE_RISK
    assert scorer.risk_score(Board.parse(["X..", ".O.", "..."])) == 10


def test_risk_single_threat_is_zero(scorer):
    board = Board.parse(["OO.", "X..", "..."])
    assert scorer.risk_score(board) == 0


def test_risk_counts_fork(scorer):
    # Forced block at (0, 2) gives the human (0, 1) and (1, 2)
    board = Board.parse(["X..", ".O.", "O.X"])
    assert scorer.risk_score(board) == 2


# ==================== AI PLAYER ====================

def test_empty_board_takes_center(ai):
    assert ai.get_best_move(Board()) == (1, 1)
    assert ai.last_decision is Decision.HEURISTIC


def test_blocks_human_row(ai):
    board = Board.parse(["XX.", "...", "..."])
    assert ai.get_best_move(board) == (0, 2)
    assert ai.last_decision is Decision.BLOCK


def test_takes_diagonal_win(ai):
    board = Board.parse(["O..", ".O.", "..."])
    assert ai.get_best_move(board) == (2, 2)
    assert ai.last_decision is Decision.WIN


def test_win_beats_block(ai):
    board = Board.parse(["XX.", "OO.", "..."])
    assert ai.get_best_move(board) == (1, 2)
    assert ai.last_decision is Decision.WIN


def test_prefers_corner_against_center(ai):
    board = Board.parse(["...", ".X.", "..."])
    assert ai.get_best_move(board) == (0, 0)


def test_avoids_corner_fork(ai):
    # Corners would let the human fork after the forced block
    board = Board.parse(["X..", ".O.", "..X"])
    move = ai.get_best_move(board)
    assert move == (0, 1)

    risks = {c.position: c.risk for c in ai.last_candidates}
    assert risks[(0, 2)] == 2
    assert risks[(2, 0)] == 2
    assert risks[(0, 1)] == 0


def test_candidates_cover_empty_cells(ai):
    board = Board.parse(["X..", "...", "..."])
    candidates = ai.score_candidates(board)
    assert [c.position for c in candidates] == board.get_empty_cells()


def test_full_board_rejected(ai):
    with pytest.raises(BoardError):
        ai.get_best_move(Board.parse(["XOX", "XOO", "OXX"]))


def test_malformed_board_rejected(ai):
    board = Board()
    board.grid[0, 0] = 7
    with pytest.raises(BoardError):
        ai.get_best_move(board)


def test_verbose_prints_decision(checker, capsys):
    AIPlayer(win_checker=checker, verbose=True).get_best_move(Board())
    assert "AI evaluated 9 positions" in capsys.readouterr().out


@pytest.mark.parametrize("rows", [
    ["...", "...", "..."],
    ["XX.", ".O.", "..."],
    ["X..", ".O.", "..X"],
    ["XO.", "OX.", "..."],
])
def test_probing_leaves_board_unchanged(checker, scorer, ai, rows):
    board = Board.parse(rows)
    before = board.grid.copy()

    first = (
        checker.find_immediate_win(board, Cell.COMPUTER),
        checker.count_winning_cells(board, Cell.HUMAN),
        checker.find_must_defend(board, Cell.COMPUTER),
        scorer.risk_score(board),
        scorer.attack_score(2, 2, board),
        ai.get_best_move(board),
    )
    second = (
        checker.find_immediate_win(board, Cell.COMPUTER),
        checker.count_winning_cells(board, Cell.HUMAN),
        checker.find_must_defend(board, Cell.COMPUTER),
        scorer.risk_score(board),
        scorer.attack_score(2, 2, board),
        ai.get_best_move(board),
    )

    assert first == second
    assert np.array_equal(board.grid, before)
