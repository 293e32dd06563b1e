"""
Unit tests for board generation.

Tests seeded mine placement, neighbor counting, first-click safety and
custom difficulty validation.
"""
import pytest
from minesweeper import (
    Board,
    calculate_numbers,
    ensure_first_click_safety,
    generate_board,
    validate_custom_difficulty,
)


# ============================================================================
# Generation Tests
# ============================================================================

class TestGenerateBoard:
    """Test seeded mine placement."""

    @pytest.mark.parametrize(
        "rows, cols, mines, seed",
        [
            (10, 10, 10, "test-seed-1"),
            (5, 5, 5, "test-seed-2"),
            (16, 30, 99, "expert-seed"),
            (5, 5, 24, "dense"),
            (5, 5, 0, "no-mines"),
        ],
    )
    def test_places_exact_mine_count(
        self, rows: int, cols: int, mines: int, seed: str
    ) -> None:
        """Board should hold exactly the requested mines."""
        board = generate_board(rows, cols, mines, seed)
        assert board.count_mines() == mines

    def test_board_has_correct_dimensions(self) -> None:
        """Board should have the requested shape."""
        board = generate_board(8, 6, 5, "test-dimensions")
        assert board.rows == 8
        assert board.cols == 6
        assert len(board.grid) == 8
        assert all(len(row) == 6 for row in board.grid)

    def test_cells_start_hidden_with_positions(self) -> None:
        """Every cell should know its position and start hidden."""
        board = generate_board(5, 5, 3, "test-initialization")
        for row in range(5):
            for col in range(5):
                cell = board.get_cell(row, col)
                assert cell.position == (row, col)
                assert cell.is_hidden is True
                assert cell.neighbor_mines == 0

    def test_same_seed_same_layout(self) -> None:
        """Identical arguments should give identical layouts."""
        first = generate_board(10, 10, 10, "test-seed-3")
        second = generate_board(10, 10, 10, "test-seed-3")
        assert first.mine_positions() == second.mine_positions()

    def test_different_seeds_differ(self) -> None:
        """Different seeds should give different layouts."""
        layouts = {
            tuple(generate_board(10, 10, 10, f"seed-{i}").mine_positions())
            for i in range(20)
        }
        assert len(layouts) > 1

    def test_layout_matches_reference(self) -> None:
        """Layouts should match those generated by the JavaScript reference."""
        board = generate_board(9, 9, 10, "seed-X")
        assert board.mine_positions() == [
            (0, 6), (1, 2), (2, 2), (5, 2), (5, 4),
            (6, 4), (6, 7), (7, 2), (8, 1), (8, 5),
        ]

    def test_second_reference_layout(self) -> None:
        """A 10x10 reference layout should also match."""
        board = generate_board(10, 10, 10, "test-seed-1")
        assert board.mine_positions() == [
            (0, 5), (0, 8), (1, 1), (1, 7), (2, 3),
            (3, 2), (4, 0), (4, 6), (5, 1), (6, 9),
        ]

    def test_too_many_mines_raises_error(self) -> None:
        """More mines than cells should be refused instead of looping."""
        with pytest.raises(ValueError, match="Too many mines"):
            generate_board(3, 3, 10, "overfull")

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            generate_board(3, 3, -1, "negative")


# ============================================================================
# Neighbor Count Tests
# ============================================================================

class TestCalculateNumbers:
    """Test neighbor mine counting."""

    def test_counts_two_adjacent_mines(self, make_board) -> None:
        """Mines at (1,1) and (1,2) should give the expected counts."""
        board = make_board(5, 5, mines=[(1, 1), (1, 2)])
        assert board.grid[0][0].neighbor_mines == 1
        assert board.grid[0][1].neighbor_mines == 2
        assert board.grid[0][2].neighbor_mines == 2
        assert board.grid[1][0].neighbor_mines == 1
        assert board.grid[2][1].neighbor_mines == 2
        assert board.grid[4][4].neighbor_mines == 0

    def test_corner_mine(self, make_board) -> None:
        """A corner mine should touch only three cells."""
        board = make_board(3, 3, mines=[(0, 0)])
        assert board.grid[0][1].neighbor_mines == 1
        assert board.grid[1][0].neighbor_mines == 1
        assert board.grid[1][1].neighbor_mines == 1
        assert board.grid[2][2].neighbor_mines == 0

    def test_four_corner_mines(self, make_board) -> None:
        """Center of a 3x3 with mined corners should count 4."""
        board = make_board(3, 3, mines=[(0, 0), (0, 2), (2, 0), (2, 2)])
        assert board.grid[1][1].neighbor_mines == 4
        assert board.grid[0][1].neighbor_mines == 2
        assert board.grid[1][0].neighbor_mines == 2

    def test_center_mine_touches_all_eight(self, make_board) -> None:
        """A center mine should give every other cell a count of 1."""
        board = make_board(3, 3, mines=[(1, 1)])
        for cell in board.cells():
            if not cell.is_mine:
                assert cell.neighbor_mines == 1

    def test_mine_cells_are_skipped(self) -> None:
        """Mine cells should keep whatever count they had."""
        board = Board.empty(3, 3)
        board.grid[1][1].is_mine = True
        board.grid[1][1].neighbor_mines = 7
        calculate_numbers(board)
        assert board.grid[1][1].neighbor_mines == 7

    def test_is_idempotent(self, make_board) -> None:
        """Running twice should not change the counts."""
        board = make_board(5, 5, mines=[(0, 0), (2, 3), (4, 4)])
        before = [cell.neighbor_mines for cell in board.cells()]
        calculate_numbers(board)
        assert [cell.neighbor_mines for cell in board.cells()] == before

    def test_returns_same_board(self, empty_board: Board) -> None:
        """The board should be updated in place."""
        assert calculate_numbers(empty_board) is empty_board


# ============================================================================
# First Click Safety Tests
# ============================================================================

def _zone_is_clear(board: Board, row: int, col: int) -> bool:
    positions = board.neighbor_positions(row, col) + [(row, col)]
    return not any(board.grid[r][c].is_mine for r, c in positions)


class TestEnsureFirstClickSafety:
    """Test mine relocation away from the first click."""

    def test_moves_mine_under_click(self, make_board) -> None:
        """A mine under the click should be moved away."""
        board = make_board(5, 5, mines=[(2, 2), (0, 0)])
        ensure_first_click_safety(board, 2, 2)
        assert board.grid[2][2].is_mine is False
        assert _zone_is_clear(board, 2, 2)

    def test_clears_neighbors_and_keeps_count(self, make_board) -> None:
        """Neighbors should be cleared and the mine count preserved."""
        board = make_board(5, 5, mines=[(1, 1), (1, 2), (2, 1), (4, 4)])
        ensure_first_click_safety(board, 2, 2)
        assert _zone_is_clear(board, 2, 2)
        assert board.count_mines() == 4

    def test_swaps_in_row_major_order(self, make_board) -> None:
        """Unsafe mines should go to the first free cells outside the zone."""
        board = make_board(5, 5, mines=[(1, 1), (2, 2)])
        ensure_first_click_safety(board, 2, 2)
        assert board.mine_positions() == [(0, 0), (0, 1)]

    def test_safe_board_is_unchanged(self, make_board) -> None:
        """A board that is already safe should not be touched."""
        board = make_board(5, 5, mines=[(0, 0), (4, 4)])
        before = board.mine_positions()
        result = ensure_first_click_safety(board, 2, 2)
        assert result is board
        assert board.mine_positions() == before

    def test_corner_click(self, make_board) -> None:
        """Clicking a corner should clear its clipped neighborhood."""
        board = make_board(5, 5, mines=[(0, 0), (0, 1), (1, 0)])
        ensure_first_click_safety(board, 0, 0)
        assert _zone_is_clear(board, 0, 0)
        assert board.count_mines() == 3

    def test_recalculates_numbers(self, make_board) -> None:
        """Counts should reflect the new layout."""
        board = make_board(5, 5, mines=[(2, 2), (2, 3)])
        ensure_first_click_safety(board, 2, 2)
        assert board.grid[2][2].neighbor_mines == 0
        expected = make_board(5, 5, mines=board.mine_positions())
        assert [c.neighbor_mines for c in board.cells() if not c.is_mine] == [
            c.neighbor_mines for c in expected.cells() if not c.is_mine
        ]

    def test_dense_board_keeps_surplus_mines(self, make_board) -> None:
        """When destinations run out the leftover mines stay put."""
        mines = [(row, col) for row in range(5) for col in range(5)
                 if (row, col) != (4, 4)]
        board = make_board(5, 5, mines=mines)
        ensure_first_click_safety(board, 0, 0)
        assert board.count_mines() == 24
        assert board.grid[0][0].is_mine is False
        assert board.grid[4][4].is_mine is True

    def test_generated_boards_are_safe(self) -> None:
        """Many seeded boards should all end up safe at the click."""
        for i in range(50):
            board = calculate_numbers(generate_board(10, 10, 20, f"safe-{i}"))
            ensure_first_click_safety(board, 5, 5)
            assert _zone_is_clear(board, 5, 5)
            assert board.count_mines() == 20


# ============================================================================
# Custom Difficulty Validation Tests
# ============================================================================

class TestValidateCustomDifficulty:
    """Test custom board settings validation."""

    @pytest.mark.parametrize(
        "rows, cols, mines",
        [
            (5, 5, 1),
            (10, 10, 10),
            (10, 10, 99),
            (5, 5, 24),
            (20, 30, 100),
            (20, 20, 396),
            (50, 50, 2474),
        ],
    )
    def test_accepts_valid_settings(
        self, rows: int, cols: int, mines: int
    ) -> None:
        """Settings within bounds should be accepted."""
        assert validate_custom_difficulty(rows, cols, mines) is True

    @pytest.mark.parametrize(
        "rows, cols, mines",
        [
            (10, 10, 100),
            (5, 5, 25),
            (4, 10, 10),
            (10, 4, 10),
            (51, 50, 100),
            (50, 51, 100),
            (10, 10, 0),
            (-1, 10, 10),
            (10, 10, -1),
        ],
    )
    def test_rejects_invalid_settings(
        self, rows: int, cols: int, mines: int
    ) -> None:
        """Settings outside bounds should be rejected."""
        assert validate_custom_difficulty(rows, cols, mines) is False
