"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, Game, create_empty_board, lay_mines


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return create_empty_board(5, 5)


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine at (1, 1)."""
    return lay_mines(create_empty_board(3, 3), [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """4x4 board with a single mine at (3, 3)."""
    return lay_mines(create_empty_board(4, 4), [(3, 3)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 3 mines and a fixed seed."""
    return Game(rng=1234)


@pytest.fixture
def corner_mine_game() -> Game:
    """4x4 game with its only mine forced to (3, 3)."""
    return Game(BoardConfig(4, 4, 1), mine_layout=[(3, 3)])


@pytest.fixture
def two_by_two_game() -> Game:
    """2x2 game with its only mine forced to (0, 0)."""
    return Game(BoardConfig(2, 2, 1), mine_layout=[(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
