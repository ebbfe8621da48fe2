"""
Board module for the Minefield engine.

Implements the grid of cells and the engine operations over it:
mine placement, adjacency counting, flood fill and win detection.
"""
import logging
from numbers import Integral
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration, MinefieldError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
RandomSource = Union[np.random.Generator, int, None]

MOORE_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)
ORTHOGONAL_OFFSETS = ((1, 0), (-1, 0), (0, -1), (0, 1))


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minefield game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 3

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of independently allocated cells.

    Cells live in a flat arena addressed by `y * width + x`.
    """

    width: int
    height: int
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if not self._cells:
            self._cells = [Cell() for _ in range(self.width * self.height)]
        elif len(self._cells) != self.width * self.height:
            raise InvalidConfiguration("Cell count does not match dimensions")

    # ========================================================================
    # Addressing (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is an integer pair within board bounds."""
        if not isinstance(x, Integral) or not isinstance(y, Integral):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Arena index of (x, y)."""
        return y * self.width + x

    def position(self, index: int) -> Position:
        """(x, y) coordinates of an arena index."""
        y, x = divmod(index, self.width)
        return x, y

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[self.index(x, y)]

    def neighbors(self, x: int, y: int) -> List[Position]:
        """In-bounds positions of the up-to-8 surrounding cells."""
        return self._offset_positions(x, y, MOORE_OFFSETS)

    def orthogonal_neighbors(self, x: int, y: int) -> List[Position]:
        """In-bounds positions directly left, right, above and below."""
        return self._offset_positions(x, y, ORTHOGONAL_OFFSETS)

    def _offset_positions(
        self, x: int, y: int, offsets: Iterable[Position]
    ) -> List[Position]:
        positions = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                positions.append((nx, ny))
        return positions

    # ========================================================================
    # Iteration and Copies
    # ========================================================================

    @property
    def area(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def items(self) -> Iterator[Tuple[Position, Cell]]:
        """Yield ((x, y), cell) pairs in row-major order."""
        for index, cell in enumerate(self._cells):
            yield self.position(index), cell

    @property
    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return sum(1 for cell in self._cells if cell.is_mine)

    def mine_positions(self) -> List[Position]:
        """Coordinates of every mine in row-major order."""
        return [pos for pos, cell in self.items() if cell.is_mine]

    def flagged_positions(self) -> List[Position]:
        return [pos for pos, cell in self.items() if cell.is_flagged]

    def copy(self) -> "Board":
        """Deep copy with fresh cell records."""
        return Board(self.width, self.height, [replace(c) for c in self._cells])


# ============================================================================
# Engine Operations
# ============================================================================

def create_empty_board(width: int, height: int) -> Board:
    """Board of the given size with every cell in its default state."""
    return Board(width, height)


def place_mines(
    board: Board,
    num_mines: int,
    safe_x: int,
    safe_y: int,
    rng: RandomSource = None,
) -> Board:
    """
    Place mines uniformly at random, keeping one cell clear.

    Args:
        board: Board with no mines yet. Left untouched.
        num_mines: Mines to place, in [0, width * height).
        safe_x: Column that must stay mine-free.
        safe_y: Row that must stay mine-free.
        rng: numpy Generator or seed driving the draw.

    Returns:
        New board with mines laid and adjacency counts computed.
    """
    if not 0 <= num_mines < board.area:
        raise InvalidConfiguration(
            f"Mine count {num_mines} outside [0, {board.area})"
        )
    if not board.in_bounds(safe_x, safe_y):
        raise InvalidConfiguration(f"Safe cell ({safe_x}, {safe_y}) out of bounds")
    if board.mine_count:
        raise MinefieldError("Mines have already been placed on this board")

    generator = np.random.default_rng(rng)
    safe_index = board.index(safe_x, safe_y)
    candidates = [i for i in range(board.area) if i != safe_index]
    chosen = []
    if num_mines:
        chosen = generator.choice(candidates, size=num_mines, replace=False)

    logger.debug(
        "Placing %d mines on %dx%d board, safe cell (%d, %d)",
        num_mines, board.width, board.height, safe_x, safe_y,
    )
    return lay_mines(board, [board.position(int(i)) for i in chosen])


def lay_mines(board: Board, positions: Iterable[Position]) -> Board:
    """
    Place mines at explicit coordinates.

    Args:
        board: Board with no mines yet. Left untouched.
        positions: (x, y) coordinates to mine; duplicates collapse.

    Returns:
        New board with mines laid and adjacency counts computed.
    """
    populated = board.copy()
    for x, y in positions:
        cell = populated.get_cell(x, y)
        if cell is None:
            raise InvalidConfiguration(f"Mine position ({x}, {y}) out of bounds")
        cell.is_mine = True
    _calculate_adjacent_mines(populated)
    return populated


def _calculate_adjacent_mines(board: Board) -> None:
    """Calculate adjacent mine counts for all cells."""
    for (x, y), cell in board.items():
        cell.adjacent_mines = count_adjacent_mines(board, x, y)


def count_adjacent_mines(board: Board, x: int, y: int) -> int:
    """Count mines among the in-bounds Moore neighbors of (x, y)."""
    count = 0
    for nx, ny in board.neighbors(x, y):
        if board.get_cell(nx, ny).is_mine:
            count += 1
    return count


def is_fillable(board: Board, x: int, y: int) -> bool:
    """True if (x, y) is in bounds, not a mine and not yet revealed."""
    cell = board.get_cell(x, y)
    if cell is None:
        return False
    return not cell.is_mine and not cell.is_revealed


def flood_fill(board: Board, x: int, y: int) -> Board:
    """
    Reveal (x, y) and spread through orthogonally connected zero cells.

    Cells with a nonzero count are revealed but do not propagate.
    Mutates and returns `board`.
    """
    stack = [(x, y)]
    revealed = 0
    while stack:
        cx, cy = stack.pop()
        if not is_fillable(board, cx, cy):
            continue
        cell = board.get_cell(cx, cy)
        cell.reveal()
        revealed += 1
        if cell.adjacent_mines == 0:
            stack.extend(board.orthogonal_neighbors(cx, cy))

    if revealed:
        logger.debug("Flood fill from (%d, %d) revealed %d cells", x, y, revealed)
    return board


def reveal_all(board: Board) -> Board:
    """Reveal every cell. Mutates and returns `board`."""
    for cell in board:
        cell.reveal()
    return board


def check_win(board: Board) -> bool:
    """
    True iff the flagged cells are exactly the mine cells.

    Reveal state does not take part in the decision.
    """
    return all(cell.is_mine == cell.is_flagged for cell in board)
