"""
Cell module for the Minefield engine.

Represents individual grid positions with their state
(hidden/revealed/flagged) and content (mine/number), plus the
read-only view handed to renderers.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single mutable grid position.

    Attributes:
        is_mine: Whether this cell contains a mine. Set once at generation.
        is_revealed: Whether the cell has been uncovered. Never reverts.
        is_flagged: Whether the player marked the cell. Only while hidden.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell, dropping any flag on it.

        Returns:
            True if the cell was hidden before the call.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        self.is_flagged = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def view(self, expose: bool = False) -> "CellView":
        """
        Build the read-only view of this cell.

        Args:
            expose: Show mine identity and count even while hidden.
        """
        visible = expose or self.is_revealed
        return CellView(
            is_mine=self.is_mine if visible else None,
            is_revealed=self.is_revealed,
            is_flagged=self.is_flagged,
            adjacent_mines=self.adjacent_mines if visible else 0,
        )


# ============================================================================
# Read-only View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Snapshot of a cell as seen by the presentation layer.

    `is_mine` is None while the mine identity is hidden from the player.
    """

    is_mine: Optional[bool]
    is_revealed: bool
    is_flagged: bool
    adjacent_mines: int

    @property
    def state(self) -> CellState:
        """Current visual state."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert to an integer code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.state == CellState.HIDDEN:
            return HIDDEN_CODE
        if self.is_mine:
            return MINE_CODE
        return self.adjacent_mines
