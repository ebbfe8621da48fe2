"""
Game module for the Minefield engine.

Wraps a board with the phase and move counter and implements the
reveal and flag transitions the presentation layer dispatches.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .board import (
    Board,
    BoardConfig,
    Position,
    RandomSource,
    check_win,
    create_empty_board,
    flood_fill,
    lay_mines,
    place_mines,
    reveal_all,
)
from .cell import CellView
from .errors import InvalidConfiguration, Rejection

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Lifecycle of a single game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


# ============================================================================
# Snapshots
# ============================================================================

@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only picture of a game for rendering.

    Mine identity and counts of hidden cells are withheld until the
    game is lost.
    """

    width: int
    height: int
    phase: GamePhase
    move_count: int
    cells: Tuple[CellView, ...]

    def cell(self, x: int, y: int) -> CellView:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height}")
        return self.cells[y * self.width + x]

    def rows(self) -> Iterator[Tuple[CellView, ...]]:
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def to_observation(self) -> np.ndarray:
        """Cell codes as an int8 array of shape (height, width)."""
        codes = [view.to_observation() for view in self.cells]
        return np.array(codes, dtype=np.int8).reshape(self.height, self.width)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one reveal or flag call."""

    accepted: bool
    snapshot: BoardSnapshot
    rejection: Optional[Rejection] = None

    @property
    def phase(self) -> GamePhase:
        return self.snapshot.phase

    @property
    def move_count(self) -> int:
        return self.snapshot.move_count


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One game session over a fixed configuration.

    Mines are laid on the first reveal so that the first clicked cell
    is always safe. Win and loss are terminal.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: RandomSource = None,
        mine_layout: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: 9x9 with 3 mines).
            rng: numpy Generator or seed used for mine placement.
            mine_layout: Fixed mine coordinates used instead of a random
                draw. The first reveal must not land on one of them.
        """
        self._rng = np.random.default_rng(rng)
        self.configure(config or BoardConfig(), mine_layout)

    def configure(
        self,
        config: BoardConfig,
        mine_layout: Optional[Iterable[Position]] = None,
    ) -> None:
        """Start over with a fresh board for `config`."""
        layout = None
        if mine_layout is not None:
            layout = sorted(set(mine_layout))
            if len(layout) != config.num_mines:
                raise InvalidConfiguration(
                    f"Layout has {len(layout)} mines, expected {config.num_mines}"
                )
            for x, y in layout:
                if not (0 <= x < config.width and 0 <= y < config.height):
                    raise InvalidConfiguration(
                        f"Mine position ({x}, {y}) out of bounds"
                    )

        self._config = config
        self._mine_layout = layout
        self._board = create_empty_board(config.width, config.height)
        self._phase = GamePhase.NOT_STARTED
        self._move_count = 0
        logger.info(
            "New game %dx%d with %d mines",
            config.width, config.height, config.num_mines,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def board(self) -> Board:
        """The live board. Treat as read-only."""
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def move_count(self) -> int:
        return self._move_count

    def snapshot(self) -> BoardSnapshot:
        """Build a read-only view of the current state."""
        expose = self._phase == GamePhase.LOST
        return BoardSnapshot(
            width=self._board.width,
            height=self._board.height,
            phase=self._phase,
            move_count=self._move_count,
            cells=tuple(cell.view(expose) for cell in self._board),
        )

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> ActionResult:
        """
        Reveal the cell at (x, y).

        The first reveal lays the mines around a guaranteed safe cell.
        Revealing a mine uncovers the whole board and loses the game.
        """
        rejection = self._check_action(x, y)
        if rejection is not None:
            return self._reject(rejection, "reveal", x, y)

        if self._phase == GamePhase.NOT_STARTED:
            self._start(x, y)
            flood_fill(self._board, x, y)
            self._phase = GamePhase.IN_PROGRESS
            self._check_win()
        elif self._board.get_cell(x, y).is_mine:
            reveal_all(self._board)
            self._phase = GamePhase.LOST
            logger.info("Mine revealed at (%d, %d); game lost", x, y)
        else:
            flood_fill(self._board, x, y)
            self._check_win()

        self._move_count += 1
        return ActionResult(accepted=True, snapshot=self.snapshot())

    def toggle_flag(self, x: int, y: int) -> ActionResult:
        """
        Toggle the flag on the cell at (x, y).

        Revealed cells keep their state, but the move still counts.
        Not available before the first reveal.
        """
        rejection = self._check_action(x, y)
        if rejection is None and self._phase == GamePhase.NOT_STARTED:
            rejection = Rejection.NOT_STARTED
        if rejection is not None:
            return self._reject(rejection, "flag", x, y)

        self._board.get_cell(x, y).toggle_flag()
        self._check_win()

        self._move_count += 1
        return ActionResult(accepted=True, snapshot=self.snapshot())

    # ========================================================================
    # Transition Helpers
    # ========================================================================

    def _check_action(self, x: int, y: int) -> Optional[Rejection]:
        if not self._board.in_bounds(x, y):
            return Rejection.OUT_OF_BOUNDS
        if self._phase.is_terminal:
            return Rejection.TERMINAL_PHASE
        return None

    def _reject(
        self, rejection: Rejection, action: str, x: int, y: int
    ) -> ActionResult:
        logger.debug("Rejected %s at (%s, %s): %s", action, x, y, rejection.name)
        return ActionResult(
            accepted=False, snapshot=self.snapshot(), rejection=rejection
        )

    def _start(self, x: int, y: int) -> None:
        """Lay mines with (x, y) kept clear."""
        if self._mine_layout is not None:
            if (x, y) in self._mine_layout:
                raise InvalidConfiguration(
                    f"Fixed layout mines the first revealed cell ({x}, {y})"
                )
            self._board = lay_mines(self._board, self._mine_layout)
        else:
            self._board = place_mines(
                self._board, self._config.num_mines, x, y, self._rng
            )

    def _check_win(self) -> None:
        if check_win(self._board):
            self._phase = GamePhase.WON
            logger.info(
                "All mines flagged; game won in %d moves", self._move_count + 1
            )
