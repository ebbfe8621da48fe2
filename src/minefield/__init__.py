"""
Minefield game engine.

Provides board management, mine placement, flood fill reveal and the
game-state transitions driven by player actions.
"""
from .cell import Cell, CellState, CellView
from .board import (
    Board,
    BoardConfig,
    create_empty_board,
    place_mines,
    lay_mines,
    count_adjacent_mines,
    is_fillable,
    flood_fill,
    reveal_all,
    check_win,
)
from .errors import MinefieldError, InvalidConfiguration, Rejection
from .game import Game, GamePhase, ActionResult, BoardSnapshot
from .render import render_text, ASCII_GLYPHS, EMOJI_GLYPHS

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "create_empty_board",
    "place_mines",
    "lay_mines",
    "count_adjacent_mines",
    "is_fillable",
    "flood_fill",
    "reveal_all",
    "check_win",
    "MinefieldError",
    "InvalidConfiguration",
    "Rejection",
    "Game",
    "GamePhase",
    "ActionResult",
    "BoardSnapshot",
    "render_text",
    "ASCII_GLYPHS",
    "EMOJI_GLYPHS",
]
