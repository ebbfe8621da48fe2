"""
Text rendering of board snapshots.
"""
from dataclasses import dataclass

from .cell import CellState, CellView
from .game import BoardSnapshot


@dataclass(frozen=True)
class Glyphs:
    """Characters used for each kind of cell."""

    hidden: str
    flag: str
    mine: str
    empty: str


ASCII_GLYPHS = Glyphs(hidden=".", flag="F", mine="*", empty=" ")
EMOJI_GLYPHS = Glyphs(hidden=" ", flag="\U0001F6A9", mine="\U0001F4A3", empty=" ")


def render_cell(view: CellView, glyphs: Glyphs = ASCII_GLYPHS) -> str:
    """Single glyph or count for one cell."""
    if view.state == CellState.HIDDEN:
        return glyphs.hidden
    if view.state == CellState.FLAGGED:
        return glyphs.flag
    if view.is_mine:
        return glyphs.mine
    return str(view.adjacent_mines) if view.adjacent_mines > 0 else glyphs.empty


def render_text(snapshot: BoardSnapshot, glyphs: Glyphs = ASCII_GLYPHS) -> str:
    """Render the snapshot as one line per row, cells separated by spaces."""
    lines = []
    for row in snapshot.rows():
        lines.append(" ".join(render_cell(view, glyphs) for view in row))
    return "\n".join(lines)
