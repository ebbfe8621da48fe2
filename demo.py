#!/usr/bin/env python3
"""Play Minefield in the terminal."""
import logging
import os

from minefield import (
    ASCII_GLYPHS, EMOJI_GLYPHS, BoardConfig, Game, GamePhase, render_text,
)


HELP = "Commands: r X Y (reveal), f X Y (flag), q (quit)"


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def play(config: BoardConfig, seed: int = None, emoji: bool = False):
    """Run one interactive game."""
    game = Game(config, rng=seed)
    glyphs = EMOJI_GLYPHS if emoji else ASCII_GLYPHS
    message = HELP

    while not game.phase.is_terminal:
        clear_screen()
        print(f"Mines: {config.num_mines} | Moves: {game.move_count}\n")
        print(render_text(game.snapshot(), glyphs))
        print(f"\n{message}")

        parts = input("> ").split()
        if not parts:
            continue
        if parts[0] == "q":
            return
        if parts[0] not in ("r", "f") or len(parts) != 3:
            message = HELP
            continue
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            message = "Coordinates must be integers"
            continue

        if parts[0] == "r":
            result = game.reveal(x, y)
        else:
            result = game.toggle_flag(x, y)
        message = HELP if result.accepted else f"Rejected: {result.rejection.name}"

    clear_screen()
    print(render_text(game.snapshot(), glyphs))
    if game.phase == GamePhase.WON:
        print(f"\n*** WIN in {game.move_count} moves! ***")
    else:
        print(f"\n*** LOST (hit mine) ***")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=3, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--emoji", action="store_true", help="Use emoji glyphs")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    play(config, seed=args.seed, emoji=args.emoji)
