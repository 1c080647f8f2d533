"""
Command line entry point for the TicTacToe engine.

Usage:
    python main.py --board "xx./o../..."             # Best move for o
    python main.py --board "xx./o../..." --player x  # Best move for x
    python main.py --verify                          # Check the AI never loses
"""

import argparse
import logging
import sys
from typing import List, Optional

from ttt_engine import AIPlayer, Board, GameStatus, Player, play_all_games


def suggest(notation: str, mark: str) -> int:
    """Print the engine's move for a position. Returns the exit status."""
    try:
        board = Board.from_string(notation)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2

    player = Player(mark)
    result = board.evaluate()
    if result.is_terminal:
        print(f"Game is already over: {result}")
        return 0

    ai = AIPlayer()
    best = ai.find_best_move(board, player)
    row, col = best.move
    print(f"Best move for {player.mark}: ({row}, {col}) (score: {best.score:+g})")
    print(f"Positions evaluated: {ai.positions_evaluated}")
    return 0


def verify() -> int:
    """Play every human strategy against the AI. Returns the exit status."""
    human_wins = 0

    for starter in Player:
        outcomes = play_all_games(starter=starter)
        print(f"\n{starter.mark} starts: {sum(outcomes.values())} games")
        for result, count in sorted(outcomes.items(), key=lambda item: str(item[0])):
            print(f"  {result}: {count}")
            if result.status is GameStatus.WIN and result.winner is Player.HUMAN:
                human_wins += count

    if human_wins:
        print(f"\n✗ The human won {human_wins} games!")
        return 1

    print("\n✓ The AI never loses.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe minimax engine")
    parser.add_argument(
        "--board",
        help="Position in notation, e.g. 'xo./.x./..o' ('.' is empty)"
    )
    parser.add_argument(
        "--player",
        choices=[player.mark for player in Player],
        default=Player.COMPUTER.mark,
        help="Player to move (default: the computer)"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Play all human strategies and check the AI never loses"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.verify:
        return verify()
    if args.board is not None:
        return suggest(args.board, args.player)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
