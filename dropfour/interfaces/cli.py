"""
cli.py - Command-line front end for dropfour

Two people can play at one terminal, a recorded sequence of moves can be
replayed, and the engine can be benchmarked on random games. The front end
only reads engine.state and forwards column choices; every rule lives in
the engine.
"""

import argparse
import random
import sys
from typing import List, Optional

from dropfour.debug import debug, DebugLevel
from dropfour.game.engine import GameEngine
from dropfour.game.state import GameState
from dropfour.utils import COLS, Player, DropResult

QUIT = 'q'
RESTART = 'r'

REJECTION_MESSAGES = {
    DropResult.GAME_OVER: "The game is over.",
    DropResult.COLUMN_FULL: "That column is full.",
    DropResult.INVALID_COLUMN: f"Column must be between 0 and {COLS - 1}.",
}


def describe_state(state: GameState) -> str:
    """One-line status for the current snapshot."""
    if state.winner is not None:
        return f"Player {state.winner.value} ({state.winner}) wins!"
    if state.game_over:
        return "It's a draw!"
    return f"Player {state.current_player.value}'s turn ({state.current_player})"


def parse_moves(moves: str) -> List[int]:
    """
    Parse a comma-separated list of columns such as "3,3,4".

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in moves.split(',') if part.strip()]


class SimpleCLI:
    """Command-line interface for playing and exercising the engine."""

    def __init__(self):
        self.engine = GameEngine()
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='dropfour',
                                         description='Four-in-a-row drop game')
        parser.add_argument('--debug', action='store_true',
                            help='Shortcut for --debug-level debug')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None,
                            help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game at this terminal')

        replay_parser = subparsers.add_parser('replay', help='Replay a sequence of moves')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated columns, e.g. 3,3,4,4')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Seed for the random move picker')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)
        self.configure_debug()

    def configure_debug(self) -> None:
        """Apply the logging options from the command line."""
        level = DebugLevel.DEBUG if self.args.debug else DebugLevel[self.args.debug_level.upper()]
        debug.configure(level=level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay(self.args.moves)
        elif self.args.command == 'benchmark':
            return self.benchmark(self.args.iterations, self.args.seed)

        print("Please specify a command. Use --help for options.")
        return 1

    def show(self) -> None:
        print(self.engine.render())
        print(describe_state(self.engine.state))

    def play_game(self) -> int:
        """Let two people take turns until the game ends or someone quits."""
        print("Starting a new game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a piece.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")

        self.engine.reset()
        self.show()

        while not self.engine.is_game_over():
            choice = self.get_human_move()

            if choice is None:
                continue
            if choice == QUIT:
                print("Quitting game.")
                return 0
            if choice == RESTART:
                self.engine.reset()
                print("Game restarted.")
                self.show()
                continue

            result = self.engine.drop_piece(choice)
            if not result.accepted:
                print(REJECTION_MESSAGES[result])
                continue

            self.show()

        print("Game over!")
        return 0

    def get_human_move(self):
        """
        Read one command from the player to move.

        Returns:
            A column index, QUIT, RESTART, or None for unreadable input
        """
        player = self.engine.get_current_player()
        try:
            user_input = input(f"Player {player.value} ({player}), your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def replay(self, moves: str) -> int:
        """Apply a recorded move list to a fresh game and show the result."""
        try:
            columns = parse_moves(moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        self.engine.reset()
        for number, column in enumerate(columns, start=1):
            result = self.engine.drop_piece(column)
            if not result.accepted:
                print(f"Move {number} (column {column}) ignored: {REJECTION_MESSAGES[result]}")

        self.show()
        return 0

    def benchmark(self, iterations: int, seed: Optional[int] = None) -> int:
        """Play random games through the engine and report timings."""
        if iterations <= 0:
            print("Iterations must be positive.")
            return 1

        rng = random.Random(seed)
        engine = GameEngine()
        total_moves = 0
        outcomes = {Player.ONE: 0, Player.TWO: 0, None: 0}

        debug.start_timer("game_simulation")
        for _ in range(iterations):
            engine.reset()
            while not engine.is_game_over():
                engine.drop_piece(rng.choice(engine.get_valid_moves()))
                total_moves += 1
            outcomes[engine.get_winner()] += 1
        elapsed = debug.end_timer("game_simulation", "cli")

        print(f"Played {iterations} games with {total_moves} total moves: "
              f"{elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per game, "
              f"{elapsed / total_moves * 1000:.6f} ms per move")
        print(f"Player 1 wins: {outcomes[Player.ONE]}, "
              f"Player 2 wins: {outcomes[Player.TWO]}, "
              f"draws: {outcomes[None]}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
