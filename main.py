"""
Console front end for the 3x3 game engine.

Two players share the keyboard and take turns typing "row col".
With --store-dir the game is saved after every move and an existing
game id is resumed.

Run this script to play:
    python main.py alice bob
"""

import logging
from typing import Callable, Optional

from game_engine import Cell, GameError, GameState, get_valid_moves, get_winning_line
from game_store import GameConfig, GameService, JsonFileGameStore, MemoryGameStore


SYMBOLS = {
    Cell.EMPTY: " ",
    Cell.MARK_A: "X",
    Cell.MARK_B: "O",
}


def render_board(state: GameState) -> str:
    """Draw the board as text."""
    lines = ["", "    0   1   2", "  ┌───┬───┬───┐"]
    for row, cells in enumerate(state.board):
        lines.append(f"{row} │" + "│".join(f" {SYMBOLS[cell]} " for cell in cells) + "│")
        if row < len(state.board) - 1:
            lines.append("  ├───┼───┼───┤")
    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


def describe_result(state: GameState) -> str:
    """One line describing how the game stands."""
    if not state.is_game_over:
        symbol = SYMBOLS[state.turn.mark]
        return f"Current turn: {state.current_player} ({symbol})"
    if state.winner is not None:
        line = get_winning_line(state.board)
        return f"{state.winner} WINS! Line: {list(line)}"
    return "It's a DRAW!"


class ConsoleGame:
    """
    Plays one stored game on the console.

    Game flow:
    1. Show the board and whose turn it is
    2. Read "row col" for the current player
    3. Apply the move through the service, report any error
    4. Repeat until someone wins, the board is full, or the user quits
    """

    def __init__(
        self,
        service: GameService,
        game_id: str,
        input_func: Optional[Callable[[str], str]] = None,
        print_func: Optional[Callable[..., None]] = None
    ):
        self.service = service
        self.game_id = game_id
        self.input = input_func or input
        self.print = print_func or print

    def start(self, player_a: str, player_b: str) -> GameState:
        """Create the game, or resume it if the id is already stored."""
        if self.service.store.exists(self.game_id):
            state = self.service.query(self.game_id)
            if set(state.players) != {player_a, player_b}:
                self.print(
                    f"Game {self.game_id!r} belongs to {state.players[0]} and "
                    f"{state.players[1]}; resuming with them."
                )
            else:
                self.print(f"Resuming game {self.game_id!r}.")
            return state
        return self.service.create(self.game_id, player_a, player_b)

    def read_move(self, state: GameState) -> Optional[tuple]:
        """
        Ask the current player for a move.

        Returns:
            (row, col), or None if the player quits.
        """
        while True:
            text = self.input(f"{state.current_player}, enter row col: ").strip()
            if text.lower() == GameConfig.QUIT_COMMAND:
                return None
            parts = text.replace(",", " ").split()
            if len(parts) == 2:
                try:
                    return int(parts[0]), int(parts[1])
                except ValueError:
                    pass
            self.print("Please type two numbers, e.g. '1 2' (or 'q' to quit).")

    def play(self, player_a: str, player_b: str) -> GameState:
        """Run the game loop until the game ends or the user quits."""
        state = self.start(player_a, player_b)

        while not state.is_game_over:
            self.print(render_board(state))
            self.print(describe_result(state))
            self.print(f"Free cells: {get_valid_moves(state)}")

            move = self.read_move(state)
            if move is None:
                self.print("\nGame quit by user.")
                return state

            row, col = move
            try:
                state = self.service.move(self.game_id, state.current_player, row, col)
            except GameError as e:
                self.print(f"Move rejected: {e.message}")

        self.print(render_board(state))
        self.print("\n" + "=" * 30)
        self.print("   GAME OVER!")
        self.print("=" * 30)
        self.print(describe_result(state))
        return state


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player 3x3 game")
    parser.add_argument("player_a", help="Name of the first player (X)")
    parser.add_argument("player_b", help="Name of the second player (O)")
    parser.add_argument(
        "--game-id",
        default=GameConfig.DEFAULT_GAME_ID,
        help="Id of the game to create or resume"
    )
    parser.add_argument(
        "--store-dir",
        default=GameConfig.STORE_DIR,
        help="Directory for saved games (default: keep in memory)"
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(GameConfig.LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    if args.store_dir:
        store = JsonFileGameStore(args.store_dir)
    else:
        store = MemoryGameStore()

    game = ConsoleGame(GameService(store), args.game_id)

    try:
        game.play(args.player_a, args.player_b)
    except GameError as e:
        print(f"ERROR: {e.message}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
