"""
Text console for playing Othello.

The session owns its input and output streams and is passed explicitly to
whoever needs it, so several games can run side by side.
"""
import json
import logging
import re
import sys
from typing import Dict, Optional, TextIO, Tuple

from .config import Config
from .game import BLACK, COLOR_NAMES, WHITE, OthelloGame, opponent, parse_color
from .logger import Logger
from .players import HumanPlayer, Player, create_player

QUIT_COMMANDS = {'q', 'quit', 'exit'}


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a move typed by a user.

    Accepts a JSON array like "[2, 3]" as well as "2,3" or "2 3".

    Returns:
        (row, col), or None if the text is not two integers
    """
    s = text.strip()
    try:
        value = json.loads(s)
    except (ValueError, RecursionError):
        value = None

    if isinstance(value, list):
        if len(value) != 2 or not all(type(part) is int for part in value):
            return None
        return (value[0], value[1])

    parts = [part for part in re.split(r'[\s,]+', s) if part]
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


class ConsoleSession:
    """Reads moves from and writes messages to a pair of text streams."""

    def __init__(self, input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def write(self, text: str = '') -> None:
        self.output_stream.write(text + '\n')
        self.output_stream.flush()

    def read_line(self, prompt: str) -> str:
        """Show a prompt and read one line. Raises EOFError when input is exhausted."""
        self.output_stream.write(prompt)
        self.output_stream.flush()
        line = self.input_stream.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip('\n')

    def show_board(self, game: OthelloGame) -> None:
        self.write(str(game))

    def prompt_move(self, game: OthelloGame) -> Tuple[int, int]:
        """Ask for a move until a legal one is entered."""
        color = game.get_current_player()
        while True:
            answer = self.read_line(f"{COLOR_NAMES[color]}, where do you want to move? ")
            if answer.strip().lower() in QUIT_COMMANDS:
                raise KeyboardInterrupt

            pos = parse_move(answer)
            if pos is None:
                self.write("Enter a move as [row, col], for example [2, 3].")
                continue
            if not game.board.is_legal_move(pos, color):
                self.write("Invalid move!")
                continue
            return pos


def build_players(config: Config, session: ConsoleSession) -> Dict[int, Player]:
    """Assign a player to each colour according to the game config."""
    game_config = config.game
    if game_config.human_color is None:
        return {
            BLACK: create_player(game_config.opponent_player, session, seed=config.seed),
            WHITE: create_player(game_config.ai_player, session, seed=config.seed + 1),
        }

    human_color = parse_color(game_config.human_color)
    return {
        human_color: create_player('human', session),
        opponent(human_color): create_player(game_config.ai_player, session, seed=config.seed),
    }


def play_interactive(config: Config, session: ConsoleSession,
                     logger: Optional[Logger] = None) -> OthelloGame:
    """
    Play one game on the console until neither colour can move.

    Args:
        config: Configuration object (uses config.game)
        session: Console session used for every prompt and message
        logger: Optional logger for move and result events

    Returns:
        The finished game
    """
    log = logger.logger if logger is not None else logging.getLogger(__name__)
    players = build_players(config, session)
    game = OthelloGame()
    log.info(f"New game: {players[BLACK].name} (black) vs {players[WHITE].name} (white)")

    while not game.is_game_over():
        session.show_board(game)
        color = game.get_current_player()
        history_length = len(game.move_history)

        row, col = game.play_turn(players)
        if not isinstance(players[color], HumanPlayer):
            session.write(f"AI turn: {COLOR_NAMES[color]} plays [{row}, {col}]")
        log.debug(f"{COLOR_NAMES[color]} played ({row}, {col})")

        # Passes recorded while the turn advanced
        for record in game.move_history[history_length:]:
            if record.is_pass:
                session.write(f"{COLOR_NAMES[record.color]} has no move!")
                log.info(f"{COLOR_NAMES[record.color]} passes")

    session.show_board(game)
    session.write("The game is over!")
    black, white = game.get_score()
    winner = game.get_winner()
    if winner == 0:
        session.write("It's a draw!")
    else:
        session.write(f"{COLOR_NAMES[winner].capitalize()} wins!")
    log.info(f"Game over. Black: {black}, White: {white}")
    return game
