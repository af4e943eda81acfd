"""
Players that decide the next placement for a colour.
"""
import random
from typing import Optional, Tuple

from ..game.board import DIRECTIONS, Board, Position
from ..game.game import OthelloGame


def count_captures(board: Board, pos: Position, color: int) -> int:
    """Count the discs a placement would flip across all eight directions."""
    total = 0
    for direction in DIRECTIONS:
        ray = board.capture_ray(pos, color, direction)
        if ray is not None:
            total += len(ray)
    return total


def select_greedy_move(board: Board, color: int) -> Position:
    """
    Pick the legal move that flips the most discs, without lookahead.

    Ties go to the earliest move in row-major order.

    Args:
        board: The board to evaluate
        color: Colour to move

    Returns:
        (row, col) of the selected move
    """
    moves = board.legal_moves(color)
    if not moves:
        raise ValueError("No legal moves available")

    best_move = moves[0]
    best_count = count_captures(board, best_move, color)
    for move in moves[1:]:
        captures = count_captures(board, move, color)
        if captures > best_count:
            best_count = captures
            best_move = move
    return best_move


class Player:
    """Base class for anything that can choose a move."""

    def __init__(self, name: str):
        self.name = name

    def choose_move(self, game: OthelloGame) -> Tuple[int, int]:
        """Get the next move for the current game state."""
        raise NotImplementedError

    def reset(self) -> None:
        """Reset any internal state between games."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class GreedyPlayer(Player):
    """Automated player that maximises the number of discs flipped this turn."""

    def __init__(self, name: str = 'greedy'):
        super().__init__(name)

    def choose_move(self, game: OthelloGame) -> Tuple[int, int]:
        return select_greedy_move(game.board, game.current_player)


class RandomPlayer(Player):
    """Automated player that picks uniformly among the legal moves."""

    def __init__(self, name: str = 'random', seed: Optional[int] = None):
        super().__init__(name)
        self.seed = seed
        self.rng = random.Random(seed)

    def choose_move(self, game: OthelloGame) -> Tuple[int, int]:
        valid_moves = game.get_valid_moves()
        if not valid_moves:
            raise ValueError("No legal moves available")
        return self.rng.choice(valid_moves)


class HumanPlayer(Player):
    """
    Player whose moves come from an interactive session.

    The session must provide prompt_move(game) returning a legal (row, col);
    re-prompting after bad input is the session's job.
    """

    def __init__(self, session, name: str = 'human'):
        super().__init__(name)
        self.session = session

    def choose_move(self, game: OthelloGame) -> Tuple[int, int]:
        return self.session.prompt_move(game)


PLAYER_KINDS = ('human', 'greedy', 'random')


def create_player(kind: str, session=None, seed: Optional[int] = None) -> Player:
    """
    Create a player from its kind name.

    Args:
        kind: One of PLAYER_KINDS
        session: Interactive session, required for human players
        seed: Seed for random players

    Returns:
        Player instance
    """
    if kind == 'greedy':
        return GreedyPlayer()
    if kind == 'random':
        return RandomPlayer(seed=seed)
    if kind == 'human':
        if session is None:
            raise ValueError("A human player needs an interactive session")
        return HumanPlayer(session)
    raise ValueError(f"Unknown player kind: {kind!r}. Expected one of {PLAYER_KINDS}")
