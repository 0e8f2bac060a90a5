"""
Random playouts and Monte Carlo statistics.
"""

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from config import DEFAULT_CATEGORIES, PLAYER_IDS, RANDOM_PLAYOUT_MAX_MOVES
from game_logic import apply_move, legal_moves, make_initial_gamestate, start_game
from models import GameState


@dataclass
class PlayoutResult:
    winner: Optional[int]
    winning_line: Optional[Tuple[int, int, int]]
    moves: int
    positions: List[int] = field(default_factory=list)
    final_state: Optional[GameState] = None


def play_random_game(
    rng=None,
    player1_category: str = DEFAULT_CATEGORIES[1],
    player2_category: str = DEFAULT_CATEGORIES[2],
    max_moves: int = RANDOM_PLAYOUT_MAX_MOVES,
) -> PlayoutResult:
    """
    Play one game where both players pick uniformly among the empty cells.
    The same `rng` drives cell choice and symbol draws, so a seeded
    random.Random gives a reproducible game.
    Stops at the first win or after `max_moves` (winner is then None).
    """
    rng = rng if rng is not None else random
    state = start_game(make_initial_gamestate(), player1_category, player2_category)
    positions: List[int] = []

    while state.winner is None and len(positions) < max_moves:
        cell = rng.choice(legal_moves(state))
        apply_move(state, cell, rng)
        positions.append(cell)

    return PlayoutResult(
        winner=state.winner,
        winning_line=state.winning_line,
        moves=len(positions),
        positions=positions,
        final_state=state,
    )


def simulate_games(
    n_games: int = 1000,
    rng=None,
    player1_category: str = DEFAULT_CATEGORIES[1],
    player2_category: str = DEFAULT_CATEGORIES[2],
    max_moves: int = RANDOM_PLAYOUT_MAX_MOVES,
) -> Tuple[Dict[int, float], float, int]:
    """
    Monte Carlo: estimate how often each player wins under random play.

    Returns:
      - win_probs: player id -> fraction of games won
      - avg_moves: average number of moves in games that ended with a winner
      - capped: number of games stopped by max_moves without a winner
    """
    rng = rng if rng is not None else random
    win_counts = Counter()
    moves_sum = 0
    capped = 0

    for _ in range(n_games):
        result = play_random_game(rng, player1_category, player2_category, max_moves)
        if result.winner is None:
            capped += 1
            continue
        win_counts[result.winner] += 1
        moves_sum += result.moves

    finished = n_games - capped
    win_probs = {pid: win_counts[pid] / n_games if n_games > 0 else 0.0 for pid in PLAYER_IDS}
    avg_moves = moves_sum / finished if finished > 0 else 0.0
    return win_probs, avg_moves, capped
