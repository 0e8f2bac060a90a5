"""
Core game logic: setup, moves, the vanishing rule and win detection.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from config import (
    BOARD_CELLS,
    EMOJI_CATEGORIES,
    MAX_MARKS_PER_PLAYER,
    PLAYER_IDS,
    WINNING_LINES,
)
from exceptions import InvalidConfiguration, SameCategory, UnknownCategory
from models import (
    GameSnapshot,
    GameState,
    Mark,
    Placement,
    Stage,
    WinResult,
    default_players,
    empty_board,
)

logger = logging.getLogger(__name__)


def make_initial_gamestate() -> GameState:
    """Setup stage with the default categories and an empty board."""
    return GameState(board=empty_board(), players=default_players())


def other_player(player_id: int) -> int:
    return PLAYER_IDS[1] if player_id == PLAYER_IDS[0] else PLAYER_IDS[0]


def _validate_category(category: str) -> None:
    if category not in EMOJI_CATEGORIES:
        raise UnknownCategory(category)


def _validate_pair(player1_category: str, player2_category: str) -> None:
    _validate_category(player1_category)
    _validate_category(player2_category)
    if player1_category == player2_category:
        raise SameCategory(player1_category)


def set_category(state: GameState, player_id: int, category: str) -> bool:
    """
    Bind `category` to `player_id` before the game starts.
    Once the game has started every call returns False and changes nothing.
    Before that, raises InvalidConfiguration for an unknown player/category or
    when the other player already holds that category.
    """
    if state.started:
        logger.debug(f"Ignoring category change for player {player_id!r}: game already started")
        return False

    if player_id not in state.players:
        raise InvalidConfiguration(f"Unknown player {player_id!r}")
    _validate_category(category)

    if state.players[other_player(player_id)].category == category:
        raise SameCategory(category)

    state.players[player_id].category = category
    return True


def start_game(
    state: GameState,
    player1_category: Optional[str] = None,
    player2_category: Optional[str] = None,
) -> GameState:
    """
    Start (or restart) a game:
      - Categories default to whatever is currently bound.
      - Both categories are validated before anything is touched.
      - Board and placement queues are cleared, player 1 moves first.
    """
    p1, p2 = PLAYER_IDS
    cat1 = player1_category if player1_category is not None else state.players[p1].category
    cat2 = player2_category if player2_category is not None else state.players[p2].category
    _validate_pair(cat1, cat2)

    state.players[p1].category = cat1
    state.players[p2].category = cat2
    for player in state.players.values():
        player.placements = []

    state.board = empty_board()
    state.current_player = p1
    state.stage = Stage.IN_PROGRESS
    state.winner = None
    state.winning_line = None

    logger.info(f"Game started: player {p1} ({cat1}) vs player {p2} ({cat2})")
    return state


def rematch(state: GameState) -> GameState:
    """Play again with the same categories."""
    logger.info("Rematch requested")
    return start_game(state)


def reset_game(state: GameState) -> GameState:
    """Back to setup; categories revert to the defaults."""
    state.board = empty_board()
    state.players = default_players()
    state.current_player = PLAYER_IDS[0]
    state.stage = Stage.SETUP
    state.winner = None
    state.winning_line = None
    logger.info("Game reset to setup")
    return state


def draw_symbol(category: str, rng=None) -> str:
    """Pick a symbol uniformly (with replacement) from a category."""
    rng = rng if rng is not None else random
    return rng.choice(EMOJI_CATEGORIES[category])


def is_legal_move(state: GameState, cell_index) -> bool:
    if state.stage is not Stage.IN_PROGRESS:
        return False
    if isinstance(cell_index, bool) or not isinstance(cell_index, int):
        return False
    if not 0 <= cell_index < BOARD_CELLS:
        return False
    return state.board[cell_index] is None


def legal_moves(state: GameState) -> List[int]:
    if state.stage is not Stage.IN_PROGRESS:
        return []
    return [i for i, cell in enumerate(state.board) if cell is None]


def apply_move(state: GameState, cell_index: int, rng=None) -> bool:
    """
    Place a random symbol for the current player at `cell_index`.

    Illegal moves (game not started, game already won, index out of range,
    occupied cell) are ignored and return False. Otherwise:
      1) draw a symbol from the player's category,
      2) place it and append it to the player's queue,
      3) if the queue now holds more than MAX_MARKS_PER_PLAYER, the oldest
         placement is dropped and its cell cleared,
      4) check for a winner on the resulting board; the turn passes to the
         other player only if nobody won.
    """
    if not is_legal_move(state, cell_index):
        logger.debug(f"Rejected move at {cell_index!r} (stage={state.stage.value})")
        return False

    player_id = state.current_player
    player = state.players[player_id]
    symbol = draw_symbol(player.category, rng)

    state.board[cell_index] = Mark(symbol=symbol, player_id=player_id)
    player.placements.append(Placement(position=cell_index, symbol=symbol))
    logger.debug(f"Player {player_id} placed {symbol} at {cell_index}")

    if len(player.placements) > MAX_MARKS_PER_PLAYER:
        oldest = player.placements.pop(0)
        state.board[oldest.position] = None
        logger.debug(f"Player {player_id}'s {oldest.symbol} vanished from {oldest.position}")

    result = check_winner(state.board)
    if result:
        state.winner = result.winner
        state.winning_line = result.line
        state.stage = Stage.WON
        logger.info(f"Player {result.winner} wins with line {list(result.line)}")
    else:
        state.current_player = other_player(player_id)

    return True


def check_winner(board: Sequence[Optional[Mark]]) -> WinResult:
    """
    Scan WINNING_LINES in order and return the first line whose three cells
    all hold marks of the same player. Symbols may differ within a line.
    """
    for line in WINNING_LINES:
        a, b, c = (board[i] for i in line)
        if a is None or b is None or c is None:
            continue
        if a.player_id == b.player_id == c.player_id:
            return WinResult(winner=a.player_id, line=line)
    return WinResult()


def symbol_owner(symbol: str, categories: Dict[int, str]) -> Optional[int]:
    """Player whose bound category contains `symbol`, if any."""
    for player_id, category in categories.items():
        if symbol in EMOJI_CATEGORIES[category]:
            return player_id
    return None


def vanishing_next(state: GameState, player_id: int) -> Optional[int]:
    """Position that this player's next placement would clear, if the queue is full."""
    placements = state.players[player_id].placements
    if len(placements) < MAX_MARKS_PER_PLAYER:
        return None
    return placements[0].position


def snapshot(state: GameState) -> GameSnapshot:
    """Immutable view of the state for rendering."""
    return GameSnapshot(
        board=tuple(cell.symbol if cell is not None else None for cell in state.board),
        owners=tuple(cell.player_id if cell is not None else None for cell in state.board),
        current_player=state.current_player,
        winner=state.winner,
        winning_line=state.winning_line,
        categories=state.categories(),
        placements={pid: tuple(p.placements) for pid, p in state.players.items()},
        vanishing_next={pid: vanishing_next(state, pid) for pid in state.players},
        started=state.started,
        stage=state.stage,
    )
