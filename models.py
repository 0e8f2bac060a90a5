"""
Data models and state representations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config import BOARD_CELLS, DEFAULT_CATEGORIES, PLAYER_IDS


class Stage(Enum):
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass(frozen=True)
class Mark:
    """A symbol on the board, tagged with the player whose category it came from."""
    symbol: str
    player_id: int


@dataclass(frozen=True)
class Placement:
    """One entry of a player's placement queue."""
    position: int
    symbol: str


@dataclass
class PlayerState:
    id: int
    category: str
    placements: List[Placement] = field(default_factory=list)  # oldest first

    def clone(self) -> "PlayerState":
        return PlayerState(id=self.id, category=self.category, placements=self.placements[:])


@dataclass
class GameState:
    """The single mutable game record owned by the engine."""
    board: List[Optional[Mark]]
    players: Dict[int, PlayerState]
    current_player: int = 1
    stage: Stage = Stage.SETUP
    winner: Optional[int] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def started(self) -> bool:
        return self.stage is not Stage.SETUP

    def categories(self) -> Dict[int, str]:
        return {pid: p.category for pid, p in self.players.items()}

    def clone(self) -> "GameState":
        return GameState(
            board=self.board[:],
            players={pid: p.clone() for pid, p in self.players.items()},
            current_player=self.current_player,
            stage=self.stage,
            winner=self.winner,
            winning_line=self.winning_line,
        )


def empty_board() -> List[Optional[Mark]]:
    return [None] * BOARD_CELLS


def default_players() -> Dict[int, PlayerState]:
    return {pid: PlayerState(id=pid, category=DEFAULT_CATEGORIES[pid]) for pid in PLAYER_IDS}


@dataclass(frozen=True)
class WinResult:
    winner: Optional[int] = None
    line: Optional[Tuple[int, int, int]] = None

    def __bool__(self) -> bool:
        return self.winner is not None


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the presentation layer after every call."""
    board: Tuple[Optional[str], ...]           # symbol per cell, None if empty
    owners: Tuple[Optional[int], ...]          # player id per cell, None if empty
    current_player: int
    winner: Optional[int]
    winning_line: Optional[Tuple[int, int, int]]
    categories: Dict[int, str]
    placements: Dict[int, Tuple[Placement, ...]]
    vanishing_next: Dict[int, Optional[int]]   # position removed by that player's next move
    started: bool
    stage: Stage


@dataclass
class Scoreboard:
    """Wins per player across games. Kept by the UI, not the engine."""
    wins: Dict[int, int] = field(default_factory=lambda: {pid: 0 for pid in PLAYER_IDS})

    def record_win(self, player_id: int) -> None:
        self.wins[player_id] = self.wins.get(player_id, 0) + 1

    def reset(self) -> None:
        self.wins = {pid: 0 for pid in PLAYER_IDS}
