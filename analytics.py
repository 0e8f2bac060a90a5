"""
Tabular views of the game for the dashboard.
"""

from typing import Dict

import pandas as pd

from config import PLAYER_IDS
from game_logic import vanishing_next
from models import GameState, Scoreboard


def placement_queue_frame(state: GameState) -> pd.DataFrame:
    """
    One row per mark on the board, oldest first within each player.
    "Age" counts from 1 (oldest); "Vanishes next" flags the mark that the
    player's next placement will remove.
    """
    rows = []
    for pid in PLAYER_IDS:
        doomed = vanishing_next(state, pid)
        for age, placement in enumerate(state.players[pid].placements, start=1):
            rows.append(
                {
                    "Player": pid,
                    "Age": age,
                    "Position": placement.position,
                    "Symbol": placement.symbol,
                    "Vanishes next": age == 1 and placement.position == doomed,
                }
            )
    return pd.DataFrame(rows, columns=["Player", "Age", "Position", "Symbol", "Vanishes next"])


def score_frame(scoreboard: Scoreboard, state: GameState) -> pd.DataFrame:
    data = []
    for pid in PLAYER_IDS:
        data.append(
            {
                "Player": pid,
                "Category": state.players[pid].category,
                "Wins": scoreboard.wins.get(pid, 0),
            }
        )
    return pd.DataFrame(data)


def simulation_frame(win_probs: Dict[int, float], avg_moves: float) -> pd.DataFrame:
    """Random-play win rates per player, with the average game length repeated per row."""
    data = []
    for pid in PLAYER_IDS:
        data.append(
            {
                "Player": pid,
                "P(win, random play)": float(win_probs.get(pid, 0.0)),
                "Avg moves to win": float(avg_moves),
            }
        )
    return pd.DataFrame(data)
