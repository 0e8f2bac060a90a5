"""
Tests for the dashboard tables.
"""

from analytics import placement_queue_frame, score_frame, simulation_frame
from config import EMOJI_CATEGORIES
from game_logic import make_initial_gamestate
from models import Scoreboard

from conftest import ScriptedRandom, play


def test_placement_queue_frame_empty_has_columns():
    df = placement_queue_frame(make_initial_gamestate())
    assert df.empty
    assert list(df.columns) == ["Player", "Age", "Position", "Symbol", "Vanishes next"]


def test_placement_queue_frame_flags_oldest_full_queue(started_game):
    play(started_game, [0, 4, 8, 2, 6], ScriptedRandom([0]))
    df = placement_queue_frame(started_game)

    p1 = df[df["Player"] == 1]
    assert list(p1["Position"]) == [0, 8, 6]
    assert list(p1["Age"]) == [1, 2, 3]
    assert list(p1["Vanishes next"]) == [True, False, False]
    assert set(p1["Symbol"]) == {EMOJI_CATEGORIES["tech"][0]}

    p2 = df[df["Player"] == 2]
    assert list(p2["Position"]) == [4, 2]
    assert not p2["Vanishes next"].any()


def test_score_frame(started_game):
    scores = Scoreboard()
    scores.record_win(2)
    df = score_frame(scores, started_game)
    assert df.to_dict("records") == [
        {"Player": 1, "Category": "tech", "Wins": 0},
        {"Player": 2, "Category": "space", "Wins": 1},
    ]


def test_simulation_frame():
    df = simulation_frame({1: 0.6, 2: 0.4}, 9.5)
    assert list(df["Player"]) == [1, 2]
    assert list(df["P(win, random play)"]) == [0.6, 0.4]
    assert (df["Avg moves to win"] == 9.5).all()
