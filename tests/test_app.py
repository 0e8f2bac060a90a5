"""
Tests for the Streamlit front end: score tally, rematch and reset.

Drives app.py through streamlit's AppTest harness; moves only depend on cell
positions, so the random symbol draw does not affect the outcome.
"""

import pytest
from streamlit.testing.v1 import AppTest

from config import DEFAULT_CATEGORIES
from models import Stage


# player 1 takes the top row, player 2 plays 3 and 4 in between
TOP_ROW_WIN = [0, 3, 1, 4, 2]


# =============================================================================
# Helpers
# =============================================================================


def click_label(at: AppTest, label: str) -> AppTest:
    button = next(b for b in at.button if b.label == label)
    return button.click().run()


def click_cell(at: AppTest, index: int) -> AppTest:
    return at.button(key=f"cell-{index}").click().run()


def play_cells(at: AppTest, cells) -> AppTest:
    for cell in cells:
        click_cell(at, cell)
    return at


@pytest.fixture
def app():
    at = AppTest.from_file("../app.py", default_timeout=30)
    at.run()
    assert not at.exception
    return at


@pytest.fixture
def started_app(app):
    click_label(app, "Start Game")
    assert app.session_state["game_state"].stage is Stage.IN_PROGRESS
    return app


# =============================================================================
# Score tally
# =============================================================================


def test_setup_screen_starts_with_zero_scores(app):
    assert app.session_state["game_state"].stage is Stage.SETUP
    assert app.session_state["scoreboard"].wins == {1: 0, 2: 0}
    assert any(b.label == "Start Game" for b in app.button)


def test_win_is_counted_once(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    state = started_app.session_state["game_state"]
    assert state.winner == 1
    assert started_app.session_state["scoreboard"].wins == {1: 1, 2: 0}
    assert not started_app.exception


def test_win_celebrates_with_balloons(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    assert len(started_app.get("balloons")) == 1


def test_board_is_locked_after_win(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    for i in range(9):
        assert started_app.button(key=f"cell-{i}").disabled
    assert started_app.session_state["scoreboard"].wins == {1: 1, 2: 0}


def test_play_again_keeps_score_and_clears_board(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    click_label(started_app, "Play Again")

    state = started_app.session_state["game_state"]
    assert state.stage is Stage.IN_PROGRESS
    assert state.board == [None] * 9
    assert state.current_player == 1
    assert started_app.session_state["scoreboard"].wins == {1: 1, 2: 0}
    assert not started_app.button(key="cell-0").disabled


def test_second_win_adds_to_tally(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    click_label(started_app, "Play Again")
    # player 2 takes the middle row this time
    play_cells(started_app, [0, 3, 1, 4, 8, 5])
    assert started_app.session_state["game_state"].winner == 2
    assert started_app.session_state["scoreboard"].wins == {1: 1, 2: 1}


def test_reset_clears_scores_and_returns_to_setup(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    click_label(started_app, "Play Again")
    click_label(started_app, "🔁 Reset Game")

    state = started_app.session_state["game_state"]
    assert state.stage is Stage.SETUP
    assert state.categories() == DEFAULT_CATEGORIES
    assert started_app.session_state["scoreboard"].wins == {1: 0, 2: 0}
    assert any(b.label == "Start Game" for b in started_app.button)


def test_clear_scores_keeps_game_in_progress(started_app):
    play_cells(started_app, TOP_ROW_WIN)
    click_label(started_app, "Clear scores")
    state = started_app.session_state["game_state"]
    assert state.stage is Stage.WON
    assert started_app.session_state["scoreboard"].wins == {1: 0, 2: 0}
