"""
Main Streamlit application.
"""

import logging
import random

import streamlit as st

from config import LOG_FORMAT, LOG_LEVEL, PLAYER_IDS, RANDOM_PLAYOUT_GAMES
from exceptions import InvalidConfiguration
from models import GameState, Scoreboard, Stage
from game_logic import (
    apply_move,
    make_initial_gamestate,
    rematch,
    reset_game,
    set_category,
    snapshot,
    start_game,
)
from simulation import simulate_games
from analytics import placement_queue_frame, score_frame, simulation_frame

from ui import (
    print_rules,
    render_board,
    render_category_picker,
    render_dataframe,
    render_game_info,
    render_status,
    render_win_probability_chart,
)

logger = logging.getLogger(__name__)


def init_session_state() -> None:
    if "game_state" not in st.session_state:
        st.session_state["game_state"] = make_initial_gamestate()
        st.session_state["scoreboard"] = Scoreboard()
        st.session_state["playout_stats"] = None
        st.session_state["config_error"] = None


def on_category_change(player_id: int) -> None:
    state: GameState = st.session_state["game_state"]
    try:
        set_category(state, player_id, st.session_state[f"category-{player_id}"])
        st.session_state["config_error"] = None
    except InvalidConfiguration as e:
        st.session_state["config_error"] = str(e)


def on_start() -> None:
    state: GameState = st.session_state["game_state"]
    try:
        start_game(state)
        st.session_state["config_error"] = None
    except InvalidConfiguration as e:
        logger.warning(f"Refusing to start game: {e}")
        st.session_state["config_error"] = str(e)


def on_cell_click(index: int) -> None:
    state: GameState = st.session_state["game_state"]
    # apply_move rejects every move once somebody has won, so this fires once per game
    if apply_move(state, index) and state.stage is Stage.WON:
        st.session_state["scoreboard"].record_win(state.winner)
        st.balloons()


def on_rematch() -> None:
    rematch(st.session_state["game_state"])


def on_reset() -> None:
    reset_game(st.session_state["game_state"])
    st.session_state["scoreboard"].reset()
    # drop widget values so the pickers show the restored defaults
    for pid in PLAYER_IDS:
        st.session_state.pop(f"category-{pid}", None)
    st.session_state["playout_stats"] = None


def on_clear_scores() -> None:
    st.session_state["scoreboard"].reset()


def on_run_playouts() -> None:
    state: GameState = st.session_state["game_state"]
    categories = state.categories()
    win_probs, avg_moves, capped = simulate_games(
        RANDOM_PLAYOUT_GAMES,
        random.Random(),
        categories[PLAYER_IDS[0]],
        categories[PLAYER_IDS[1]],
    )
    st.session_state["playout_stats"] = (win_probs, avg_moves, capped)


def render_setup(state: GameState) -> None:
    st.subheader("Game Setup")
    st.caption("Choose emoji categories for each player")
    categories = state.categories()
    col_p1, col_p2 = st.columns(2)
    for col, pid in zip((col_p1, col_p2), PLAYER_IDS):
        with col:
            render_category_picker(pid, categories, on_category_change)
    st.button("Start Game", on_click=on_start, type="primary")


def render_game(state: GameState) -> None:
    snap = snapshot(state)
    scoreboard: Scoreboard = st.session_state["scoreboard"]

    board_col, info_col = st.columns([1.2, 1.0])

    with board_col:
        render_status(snap, scoreboard.wins)
        render_board(snap, on_cell_click)

        col_again, col_reset, col_clear = st.columns(3)
        with col_again:
            if snap.stage is Stage.WON:
                st.button("Play Again", on_click=on_rematch, type="primary")
        with col_reset:
            st.button("🔁 Reset Game", on_click=on_reset)
        with col_clear:
            st.button("Clear scores", on_click=on_clear_scores)

    with info_col:
        render_game_info(snap)
        render_dataframe("Emojis on the board (oldest first)", placement_queue_frame(state))
        render_dataframe("Scores", score_frame(scoreboard, state))

        with st.expander("Random play odds", expanded=False):
            st.button("Run random playouts", on_click=on_run_playouts)
            stats = st.session_state["playout_stats"]
            if stats is not None:
                win_probs, avg_moves, capped = stats
                render_win_probability_chart(win_probs)
                render_dataframe("Random play summary", simulation_frame(win_probs, avg_moves))
                st.caption(
                    f"Estimated from {RANDOM_PLAYOUT_GAMES} random games "
                    f"({capped} stopped without a winner)."
                )


def run_app() -> None:
    """Run the main Streamlit application."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    st.set_page_config(page_title="Blink Tac Toe", layout="wide")
    st.title("Blink Tac Toe")
    st.caption("A twist on the classic game with vanishing emojis!")

    init_session_state()
    state: GameState = st.session_state["game_state"]

    with st.expander("Game Rules", expanded=False):
        print_rules()

    if st.session_state["config_error"]:
        st.error(st.session_state["config_error"])

    if not state.started:
        render_setup(state)
    else:
        render_game(state)


if __name__ == "__main__":
    run_app()
