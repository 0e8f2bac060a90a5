"""
UI components and visualization helpers.
"""

from typing import Callable, Dict

import plotly.express as px
import streamlit as st

from config import (
    BOARD_SIDE,
    CATEGORY_NAMES,
    EMOJI_CATEGORIES,
    MAX_MARKS_PER_PLAYER,
    PLAYER_COLORS,
    PLAYER_IDS,
)
from models import GameSnapshot, Stage


def print_rules() -> None:
    """Display the game rules."""
    st.markdown("#### Game Setup")
    st.write(
        "Each player selects an emoji category. On their turn, they get a random emoji "
        "from their category."
    )
    st.markdown("#### Vanishing Rule")
    st.write(
        f"Each player can have only {MAX_MARKS_PER_PLAYER} emojis on the board at any time. "
        f"When you place emoji number {MAX_MARKS_PER_PLAYER + 1}, your oldest emoji vanishes!"
    )
    st.markdown("#### Winning")
    st.write("Win by forming a line of 3 of your emojis horizontally, vertically, or diagonally.")
    st.markdown("#### No Draws")
    st.write(
        "Because of the vanishing rule, the board can never be completely filled, "
        "so the game continues until someone wins."
    )


def category_label(category: str) -> str:
    return f"{EMOJI_CATEGORIES[category][0]} {category.capitalize()}"


def render_category_picker(
    player_id: int,
    categories: Dict[int, str],
    on_change: Callable[[int], None],
) -> None:
    """Selectbox for one player; the opponent's category is not offered."""
    opponent = [c for pid, c in categories.items() if pid != player_id]
    options = [c for c in CATEGORY_NAMES if c not in opponent]
    key = f"category-{player_id}"
    st.selectbox(
        f"Player {player_id}",
        options,
        index=options.index(categories[player_id]),
        key=key,
        format_func=category_label,
        on_change=on_change,
        args=(player_id,),
    )


def render_status(snap: GameSnapshot, scores: Dict[int, int]) -> None:
    """Turn indicator / winner banner plus per-player scores."""
    cols = st.columns(len(PLAYER_IDS))
    for col, pid in zip(cols, PLAYER_IDS):
        with col:
            marker = "▶ " if snap.winner is None and snap.current_player == pid else ""
            st.metric(
                f"{marker}Player {pid} {EMOJI_CATEGORIES[snap.categories[pid]][0]}",
                scores.get(pid, 0),
            )

    if snap.stage is Stage.WON:
        st.success(f"🏆 Player {snap.winner} Wins!")
    else:
        st.info(f"Player {snap.current_player}'s Turn")


def render_board(snap: GameSnapshot, on_cell_click: Callable[[int], None]) -> None:
    """
    3x3 grid of buttons. Winning cells use the primary style and the mark that
    the current player's next move will remove is flagged with a ⏳ suffix.
    """
    winning = set(snap.winning_line or ())
    doomed = snap.vanishing_next.get(snap.current_player) if snap.winner is None else None

    for r in range(BOARD_SIDE):
        cols = st.columns(BOARD_SIDE)
        for c, col in enumerate(cols):
            idx = r * BOARD_SIDE + c
            symbol = snap.board[idx]
            label = symbol if symbol is not None else " "
            if idx == doomed:
                label = f"{label} ⏳"
            with col:
                st.button(
                    label,
                    key=f"cell-{idx}",
                    on_click=on_cell_click,
                    args=(idx,),
                    disabled=symbol is not None or snap.stage is not Stage.IN_PROGRESS,
                    type="primary" if idx in winning else "secondary",
                    width="stretch",
                )


def render_game_info(snap: GameSnapshot) -> None:
    """Categories in play and a short reminder of the rules."""
    st.markdown("#### Game Info")
    for pid in PLAYER_IDS:
        category = snap.categories[pid]
        preview = " ".join(EMOJI_CATEGORIES[category][:5])
        st.write(f"**Player {pid}:** {category} emojis {preview}")
    st.write("**Vanishing Rule:** When you place your 4th emoji, your oldest emoji disappears!")
    st.write("**Win:** Form a line of 3 of your emojis (horizontally, vertically, or diagonally).")


def render_dataframe(title: str, df) -> None:
    st.markdown(f"#### {title}")
    if df.empty:
        st.write("*None yet*")
        return
    st.dataframe(df, width="stretch", hide_index=True)


def render_win_probability_chart(win_probs: Dict[int, float]) -> None:
    """Bar chart of random-play win rates per player."""
    data = {
        "Player": [f"Player {pid}" for pid in PLAYER_IDS],
        "P(win)": [win_probs.get(pid, 0.0) for pid in PLAYER_IDS],
    }
    fig = px.bar(
        data,
        x="Player",
        y="P(win)",
        color="Player",
        color_discrete_map={f"Player {pid}": PLAYER_COLORS[pid] for pid in PLAYER_IDS},
    )
    fig.update_layout(
        yaxis=dict(range=[0, 1], title="P(win)"),
        height=300,
        margin=dict(l=10, r=10, t=30, b=10),
        showlegend=False,
    )
    st.plotly_chart(fig, width="stretch")
