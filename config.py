"""
Game configuration and constants.
"""

# Emoji categories: each player draws a random symbol from their own category
EMOJI_CATEGORIES = {
    "animals": ["🐶", "🐱", "🐵", "🐰", "🦊", "🐻", "🐼", "🐨", "🦁", "🐯"],
    "food": ["🍕", "🍔", "🍟", "🍩", "🍦", "🍭", "🍫", "🍿", "🥐", "🍪"],
    "sports": ["⚽", "🏀", "🏈", "🎾", "🏐", "🏉", "🎱", "🏓", "⚾", "🥎"],
    "tech": ["💻", "📱", "🖥️", "⌨️", "🖱️", "🎮", "🎧", "📷", "🕹️", "🔋"],
    "space": ["🚀", "🛸", "🌌", "🌠", "🪐", "👾", "👽", "🌑", "🌕", "☄️"],
}
CATEGORY_NAMES = list(EMOJI_CATEGORIES)

# Players
PLAYER_IDS = (1, 2)
DEFAULT_CATEGORIES = {1: "tech", 2: "space"}

# Board
BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE
MAX_MARKS_PER_PLAYER = 3  # vanishing rule: 4th placement removes the oldest

# Scan order matters: the first complete line is the one reported
WINNING_LINES = [
    (0, 1, 2),  # top row
    (3, 4, 5),  # middle row
    (6, 7, 8),  # bottom row
    (0, 3, 6),  # left column
    (1, 4, 7),  # middle column
    (2, 5, 8),  # right column
    (0, 4, 8),  # diagonal top-left to bottom-right
    (2, 4, 6),  # diagonal top-right to bottom-left
]

# Colors for plotting
PLAYER_COLORS = {
    1: "#0891b2",  # cyan
    2: "#ea580c",  # orange
}

# Random playout statistics shown in the UI
RANDOM_PLAYOUT_GAMES = 300
RANDOM_PLAYOUT_MAX_MOVES = 200

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
