"""
Game exceptions.

Only configuration problems raise. Illegal moves are rejected quietly by the
engine (see game_logic.apply_move), since the UI is expected to send stale or
duplicate clicks.
"""


class BlinkTacToeException(Exception):
    """Base class for all game exceptions."""
    pass


class InvalidConfiguration(BlinkTacToeException):
    """The requested player/category setup cannot be played."""
    pass


class UnknownCategory(InvalidConfiguration):
    """Category name is not in the catalog."""
    def __init__(self, category):
        self.category = category
        super().__init__(f"Unknown category {category!r}")


class SameCategory(InvalidConfiguration):
    """Both players were bound to the same category."""
    def __init__(self, category):
        self.category = category
        super().__init__(f"Both players cannot use category {category!r}")
