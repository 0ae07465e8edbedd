from .core import Team, Group, UserProfile
from .games import GameStatus, Game, Result
from .content import BlogPost, Vlog
from .selections import PlayerSelection

__all__ = [
    "Team", "Group", "UserProfile",
    "GameStatus", "Game", "Result",
    "BlogPost", "Vlog",
    "PlayerSelection",
]
