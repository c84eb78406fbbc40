from core.token_tracker import TokenTracker
from core.turn import Speaker, Turn

__all__ = [
    "Speaker",
    "TokenTracker",
    "Turn",
]
