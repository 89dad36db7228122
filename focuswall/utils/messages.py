# focuswall/utils/messages.py
import random
from typing import Dict, List, Optional

from focuswall.core.errors import ValidationRejectedError

MOTIVATIONAL_MESSAGES: Dict[str, List[str]] = {
    "welcome": [
        "Small steps every day add up to big results.",
        "Focus on progress, not perfection.",
        "Today is a good day to move one goal forward.",
        "You don't have to do everything, just the next thing.",
        "Three focused tasks beat ten scattered ones.",
    ],
    "completion": [
        "Look how far you've come!",
        "Every finished task is a promise kept to yourself.",
        "Great work! Momentum is on your side.",
        "Done is a beautiful word.",
        "Celebrate the wins, big and small.",
    ],
}


def get_random_motivational_message(kind: str, rng: Optional[random.Random] = None) -> str:
    messages = MOTIVATIONAL_MESSAGES.get(kind)
    if not messages:
        raise ValidationRejectedError(f"Unknown message kind: {kind}")
    return (rng or random).choice(messages)
