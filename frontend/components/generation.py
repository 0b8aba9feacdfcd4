"""
generation.py — at most one quiz generation in flight per browser session.

The Generate button queues its topic with request_generation() and is
rendered disabled while is_generating() holds; the page then runs the
request and always calls finish_generation().
"""

PENDING_KEY = "studio_pending_topic"


def is_generating(state) -> bool:
    return state.get(PENDING_KEY) is not None


def request_generation(state, topic: str) -> bool:
    """Queue *topic*; returns False if a generation is already outstanding."""
    if is_generating(state):
        return False
    state[PENDING_KEY] = topic or ""
    return True


def pending_topic(state):
    return state.get(PENDING_KEY)


def finish_generation(state) -> None:
    state.pop(PENDING_KEY, None)
