"""Difficulty level to maze size mapping"""

MIN_LEVEL = 1
MAX_LEVEL = 15
DEFAULT_LEVEL = 5


def size_for(level: int) -> int:
    """
    Odd square maze dimension for a difficulty level.
    Level 1 -> 9, level 15 -> 37.
    """
    size = 2 * level + 7
    return size if size % 2 == 1 else size + 1


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def change(level: int, delta: int) -> int:
    return clamp_level(level + delta)


def advance(level: int) -> int:
    return change(level, 1)


def retreat(level: int) -> int:
    return change(level, -1)
