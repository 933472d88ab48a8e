import argparse
import os
import random
import sys

import difficulty
from maze_game import OPEN
from session import GameSession

# Platform-specific key reader. Arrow keys come back as 'up'/'down'/'left'/'right'.
if os.name == 'nt':
    import msvcrt
    _WIN_ARROWS = {'H': 'up', 'P': 'down', 'K': 'left', 'M': 'right'}
    def get_key():
        ch = msvcrt.getwch()
        if ch in ('\x00', '\xe0'):
            return _WIN_ARROWS.get(msvcrt.getwch(), '')
        return ch.lower()
else:
    import tty, termios
    _ANSI_ARROWS = {'A': 'up', 'B': 'down', 'D': 'left', 'C': 'right'}
    def get_key():
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
            if ch == '\x1b':
                seq = sys.stdin.read(2)
                return _ANSI_ARROWS.get(seq[1:], '') if seq.startswith('[') else ''
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        return ch.lower()

# Maze symbols
WALL_CHAR = '#'
FLOOR_CHAR = ' '
GOAL_CHAR = 'F'
PENGUIN_CHARS = {'up': '^', 'down': 'v', 'left': '<', 'right': '>'}

KEY_TO_DIRECTION = {
    'w': 'up',
    'a': 'left',
    's': 'down',
    'd': 'right',
    'up': 'up',
    'down': 'down',
    'left': 'left',
    'right': 'right',
}

def clear():
    os.system('cls' if os.name == 'nt' else 'clear')

def render(session: GameSession) -> str:
    maze, state = session.maze, session.state
    px, py = state.position
    ex, ey = maze.end

    lines = []
    for y in range(maze.height):
        row_chars = []
        for x in range(maze.width):
            if (x, y) == (px, py):
                row_chars.append(PENGUIN_CHARS[state.facing])
            elif (x, y) == (ex, ey):
                row_chars.append(GOAL_CHAR)
            else:
                row_chars.append(FLOOR_CHAR if maze.grid[y, x] == OPEN else WALL_CHAR)
        lines.append(''.join(row_chars))

    hud = f"Level: {session.level}   Moves: {state.move_count}"
    if state.solved:
        controls = "Controls: n = next level, q = quit"
    else:
        controls = "Controls: w/a/s/d or arrows to move, g = give up, r = new maze, q = quit"
    out = [hud, controls]
    if session.message:
        out.append(session.message)
    out.append("\n".join(lines))
    return "\n".join(out)

def handle_key(session: GameSession, key: str) -> bool:
    """Apply one key press. Returns False when the player quits."""
    if key in ('q', '\x03'):
        return False
    if key in KEY_TO_DIRECTION:
        session.attempt_move(KEY_TO_DIRECTION[key])
    elif key == 'n' and session.solved:
        session.next_level()
    elif key == 'g' and not session.solved:
        session.give_up()
    elif key == 'r' and not session.solved:
        session.new_game()
    return True

def main():
    parser = argparse.ArgumentParser(description="Guide the penguin through the maze to the fish.")
    parser.add_argument('--level', type=int, default=difficulty.DEFAULT_LEVEL,
                        help=f"Starting difficulty ({difficulty.MIN_LEVEL}-{difficulty.MAX_LEVEL}).")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for reproducible mazes.")
    args = parser.parse_args()

    if not difficulty.MIN_LEVEL <= args.level <= difficulty.MAX_LEVEL:
        parser.error(f"--level must be between {difficulty.MIN_LEVEL} and {difficulty.MAX_LEVEL}")

    session = GameSession(level=args.level, rng=random.Random(args.seed))

    while True:
        clear()
        print(render(session))
        if not handle_key(session, get_key()):
            print("Goodbye!")
            print(f"You reached level {session.level}.")
            break

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)
