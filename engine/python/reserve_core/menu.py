"""Text menu driver.

Shows the state, reads a numeric option, runs the matching action and
repeats until the player quits.

Usage:
    python play.py [novice|adventurer|master] [seed]
"""

import logging
import os
import sys
from typing import Callable, Dict, List, Optional, Tuple

from reserve_core.actions import GameAction
from reserve_core.env import Level, ReserveEnv
from reserve_core.render import describe_outcome, render

QUIT_OPTION = 0

MENU_OPTIONS: Dict[int, Tuple[GameAction, str]] = {
    1: (GameAction.PLAY, "Play front piece"),
    2: (GameAction.RESERVE, "Reserve front piece"),
    3: (GameAction.USE_RESERVE, "Use reserved piece"),
    4: (GameAction.SWAP, "Swap queue front with stack top"),
    5: (GameAction.UNDO, "Undo last action"),
    6: (GameAction.EXCHANGE, "Exchange 3 queue pieces with the stack"),
    7: (GameAction.INSERT, "Insert new piece"),
}


def parse_choice(text: str) -> Optional[int]:
    """Parse a menu choice.

    Returns:
        The option number, or None if the input is not a number
    """
    try:
        return int(text.strip())
    except ValueError:
        return None


def menu_lines(env: ReserveEnv) -> List[str]:
    """Menu entries offered at the session's level."""
    lines = ["", "Options:"]
    for number, (action, label) in MENU_OPTIONS.items():
        if action in env.available_actions:
            lines.append(f"{number} - {label}")
    lines.append(f"{QUIT_OPTION} - Quit")
    return lines


def run_menu(
    env: ReserveEnv,
    read_line: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> int:
    """Run the menu loop on a reset environment.

    Args:
        env: Environment to drive (reset() must have been called)
        read_line: Prompt-and-read function (defaults to input)
        write: Output function

    Returns:
        Number of actions executed
    """
    read_line = read_line or input
    actions_run = 0
    obs = env.observe()

    while True:
        write("")
        write("=== Current state ===")
        write(render(obs))
        for line in menu_lines(env):
            write(line)

        try:
            choice = parse_choice(read_line("Option: "))
        except EOFError:
            choice = QUIT_OPTION

        if choice == QUIT_OPTION:
            write("")
            write("Exiting...")
            return actions_run

        action = MENU_OPTIONS.get(choice, (None, ""))[0]
        if action is None or action not in env.available_actions:
            write("")
            write(">> Invalid option. Try again.")
            continue

        result = env.step(action)
        actions_run += 1
        obs = result.obs
        write("")
        write(describe_outcome(result.outcome))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the reserve-play console script."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=os.getenv("RESERVE_LOG_LEVEL", "WARNING").upper())

    try:
        level = Level(args[0].lower()) if args else Level.MASTER
        seed = int(args[1]) if len(args) > 1 else None
    except ValueError:
        levels = "|".join(lvl.value for lvl in Level)
        print(f"Usage: reserve-play [{levels}] [seed]")
        return 2

    env = ReserveEnv(level=level)
    env.reset(seed)
    print(f"Starting {level.value} game with {len(env.state.queue)} pieces (seed {env.seed})...")
    run_menu(env)
    return 0


if __name__ == "__main__":
    sys.exit(main())
