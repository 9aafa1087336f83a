#!/usr/bin/env python3
"""Play the reserve game from the terminal.

Usage:
    python play.py              - master level, random seed
    python play.py novice       - queue only
    python play.py adventurer 7 - queue + reserve stack, seed 7
"""

import sys

from reserve_core.menu import main


if __name__ == "__main__":
    sys.exit(main())
