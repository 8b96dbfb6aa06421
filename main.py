#!/usr/bin/env python3
"""TimerDeck — entry point.

Run with:
    python main.py
    python -m timerdeck
"""

from timerdeck.__main__ import main


if __name__ == "__main__":
    main()
