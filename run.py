"""
Main script to play Reversi in the terminal.
"""
import sys

from reversi.cli import main

if __name__ == "__main__":
    sys.exit(main())
