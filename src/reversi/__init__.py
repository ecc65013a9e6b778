"""
Reversi rules engine with a small terminal front end.
"""

__version__ = "0.1"
