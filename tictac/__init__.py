"""
tictac - Tic Tac Toe Engine

A deterministic, rules-driven engine for tic-tac-toe with an optional
scripted opponent. Provides:
- Game state and pure transitions (reducer)
- Terminal detection and legal move generation
- A fixed-heuristic automated player
- A session holder with a cancellable, delayed automated turn
"""

__version__ = "0.1.0"
