"""Othello (Reversi): board rules, a computer player, self checks and a console game."""

__version__ = "0.1.0"
__all__ = ["ai", "board", "game", "selftest"]