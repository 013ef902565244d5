"""Cryptogram puzzles for cipher competitions."""
