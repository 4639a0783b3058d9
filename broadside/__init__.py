"""Broadside: rules engine for human vs. automated-opponent Battleship."""
