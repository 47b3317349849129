"""
Hex Drift
=========

A real-time word-finding game on a field of drifting hexagonal letter tiles.

Spell words by picking tiles; valid words score and get fresh letters, while
the tiles drift faster every fifteen seconds. All tunable parameters are in
game_config.yaml.
"""
