"""Interactive three-pile Nim for the terminal."""
