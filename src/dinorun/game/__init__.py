"""Simulation core: entities, obstacle field and the game session."""
