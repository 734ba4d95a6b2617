"""Rings game logic: entities, ring generation, frame sampling and skins."""
