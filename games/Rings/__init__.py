"""Rings: fire through a rotating ring of obstacles, one level per escape."""
