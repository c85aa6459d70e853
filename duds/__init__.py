"""A tile-based dungeon game with A* pathfinding on a small entity-component world."""

__version__ = "0.1.0"