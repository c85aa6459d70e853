"""Component and event types attached to entities in the game world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TileSheetType(Enum):
    """The tile sheets sprites are cut from."""

    WORLD = "world"
    MONSTERS = "monsters"


class Timer:
    """A one-shot countdown timer measured in seconds."""

    def __init__(self, duration: float) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self.duration = float(duration)
        self.elapsed = 0.0
        self._finished = False

    def tick(self, seconds: float) -> None:
        """Advance the timer by ``seconds``."""
        if seconds < 0:
            raise ValueError("cannot tick a timer backwards")
        self.elapsed = min(self.elapsed + seconds, self.duration)
        self._finished = self.elapsed >= self.duration

    def finished(self) -> bool:
        """True once a tick has brought the timer to its duration."""
        return self._finished

    def __repr__(self) -> str:
        return f"Timer(duration={self.duration}, elapsed={self.elapsed})"


@dataclass
class Health:
    current: float
    max: float


@dataclass
class Moving:
    """Marks an entity as travelling along its path; speed is in tiles per second."""

    speed: float = 0.5
    timer: Timer = field(default_factory=lambda: Timer(0.0))


@dataclass
class PathMarker:
    """Marks a visual marker drawn along a planned path."""


@dataclass
class Player:
    """Marks the player-controlled entity."""


@dataclass
class Visible:
    """Marks an entity that is drawn."""


@dataclass
class Blocking:
    """Marks a tile that cannot be walked through."""


@dataclass
class Highlight:
    """Marks a tile currently under the pointer."""


@dataclass
class Layer:
    """Vertical layer an entity is drawn on."""

    value: int = 0


@dataclass(frozen=True)
class MapPosition:
    """A tile coordinate on the map."""

    x: int = 0
    y: int = 0


@dataclass
class SheetSprite:
    """Which cell of which tile sheet an entity is drawn with."""

    tilesheet: TileSheetType
    tilesheet_x: int
    tilesheet_y: int


@dataclass
class Target:
    """Where an entity wants to go and the path planned to get there."""

    path: list[MapPosition] | None = None
    position: MapPosition | None = None


@dataclass
class Walkable:
    """A tile that can be walked on at the given cost."""

    cost: int = 0


@dataclass
class Transform:
    """Position of an entity in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class HighlightEvent:
    """Request to add (``add=True``) or remove a highlight from an entity."""

    entity: int
    add: bool