"""Component bundles for the standard map tiles."""

from __future__ import annotations

from duds.components import (
    Blocking,
    Layer,
    MapPosition,
    SheetSprite,
    TileSheetType,
    Walkable,
)


def floor_tile(
    map_position: MapPosition | None = None,
    sheet_sprite: SheetSprite | None = None,
    walkable: Walkable | None = None,
) -> tuple[Walkable, SheetSprite, MapPosition]:
    """Components of a walkable floor tile."""
    return (
        walkable if walkable is not None else Walkable(),
        sheet_sprite if sheet_sprite is not None else SheetSprite(TileSheetType.WORLD, 5, 8),
        map_position if map_position is not None else MapPosition(),
    )


def wall_tile(
    map_position: MapPosition | None = None,
) -> tuple[Blocking, SheetSprite, MapPosition, Layer]:
    """Components of a blocking wall tile, drawn one layer up."""
    return (
        Blocking(),
        SheetSprite(TileSheetType.WORLD, 16, 6),
        map_position if map_position is not None else MapPosition(),
        Layer(1),
    )