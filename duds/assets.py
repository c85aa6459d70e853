"""Tile sheet loading, slicing into sprites, and placing sprites in the world."""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from duds.components import (
    Layer,
    MapPosition,
    Moving,
    SheetSprite,
    TileSheetType,
    Transform,
)
from duds.ecs import World
from duds.highlight import Material
from duds.tilemap import TILE_SIZE

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4
DEFAULT_SPEED = 100.0
SNAP_DISTANCE_SQUARED = 1.0

SHEET_PATHS = {
    TileSheetType.WORLD: "tilesheets/tiny_dungeon_world.png",
    TileSheetType.MONSTERS: "tilesheets/tiny_dungeon_monsters.png",
}

SpriteKey = tuple[TileSheetType, tuple[int, int]]


@dataclass
class SheetImage:
    """An RGBA image; ``data`` is None while the image is not loaded."""

    width: int
    height: int
    data: bytes | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if self.data is not None:
            self.data = bytes(self.data)
            expected = self.width * self.height * BYTES_PER_PIXEL
            if len(self.data) != expected:
                raise ValueError(
                    f"expected {expected} bytes of RGBA data, got {len(self.data)}"
                )

    @property
    def loaded(self) -> bool:
        return self.data is not None


@dataclass
class SpriteCache:
    """Sprites cut from tile sheets, keyed by sheet and ``(row, column)``."""

    sprites: dict[SpriteKey, SheetImage] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.sprites)

    def __contains__(self, key: object) -> bool:
        return key in self.sprites

    def lookup(self, sprite: SheetSprite) -> SheetImage | None:
        """The cached image a sheet sprite refers to, if any."""
        return self.sprites.get((sprite.tilesheet, (sprite.tilesheet_x, sprite.tilesheet_y)))


@dataclass
class AssetManager:
    """Knows where each tile sheet lives and loads them from disk."""

    root: Path = Path("assets")
    sheets: dict[TileSheetType, str] = field(default_factory=lambda: dict(SHEET_PATHS))

    def path(self, sheet_type: TileSheetType) -> Path:
        return Path(self.root) / self.sheets[sheet_type]

    def load(self) -> dict[TileSheetType, SheetImage | None]:
        """Load every sheet; a sheet that cannot be read maps to None."""
        images: dict[TileSheetType, SheetImage | None] = {}
        for sheet_type in self.sheets:
            path = self.path(sheet_type)
            try:
                surface = pygame.image.load(str(path))
            except (pygame.error, FileNotFoundError, OSError) as error:
                logger.warning("Failed loading sheet %s from %s: %s", sheet_type, path, error)
                images[sheet_type] = None
                continue
            images[sheet_type] = SheetImage(
                surface.get_width(),
                surface.get_height(),
                pygame.image.tobytes(surface, "RGBA"),
            )
        return images


def slice_tilesheet(image: SheetImage, sheet_type: TileSheetType, cache: SpriteCache) -> int:
    """Cut a sheet into tiles stored under ``(row, column)``; return how many were added."""
    if image.data is None:
        logger.warning("Image data not loaded yet for sheet: %s", sheet_type)
        return 0
    columns = image.width // TILE_SIZE
    rows = image.height // TILE_SIZE
    stride = TILE_SIZE * BYTES_PER_PIXEL
    data = image.data
    for row, column in itertools.product(range(rows), range(columns)):
        top = row * TILE_SIZE
        left = column * TILE_SIZE
        tile = b"".join(
            data[start : start + stride]
            for start in (
                ((top + line) * image.width + left) * BYTES_PER_PIXEL
                for line in range(TILE_SIZE)
            )
        )
        cache.sprites[(sheet_type, (row, column))] = SheetImage(TILE_SIZE, TILE_SIZE, tile)
        logger.debug("Inserted sprite: (%s, %d, %d)", sheet_type, column, row)
    return rows * columns


def slice_tilesheets_into_cache(
    images: Mapping[TileSheetType, SheetImage | None], cache: SpriteCache
) -> int:
    """Slice every loaded sheet into the cache; return the number of sprites added."""
    total = 0
    for sheet_type, image in images.items():
        if image is None:
            logger.warning("Failed getting image data for sheet: %s", sheet_type)
            continue
        total += slice_tilesheet(image, sheet_type, cache)
    logger.info("Finished slicing all tilesheets.")
    return total


def attach_sprites(world: World, cache: SpriteCache) -> list[int]:
    """Give each undrawn sprite entity a transform and textured material.

    Entities whose sprite is not in the cache are left alone. Returns the
    entities that were given a material.
    """
    attached = []
    for entity, sprite, position in world.query(SheetSprite, MapPosition, without=Material):
        image = cache.lookup(sprite)
        if image is None:
            continue
        layer = world.get(entity, Layer)
        world.insert(
            entity,
            Transform(
                float(position.x),
                float(position.y),
                float(layer.value) if layer is not None else 0.0,
            ),
            Material(texture=image),
        )
        attached.append(entity)
    return attached


def sync_transform_to_map_position(world: World, delta: float) -> None:
    """Glide each transform towards its map position, snapping once within a tile."""
    for entity, position, transform in world.query(MapPosition, Transform):
        dx = position.x - transform.x
        dy = position.y - transform.y
        distance_squared = dx * dx + dy * dy
        if distance_squared < SNAP_DISTANCE_SQUARED:
            transform.x = float(position.x)
            transform.y = float(position.y)
            continue
        moving = world.get(entity, Moving)
        speed = moving.speed * TILE_SIZE if moving is not None else DEFAULT_SPEED
        step = speed * delta / math.sqrt(distance_squared)
        transform.x += dx * step
        transform.y += dy * step