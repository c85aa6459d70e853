"""The game loop: state, scheduling of the systems, camera and window."""

from __future__ import annotations

import argparse
import logging
import math
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import pygame

from duds.assets import (
    AssetManager,
    SheetImage,
    SpriteCache,
    attach_sprites,
    slice_tilesheets_into_cache,
    sync_transform_to_map_position,
)
from duds.components import (
    HighlightEvent,
    Layer,
    MapPosition,
    Player,
    SheetSprite,
    Target,
    TileSheetType,
    Transform,
    Walkable,
)
from duds.cursor import cursor_clicked
from duds.ecs import World
from duds.gameui import Button, Interaction, button_system
from duds.generation import generate_test_map, walkable_hover
from duds.highlight import BLACK, Material, highlight_changed, highlight_target_path
from duds.pathfinding import find_path, move_along_path

TITLE = "Duds"
WINDOW_SIZE = (1280, 720)
FIXED_STEP = 1.0 / 64.0
CAMERA_SPEED = 10.0
FIELD_OF_VIEW = math.pi / 4.0
NEAR_PLANE = 0.1
BACKGROUND = (30, 30, 30)

_KEY_DIRECTIONS = {
    "q": (0.0, 0.0, 1.0),
    "e": (0.0, 0.0, -1.0),
    "w": (0.0, 1.0, 0.0),
    "s": (0.0, -1.0, 0.0),
    "a": (-1.0, 0.0, 0.0),
    "d": (1.0, 0.0, 0.0),
}


class AppState(Enum):
    ASSET_LOADING = "asset_loading"
    GAME = "game"


@dataclass
class Camera:
    """A camera looking down at the map; WASD pans and Q/E raise and lower it."""

    transform: Transform = field(default_factory=lambda: Transform(10.0, 10.0, 30.0))
    look_at: tuple[float, float, float] = (10.0, 10.0, 2.0)

    def move(self, keys: Iterable[str], delta: float) -> None:
        """Move by the summed directions of the pressed keys."""
        pressed = {key.lower() for key in keys}
        step = delta * CAMERA_SPEED
        for key in pressed & _KEY_DIRECTIONS.keys():
            dx, dy, dz = _KEY_DIRECTIONS[key]
            self.transform.x += dx * step
            self.transform.y += dy * step
            self.transform.z += dz * step


def spawn_player(world: World) -> int:
    """Place the player on the map and return its entity."""
    return world.spawn(
        Player(),
        Target(path=None, position=None),
        SheetSprite(TileSheetType.MONSTERS, 2, 1),
        MapPosition(10, 10),
        Layer(1),
    )


def _target_snapshot(target: Target) -> tuple:
    path = tuple(target.path) if target.path is not None else None
    return path, target.position


class Game:
    """The world, its resources and the per-frame systems that act on them."""

    def __init__(
        self,
        images: Mapping[TileSheetType, SheetImage | None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = World()
        self.cache = SpriteCache()
        self.images = dict(images) if images else {}
        self.rng = rng
        self.state = AppState.ASSET_LOADING
        self.camera = Camera()
        self.button = Button()
        self.button_interaction = Interaction.NONE
        self.pressed_keys: set[str] = set()
        self.left_just_pressed = False
        self.player: int | None = None
        self.elapsed = 0.0
        self._highlight_events: list[HighlightEvent] = []
        self._target_snapshots: dict[int, tuple] = {}

    def setup(self) -> None:
        """Spawn the player and the map."""
        self.player = spawn_player(self.world)
        generate_test_map(self.world, self.rng)

    def hover(self, entity: int) -> None:
        """Report that the pointer moved onto ``entity``."""
        self._highlight_events.extend(walkable_hover(self.world, entity))

    def _changed_targets(self) -> list[Target]:
        changed = []
        snapshots = {}
        for entity, target in self.world.query(Target):
            snapshot = _target_snapshot(target)
            snapshots[entity] = snapshot
            if self._target_snapshots.get(entity) != snapshot:
                changed.append(target)
        self._target_snapshots = snapshots
        return changed

    def update(self, delta: float) -> None:
        """Run one frame of the per-frame systems."""
        self.elapsed += delta
        if self.state is AppState.ASSET_LOADING:
            slice_tilesheets_into_cache(self.images, self.cache)
            self.state = AppState.GAME
        else:
            attach_sprites(self.world, self.cache)
        cursor_clicked(self.world, self.left_just_pressed)
        self.left_just_pressed = False
        events, self._highlight_events = self._highlight_events, []
        highlight_changed(self.world, events)
        highlight_target_path(self.world, self._changed_targets())
        find_path(self.world)
        button_system([self.button], [self.button_interaction])

    def fixed_update(self, delta: float) -> None:
        """Run one fixed time step of movement and camera control."""
        move_along_path(self.world, delta)
        sync_transform_to_map_position(self.world, delta)
        self.camera.move(self.pressed_keys, delta)


def _scale(camera: Camera, z: float) -> float:
    distance = max(camera.transform.z - z, NEAR_PLANE)
    return WINDOW_SIZE[1] / (2.0 * distance * math.tan(FIELD_OF_VIEW / 2.0))


def _to_screen(camera: Camera, transform: Transform) -> tuple[tuple[float, float], float]:
    scale = _scale(camera, transform.z)
    return (
        (
            WINDOW_SIZE[0] / 2 + (transform.x - camera.transform.x) * scale,
            WINDOW_SIZE[1] / 2 - (transform.y - camera.transform.y) * scale,
        ),
        scale,
    )


def _to_tile(camera: Camera, point: tuple[int, int]) -> MapPosition | None:
    scale = _scale(camera, 0.0)
    x = round(camera.transform.x + (point[0] - WINDOW_SIZE[0] / 2) / scale)
    y = round(camera.transform.y - (point[1] - WINDOW_SIZE[1] / 2) / scale)
    if x < 0 or y < 0:
        return None
    return MapPosition(x, y)


def _rgba(color: tuple[float, ...]) -> tuple[int, ...]:
    channels = tuple(round(c * 255) for c in color)
    return channels if len(channels) == 4 else (*channels, 255)


def _texture(textures: dict, image: SheetImage, size: int) -> pygame.Surface:
    key = (id(image), size)
    if key not in textures:
        surface = pygame.image.frombuffer(image.data, (image.width, image.height), "RGBA")
        textures[key] = pygame.transform.scale(surface, (size, size))
    return textures[key]


def _button_rect() -> pygame.Rect:
    rect = pygame.Rect(0, 0, 150, 65)
    rect.x = round((WINDOW_SIZE[0] * 0.2 - rect.width) / 2)
    return rect


def _draw(screen: pygame.Surface, game: Game, textures: dict, font: pygame.font.Font) -> None:
    screen.fill(BACKGROUND)
    drawables = sorted(
        ((transform, material) for _, transform, material in game.world.query(Transform, Material)),
        key=lambda item: item[0].z,
    )
    for transform, material in drawables:
        (sx, sy), scale = _to_screen(game.camera, transform)
        factor = 1.0 if material.texture is not None else 0.8
        size = max(1, round(scale * factor))
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (round(sx), round(sy))
        if material.texture is not None:
            screen.blit(_texture(textures, material.texture, size), rect)
        else:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(_rgba(material.base_color))
            screen.blit(overlay, rect)
        if material.emissive != BLACK:
            glow = pygame.Surface(rect.size)
            glow.fill(_rgba(material.emissive)[:3])
            screen.blit(glow, rect, special_flags=pygame.BLEND_RGB_ADD)

    button = game.button
    rect = _button_rect()
    pygame.draw.rect(screen, _rgba(button.background), rect, border_radius=rect.height // 2)
    pygame.draw.rect(
        screen,
        _rgba(button.border),
        rect,
        width=round(button.border_width),
        border_radius=rect.height // 2,
    )
    label = font.render(button.text, True, _rgba(button.text_color))
    screen.blit(label, label.get_rect(midtop=(rect.centerx, rect.top + round(button.border_width))))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="duds", description="A small tile dungeon.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="asset directory")
    parser.add_argument("--seed", type=int, default=None, help="seed for map generation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 28)
        game = Game(AssetManager(args.assets).load(), random.Random(args.seed))
        game.setup()
        floor_tiles = {
            position: entity for entity, position, _ in game.world.query(MapPosition, Walkable)
        }
        key_names = {getattr(pygame, f"K_{name}"): name for name in _KEY_DIRECTIONS}
        textures: dict = {}
        clock = pygame.time.Clock()
        accumulator = 0.0
        hovered: int | None = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.left_just_pressed = True

            mouse = pygame.mouse.get_pos()
            tile = _to_tile(game.camera, mouse)
            entity = floor_tiles.get(tile) if tile is not None else None
            if entity is not None and entity != hovered:
                game.hover(entity)
            hovered = entity

            pressed = pygame.key.get_pressed()
            game.pressed_keys = {name for key, name in key_names.items() if pressed[key]}
            if _button_rect().collidepoint(mouse):
                game.button_interaction = (
                    Interaction.PRESSED if pygame.mouse.get_pressed()[0] else Interaction.HOVERED
                )
            else:
                game.button_interaction = Interaction.NONE

            delta = clock.tick(60) / 1000.0
            game.update(delta)
            accumulator += delta
            while accumulator >= FIXED_STEP:
                game.fixed_update(FIXED_STEP)
                accumulator -= FIXED_STEP

            _draw(screen, game, textures, font)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0